"""Renderer for table sections."""

import logging
from collections.abc import Mapping
from typing import Any

from doctemplate.interfaces.schema import DataRecord, SectionKind, TableColumn, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, RenderNode
from doctemplate.strategies.template_engine.parser import replace_placeholders, to_display_string

logger = logging.getLogger(__name__)

# Shared row key used by older templates. Ambiguous with several tables.
LEGACY_TABLE_DATA_KEY = "tableData"


class TableRenderer(BaseSectionRenderer):
    """Renders a header row plus one row per data entry.

    Rows are read from ``data[section.id]``. When that key is absent and
    the legacy fallback is enabled, ``data["tableData"]`` is used instead.
    Sections without columns produce no node.
    """

    kind = SectionKind.TABLE

    def __init__(self, legacy_fallback: bool = True) -> None:
        self._legacy_fallback = legacy_fallback

    def _row_source(self, section: TemplateSection, data: DataRecord) -> Any:
        if data.get(section.id) is not None:
            return data[section.id]
        if self._legacy_fallback and data.get(LEGACY_TABLE_DATA_KEY) is not None:
            logger.warning(
                f"Table section '{section.id}' reads rows from deprecated "
                f"'{LEGACY_TABLE_DATA_KEY}' key; key the rows by section id instead"
            )
            return data[LEGACY_TABLE_DATA_KEY]
        return []

    @staticmethod
    def _cells(row: Any, columns: list[TableColumn]) -> tuple[str, ...]:
        if not isinstance(row, Mapping):
            return tuple("" for _ in columns)
        return tuple(to_display_string(row.get(column.key)) for column in columns)

    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode | None:
        columns = section.columns or []
        if not columns:
            logger.debug(f"Skipping table section '{section.id}' without columns")
            return None

        source = self._row_source(section, data)
        entries = source if isinstance(source, (list, tuple)) else []

        return RenderNode(
            kind=self.kind,
            section_id=section.id,
            title=replace_placeholders(section.title, data) or None,
            header_row=tuple(column.label for column in columns),
            rows=tuple(self._cells(row, columns) for row in entries),
        )
