"""Renderer for titled detail sections with "label: value" lines."""

from doctemplate.interfaces.schema import DataRecord, SectionKind, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, FieldLine, RenderNode, StyleHints
from doctemplate.strategies.sections.text import merge_style
from doctemplate.strategies.template_engine.parser import (
    is_present,
    replace_placeholders,
    to_display_string,
)


class DetailSectionRenderer(BaseSectionRenderer):
    """Renders a ``section`` kind: heading, optional text and field lines.

    Fields without a value are omitted rather than rendered blank, so a
    partially filled invoice does not show empty "Tax:" rows.
    """

    kind = SectionKind.SECTION

    def __init__(self, heading_font_size: float = 13) -> None:
        self._heading_style = StyleHints(size=heading_font_size, weight="bold", align="left")

    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode:
        lines = tuple(
            FieldLine(label=field.label, value=to_display_string(data.get(field.key)))
            for field in section.fields or []
            if is_present(data.get(field.key))
        )
        return RenderNode(
            kind=self.kind,
            section_id=section.id,
            title=replace_placeholders(section.title, data) or None,
            text=replace_placeholders(section.content, data) or None,
            style=merge_style(self._heading_style, section.style),
            field_lines=lines,
        )
