"""Field discovery.

Builds the complete, ordered set of editable fields for a template: declared
fields plus fields implied by placeholders and table sections. Identical
templates always yield identical field lists.
"""

import logging
from dataclasses import dataclass

from doctemplate.interfaces.schema import (
    FieldType,
    SectionKind,
    Template,
    TemplateField,
)
from doctemplate.strategies.template_engine.parser import extract_field_keys, humanize_key

logger = logging.getLogger(__name__)

IMPLICIT_FIELD_PREFIX = "placeholder-"
DEFAULT_TABLE_LABEL = "Table Data"


@dataclass(frozen=True)
class FieldConflict:
    """Two declarations of the same key with different field types.

    Attributes:
        key: The shared field key.
        kept: The first declaration, which wins.
        ignored: The later declaration that was dropped.
        source: Where the ignored declaration came from ("section:<id>" or "table:<id>").
    """

    key: str
    kept: TemplateField
    ignored: TemplateField
    source: str


@dataclass(frozen=True)
class DiscoveredFields:
    """Result of field discovery.

    Attributes:
        fields: Unique fields in precedence order.
        conflicts: Type conflicts resolved by first-declaration-wins.
    """

    fields: tuple[TemplateField, ...]
    conflicts: tuple[FieldConflict, ...] = ()

    @property
    def keys(self) -> list[str]:
        return [field.key for field in self.fields]

    def get(self, key: str) -> TemplateField | None:
        for field in self.fields:
            if field.key == key:
                return field
        return None


def collect_declared_fields(template: Template) -> list[TemplateField]:
    """Return global fields followed by each section's fields, duplicates kept."""
    declared = list(template.fields)
    for section in template.sections:
        declared.extend(section.fields or [])
    return declared


def implicit_field(key: str) -> TemplateField:
    """Synthesize a plain text field for an undeclared placeholder key."""
    return TemplateField(
        id=f"{IMPLICIT_FIELD_PREFIX}{key}",
        key=key,
        label=humanize_key(key),
        type=FieldType.TEXT,
        required=False,
    )


def discover_fields(template: Template) -> DiscoveredFields:
    """Discover every editable field of a template.

    Precedence, first occurrence of a key wins:
        1. Template-level fields in declared order.
        2. Section fields, in section order then field order.
        3. Implicit fields from each section's content, then its title.
        4. One table field per table section that declares columns.

    A later declared field or table field whose type differs from the kept
    one is reported as a FieldConflict.

    Args:
        template: The template to inspect.

    Returns:
        DiscoveredFields with ordered fields and any conflicts.
    """
    known: dict[str, TemplateField] = {}
    conflicts: list[FieldConflict] = []

    def _declare(field: TemplateField, source: str) -> None:
        kept = known.get(field.key)
        if kept is None:
            known[field.key] = field
            return
        if kept.type != field.type:
            logger.warning(
                f"Field key conflict on '{field.key}': keeping {kept.type.value} "
                f"field '{kept.id}', ignoring {field.type.value} field '{field.id}' from {source}"
            )
            conflicts.append(FieldConflict(key=field.key, kept=kept, ignored=field, source=source))

    for field in template.fields:
        _declare(field, "template")

    for section in template.sections:
        for field in section.fields or []:
            _declare(field, f"section:{section.id}")

    for section in template.sections:
        for text in (section.content, section.title):
            for key in extract_field_keys(text):
                if key not in known:
                    known[key] = implicit_field(key)

    for section in template.sections:
        if section.section_kind is SectionKind.TABLE and section.columns:
            table_field = TemplateField(
                id=section.id,
                key=section.id,
                label=section.title or DEFAULT_TABLE_LABEL,
                type=FieldType.TABLE,
                required=False,
            )
            _declare(table_field, f"table:{section.id}")

    logger.debug(
        f"Discovered {len(known)} fields for template '{template.id}' "
        f"({len(conflicts)} conflicts)"
    )
    return DiscoveredFields(fields=tuple(known.values()), conflicts=tuple(conflicts))
