"""Schema types, render-node contract and abstract base classes."""

from doctemplate.interfaces.schema import (
    ColumnType,
    DataRecord,
    FieldOption,
    FieldType,
    FieldValidation,
    SectionConditional,
    SectionKind,
    SectionStyle,
    TableColumn,
    Template,
    TemplateField,
    TemplateMetadata,
    TemplateSection,
)
from doctemplate.interfaces.section_renderer import (
    BaseSectionRenderer,
    FieldLine,
    RenderNode,
    StyleHints,
)
from doctemplate.interfaces.template import (
    BaseTemplateRenderer,
    TemplateLoadError,
    TemplateNotFoundError,
)

__all__ = [
    "ColumnType",
    "DataRecord",
    "FieldOption",
    "FieldType",
    "FieldValidation",
    "SectionConditional",
    "SectionKind",
    "SectionStyle",
    "TableColumn",
    "Template",
    "TemplateField",
    "TemplateMetadata",
    "TemplateSection",
    "BaseSectionRenderer",
    "FieldLine",
    "RenderNode",
    "StyleHints",
    "BaseTemplateRenderer",
    "TemplateLoadError",
    "TemplateNotFoundError",
]
