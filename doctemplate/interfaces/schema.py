"""Template schema models.

Pydantic models describing a document template: ordered sections, typed
fields and table columns. The models accept the camelCase keys used by stored
template documents (``defaultValue``, ``showIf``, ``fontSize``) as well as the
snake_case attribute names.
"""

import enum
from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Scalar: TypeAlias = str | int | float | bool

# Runtime key -> value map supplied per render. Values are scalars, string
# lists (multiselect) or lists of row mappings (tables).
DataRecord: TypeAlias = Mapping[str, Any]


class FieldType(str, enum.Enum):
    """Editable field types."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    EMAIL = "email"
    PHONE = "phone"
    SELECT = "select"
    MULTISELECT = "multiselect"
    CHECKBOX = "checkbox"
    IMAGE = "image"
    TABLE = "table"


class SectionKind(str, enum.Enum):
    """Structural section kinds understood by the renderer."""

    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"
    SECTION = "section"
    SEPARATOR = "separator"
    TABLE = "table"
    SIGNATURE = "signature"


class ColumnType(str, enum.Enum):
    """Table column value types."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"


class SchemaModel(BaseModel):
    """Base model for template schema objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class FieldOption(SchemaModel):
    """A choice offered by select and multiselect fields."""

    label: str
    value: str


class FieldValidation(SchemaModel):
    """Optional value constraints attached to a field."""

    min: float | None = None
    max: float | None = None
    pattern: str | None = None
    message: str | None = None


class TemplateField(SchemaModel):
    """A named, typed editable value referenced by the template."""

    id: str = Field(description="Stable identifier of the field")
    key: str = Field(description="Key used to look the value up in the data record")
    label: str = Field(description="Human readable label")
    type: FieldType = Field(default=FieldType.TEXT)
    required: bool = False
    default_value: Scalar | None = Field(default=None, description="Value used when data omits the key")
    placeholder: str | None = None
    options: list[FieldOption] | None = None
    validation: FieldValidation | None = None


class TableColumn(SchemaModel):
    """A column of a table section."""

    id: str
    key: str
    label: str
    type: ColumnType = ColumnType.TEXT
    width: str | None = None


class SectionStyle(SchemaModel):
    """Section-level style overrides."""

    font_size: float | None = None
    font_weight: str | None = None
    text_align: str | None = None
    margin_top: float | None = None
    margin_bottom: float | None = None


class SectionConditional(SchemaModel):
    """Visibility rule evaluated against the data record."""

    show_if: str | None = Field(default=None, description="Key whose value must be truthy")
    hide_if: str | None = Field(default=None, description="Key whose value must be falsy")


class TemplateSection(SchemaModel):
    """One structural unit of a template.

    ``kind`` is kept as a plain string so templates authored for newer
    section kinds still load; the renderer skips kinds it does not know.
    """

    id: str
    kind: str = Field(alias="type", description="Section kind, see SectionKind")
    title: str | None = None
    content: str | None = None
    fields: list[TemplateField] | None = None
    columns: list[TableColumn] | None = None
    style: SectionStyle | None = None
    conditional: SectionConditional | None = None

    @property
    def section_kind(self) -> SectionKind | None:
        """Return the known SectionKind, or None for unsupported kinds."""
        try:
            return SectionKind(self.kind)
        except ValueError:
            return None


class TemplateMetadata(SchemaModel):
    """Authoring metadata."""

    author: str | None = None
    tags: list[str] | None = None


class Template(SchemaModel):
    """Declarative document template.

    ``sections`` order is significant and preserved by the renderer.
    ``fields`` are global fields available across all sections.
    """

    id: str
    name: str
    version: str = "1.0.0"
    description: str | None = None
    category: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    sections: list[TemplateSection] = Field(default_factory=list)
    fields: list[TemplateField] = Field(default_factory=list)
    metadata: TemplateMetadata | None = None


def template_json_schema() -> dict[str, Any]:
    """Return the JSON schema of a template document (camelCase keys)."""
    return Template.model_json_schema(by_alias=True)
