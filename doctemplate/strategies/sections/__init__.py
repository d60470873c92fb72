"""Section rendering strategies, one per section kind, and their dispatcher."""

from doctemplate.strategies.sections.detail import DetailSectionRenderer
from doctemplate.strategies.sections.separator import SeparatorRenderer
from doctemplate.strategies.sections.signature import SignatureRenderer
from doctemplate.strategies.sections.table import LEGACY_TABLE_DATA_KEY, TableRenderer
from doctemplate.strategies.sections.text import (
    BodyRenderer,
    FooterRenderer,
    HeaderRenderer,
    TextSectionRenderer,
    merge_style,
)
from doctemplate.strategies.sections.dispatcher import (
    TemplateRenderer,
    default_section_renderers,
    is_section_visible,
)

__all__ = [
    "BodyRenderer",
    "DetailSectionRenderer",
    "FooterRenderer",
    "HeaderRenderer",
    "LEGACY_TABLE_DATA_KEY",
    "SeparatorRenderer",
    "SignatureRenderer",
    "TableRenderer",
    "TemplateRenderer",
    "TextSectionRenderer",
    "default_section_renderers",
    "is_section_visible",
    "merge_style",
]
