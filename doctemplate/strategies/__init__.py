"""Concrete strategy implementations."""

from doctemplate.strategies.sections import (
    BodyRenderer,
    DetailSectionRenderer,
    FooterRenderer,
    HeaderRenderer,
    SeparatorRenderer,
    SignatureRenderer,
    TableRenderer,
    TemplateRenderer,
)

__all__ = [
    "BodyRenderer",
    "DetailSectionRenderer",
    "FooterRenderer",
    "HeaderRenderer",
    "SeparatorRenderer",
    "SignatureRenderer",
    "TableRenderer",
    "TemplateRenderer",
]
