"""Built-in document templates."""

from doctemplate.catalog.default_templates import (
    DEFAULT_TEMPLATES,
    get_default_template,
    list_default_templates,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "get_default_template",
    "list_default_templates",
]
