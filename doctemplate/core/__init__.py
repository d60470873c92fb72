"""Core configuration, factory and engine components."""

from doctemplate.core.config import Settings, get_settings
from doctemplate.core.engine import DocumentRender, TemplateEngine
from doctemplate.core.factory import ComponentFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
    "DocumentRender",
    "TemplateEngine",
]
