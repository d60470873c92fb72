"""Template rendering interfaces and errors."""

from abc import ABC, abstractmethod

from doctemplate.interfaces.section_renderer import RenderNode
from doctemplate.interfaces.schema import DataRecord, Template


class BaseTemplateRenderer(ABC):
    """Abstract base class for whole-template renderers.

    Implementations must be pure: same template and data, same nodes.
    """

    @abstractmethod
    def render(self, template: Template, data: DataRecord) -> list[RenderNode]:
        """Render every visible section of a template.

        Args:
            template: The template to render.
            data: The resolved data record. Defaults are not merged here.

        Returns:
            Render nodes in section declaration order.
        """


class TemplateLoadError(ValueError):
    """Exception raised when a template document cannot be parsed."""

    pass


class TemplateNotFoundError(LookupError):
    """Exception raised when a template id is not in the catalog."""

    pass
