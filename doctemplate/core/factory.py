"""Component Factory for strategy instantiation.

Builds section renderers and the template renderer from Settings so that
style tiers, markers and the legacy table fallback are configured in one
place instead of being hardcoded in each strategy.
"""

import logging

from doctemplate.core.config import Settings, get_settings
from doctemplate.interfaces.schema import SectionKind
from doctemplate.interfaces.section_renderer import BaseSectionRenderer
from doctemplate.interfaces.template import BaseTemplateRenderer
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

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        renderer = factory.get_template_renderer()
        nodes = renderer.render(template, data)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Engine settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._section_renderer_cache: dict[SectionKind, BaseSectionRenderer] = {}
        self._template_renderer_cache: BaseTemplateRenderer | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_section_renderer(self, kind: SectionKind | str) -> BaseSectionRenderer:
        """Get the renderer for a section kind.

        Args:
            kind: A SectionKind or its string value.

        Returns:
            A BaseSectionRenderer implementation instance.

        Raises:
            ValueError: If the section kind is unknown.
        """
        try:
            kind = SectionKind(kind)
        except ValueError:
            raise ValueError(
                f"Unknown section kind: {kind}. "
                f"Valid options: {', '.join(k.value for k in SectionKind)}"
            ) from None

        if kind not in self._section_renderer_cache:
            logger.debug(f"Instantiating section renderer: {kind.value}")
            settings = self._settings

            match kind:
                case SectionKind.HEADER:
                    renderer: BaseSectionRenderer = HeaderRenderer(font_size=settings.header_font_size)
                case SectionKind.BODY:
                    renderer = BodyRenderer(font_size=settings.body_font_size)
                case SectionKind.FOOTER:
                    renderer = FooterRenderer(font_size=settings.footer_font_size)
                case SectionKind.SECTION:
                    renderer = DetailSectionRenderer(heading_font_size=settings.heading_font_size)
                case SectionKind.SEPARATOR:
                    renderer = SeparatorRenderer(width=settings.separator_width)
                case SectionKind.TABLE:
                    renderer = TableRenderer(legacy_fallback=settings.table_data_fallback)
                case SectionKind.SIGNATURE:
                    renderer = SignatureRenderer(blank=settings.signature_blank)

            self._section_renderer_cache[kind] = renderer

        return self._section_renderer_cache[kind]

    def get_template_renderer(self) -> BaseTemplateRenderer:
        """Get the section dispatcher wired with configured renderers.

        Returns:
            A BaseTemplateRenderer implementation instance.
        """
        if self._template_renderer_cache is None:
            logger.info("Instantiating template renderer")
            self._template_renderer_cache = TemplateRenderer(
                {kind: self.get_section_renderer(kind) for kind in SectionKind}
            )
        return self._template_renderer_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._section_renderer_cache.clear()
        self._template_renderer_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
