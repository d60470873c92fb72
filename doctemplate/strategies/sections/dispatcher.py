"""Section dispatcher.

Walks a template's sections in declaration order, evaluates each section's
visibility rule and hands visible sections to the strategy registered for
their kind.
"""

import logging
from collections.abc import Mapping

from doctemplate.interfaces.schema import DataRecord, SectionKind, Template, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, RenderNode
from doctemplate.interfaces.template import BaseTemplateRenderer
from doctemplate.strategies.sections.detail import DetailSectionRenderer
from doctemplate.strategies.sections.separator import SeparatorRenderer
from doctemplate.strategies.sections.signature import SignatureRenderer
from doctemplate.strategies.sections.table import TableRenderer
from doctemplate.strategies.sections.text import BodyRenderer, FooterRenderer, HeaderRenderer
from doctemplate.strategies.template_engine.parser import is_truthy

logger = logging.getLogger(__name__)


def default_section_renderers() -> dict[SectionKind, BaseSectionRenderer]:
    """Return one default-configured renderer per section kind."""
    renderers: list[BaseSectionRenderer] = [
        HeaderRenderer(),
        BodyRenderer(),
        FooterRenderer(),
        DetailSectionRenderer(),
        SeparatorRenderer(),
        TableRenderer(),
        SignatureRenderer(),
    ]
    return {renderer.kind: renderer for renderer in renderers}


def is_section_visible(section: TemplateSection, data: DataRecord) -> bool:
    """Evaluate a section's conditional.

    ``show_if`` is checked first: a falsy value hides the section. Then a
    truthy ``hide_if`` value hides it. Sections without a conditional are
    always visible.
    """
    conditional = section.conditional
    if conditional is None:
        return True
    if conditional.show_if and not is_truthy(data.get(conditional.show_if)):
        return False
    if conditional.hide_if and is_truthy(data.get(conditional.hide_if)):
        return False
    return True


class TemplateRenderer(BaseTemplateRenderer):
    """Turns a template plus data into an ordered list of render nodes.

    The renderer holds no per-call state and may be shared across threads.
    """

    def __init__(self, renderers: Mapping[SectionKind, BaseSectionRenderer] | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            renderers: Strategy per section kind. Defaults to
                default_section_renderers().

        Raises:
            ValueError: If a section kind has no renderer.
        """
        registry = dict(renderers) if renderers is not None else default_section_renderers()
        missing = [kind.value for kind in SectionKind if kind not in registry]
        if missing:
            raise ValueError(f"No renderer registered for section kind(s): {', '.join(missing)}")
        self._renderers = registry

    def render_section(self, section: TemplateSection, data: DataRecord) -> RenderNode | None:
        """Render one section, or return None if it is hidden or unsupported."""
        if not is_section_visible(section, data):
            logger.debug(f"Section '{section.id}' hidden by conditional")
            return None

        kind = section.section_kind
        if kind is None:
            logger.debug(f"Skipping section '{section.id}' with unsupported kind '{section.kind}'")
            return None

        return self._renderers[kind].render(section, data)

    def render(self, template: Template, data: DataRecord) -> list[RenderNode]:
        """Render every visible section of a template.

        Args:
            template: The template to render.
            data: The resolved data record. Defaults are not merged here.

        Returns:
            Render nodes in section declaration order.

        Raises:
            TypeError: If sections is not a list or data is not a mapping.
        """
        if not isinstance(template.sections, list):
            raise TypeError(f"template sections must be a list, got {type(template.sections).__name__}")
        if not isinstance(data, Mapping):
            raise TypeError(f"data must be a mapping, got {type(data).__name__}")

        nodes: list[RenderNode] = []
        for section in template.sections:
            node = self.render_section(section, data)
            if node is not None:
                nodes.append(node)

        logger.debug(
            f"Rendered template '{template.id}': {len(nodes)} of "
            f"{len(template.sections)} sections produced output"
        )
        return nodes
