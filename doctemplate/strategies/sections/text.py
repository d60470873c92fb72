"""Renderers for plain text sections: header, body and footer.

All three resolve the section content through the placeholder parser and
differ only in their default style.
"""

from doctemplate.interfaces.schema import DataRecord, SectionKind, SectionStyle, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, RenderNode, StyleHints
from doctemplate.strategies.template_engine.parser import replace_placeholders


def merge_style(defaults: StyleHints, override: SectionStyle | None) -> StyleHints:
    """Apply section-level style overrides on top of kind defaults.

    Unset or empty override attributes keep the default.
    """
    if override is None:
        return defaults
    return StyleHints(
        size=override.font_size or defaults.size,
        weight=override.font_weight or defaults.weight,
        align=override.text_align or defaults.align,
        margin_top=override.margin_top or defaults.margin_top,
        margin_bottom=override.margin_bottom or defaults.margin_bottom,
    )


class TextSectionRenderer(BaseSectionRenderer):
    """Resolves ``content`` and attaches the kind's style.

    Attributes:
        default_style: Style used where the section does not override it.
    """

    def __init__(self, default_style: StyleHints) -> None:
        self._default_style = default_style

    @property
    def default_style(self) -> StyleHints:
        return self._default_style

    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode:
        return RenderNode(
            kind=self.kind,
            section_id=section.id,
            text=replace_placeholders(section.content, data),
            style=merge_style(self._default_style, section.style),
        )


class HeaderRenderer(TextSectionRenderer):
    """Document header, large bold centered text by default."""

    kind = SectionKind.HEADER

    def __init__(self, font_size: float = 18) -> None:
        super().__init__(StyleHints(size=font_size, weight="bold", align="center"))


class BodyRenderer(TextSectionRenderer):
    """Running body text."""

    kind = SectionKind.BODY

    def __init__(self, font_size: float = 11) -> None:
        super().__init__(StyleHints(size=font_size, weight="normal", align="left"))


class FooterRenderer(TextSectionRenderer):
    """Footer text, one size tier below body text."""

    kind = SectionKind.FOOTER

    def __init__(self, font_size: float = 9) -> None:
        super().__init__(StyleHints(size=font_size, weight="normal", align="left"))
