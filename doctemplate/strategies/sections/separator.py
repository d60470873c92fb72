"""Renderer for separator sections."""

from doctemplate.interfaces.schema import DataRecord, SectionKind, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, RenderNode


class SeparatorRenderer(BaseSectionRenderer):
    """Emits a fixed-width divider. Ignores the data record."""

    kind = SectionKind.SEPARATOR

    def __init__(self, width: int = 80, char: str = "-") -> None:
        self._divider = char * width

    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode:
        return RenderNode(kind=self.kind, section_id=section.id, divider=self._divider)
