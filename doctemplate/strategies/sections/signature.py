"""Renderer for signature blocks."""

from doctemplate.interfaces.schema import DataRecord, SectionKind, TemplateSection
from doctemplate.interfaces.section_renderer import BaseSectionRenderer, FieldLine, RenderNode
from doctemplate.strategies.template_engine.parser import (
    is_present,
    replace_placeholders,
    to_display_string,
)

DEFAULT_SIGNATURE_TITLE = "Signature"


class SignatureRenderer(BaseSectionRenderer):
    """Renders a signature box.

    Every declared field gets a line. Fields without a value get a blank
    fill-in marker so the printed document can be signed by hand. A
    signature line always follows the fields.
    """

    kind = SectionKind.SIGNATURE

    def __init__(self, blank: str = "_" * 24) -> None:
        self._blank = blank

    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode:
        lines = []
        for field in section.fields or []:
            value = data.get(field.key)
            if is_present(value):
                lines.append(FieldLine(label=field.label, value=to_display_string(value)))
            else:
                lines.append(FieldLine(label=field.label, value=self._blank, blank=True))

        return RenderNode(
            kind=self.kind,
            section_id=section.id,
            title=replace_placeholders(section.title, data) or DEFAULT_SIGNATURE_TITLE,
            field_lines=tuple(lines),
            signature_line=True,
        )
