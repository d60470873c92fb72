"""Abstract base class for section rendering strategies.

Each section kind is rendered by its own strategy. Strategies turn one
section plus a data record into a presentation-agnostic RenderNode that an
external drawing layer lays out as PDF, HTML or anything else.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from doctemplate.interfaces.schema import DataRecord, SectionKind, TemplateSection


@dataclass(frozen=True)
class StyleHints:
    """Resolved text style for a node.

    Attributes:
        size: Font size in points.
        weight: "normal" or "bold".
        align: "left", "center" or "right".
        margin_top: Optional spacing above the node.
        margin_bottom: Optional spacing below the node.
    """

    size: float
    weight: str = "normal"
    align: str = "left"
    margin_top: float | None = None
    margin_bottom: float | None = None

    def to_dict(self) -> dict[str, Any]:
        raw = {
            "fontSize": self.size,
            "fontWeight": self.weight,
            "textAlign": self.align,
            "marginTop": self.margin_top,
            "marginBottom": self.margin_bottom,
        }
        return {key: value for key, value in raw.items() if value is not None}


@dataclass(frozen=True)
class FieldLine:
    """A "label: value" line.

    When ``blank`` is set the value is a fill-in marker rather than data.
    """

    label: str
    value: str
    blank: bool = False

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class RenderNode:
    """Resolved output for one visible section.

    Attributes:
        kind: The section kind that produced the node.
        section_id: Id of the source section.
        text: Resolved content text.
        title: Resolved title or heading text.
        style: Style hints for ``text`` (or for ``title`` on titled kinds).
        header_row: Table column labels.
        rows: Table data rows, one tuple of cell strings per entry.
        field_lines: "label: value" lines for section and signature kinds.
        divider: Divider text for separators.
        signature_line: Whether a signature line follows the node.
    """

    kind: SectionKind
    section_id: str
    text: str | None = None
    title: str | None = None
    style: StyleHints | None = None
    header_row: tuple[str, ...] | None = None
    rows: tuple[tuple[str, ...], ...] | None = None
    field_lines: tuple[FieldLine, ...] | None = None
    divider: str | None = None
    signature_line: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase dict sent to the drawing layer, omitting unset attributes."""
        raw: dict[str, Any] = {
            "kind": self.kind.value,
            "sectionId": self.section_id,
            "resolvedText": self.text,
            "title": self.title,
            "divider": self.divider,
        }
        if self.style is not None:
            raw["styleHints"] = self.style.to_dict()
        if self.header_row is not None:
            raw["headerRow"] = list(self.header_row)
        if self.rows is not None:
            raw["rows"] = [list(row) for row in self.rows]
        if self.field_lines is not None:
            raw["fieldLines"] = [
                {"label": line.label, "value": line.value, "text": line.text, "blank": line.blank}
                for line in self.field_lines
            ]
        if self.signature_line:
            raw["signatureLine"] = True
        return {key: value for key, value in raw.items() if value is not None}


class BaseSectionRenderer(ABC):
    """Abstract base class for section rendering strategies.

    Example:
        ```python
        class SeparatorRenderer(BaseSectionRenderer):
            kind = SectionKind.SEPARATOR

            def render(self, section, data):
                return RenderNode(kind=self.kind, section_id=section.id, divider="-" * 80)
        ```
    """

    kind: SectionKind

    @abstractmethod
    def render(self, section: TemplateSection, data: DataRecord) -> RenderNode | None:
        """Render a single visible section.

        Args:
            section: The section to render. Visibility was already checked.
            data: The resolved data record.

        Returns:
            A RenderNode, or None when the section produces no output.
        """
        ...
