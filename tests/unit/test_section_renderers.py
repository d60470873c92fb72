"""Unit tests for the per-kind section renderers."""

import logging

import pytest

from doctemplate.interfaces.schema import SectionKind, TemplateSection
from doctemplate.interfaces.section_renderer import FieldLine, RenderNode, StyleHints
from doctemplate.strategies.sections import (
    BodyRenderer,
    DetailSectionRenderer,
    FooterRenderer,
    HeaderRenderer,
    SeparatorRenderer,
    SignatureRenderer,
    TableRenderer,
)


def make_section(**kwargs) -> TemplateSection:
    return TemplateSection.model_validate(kwargs)


# =============================================================================
# Text Section Tests
# =============================================================================


class TestTextRenderers:
    """Test suite for header, body and footer renderers."""

    def test_header_defaults(self):
        """Test the header's default style and resolved content."""
        section = make_section(id="h", type="header", content="INVOICE\n{{companyName}}")
        node = HeaderRenderer().render(section, {"companyName": "Acme"})

        assert node.kind is SectionKind.HEADER
        assert node.section_id == "h"
        assert node.text == "INVOICE\nAcme"
        assert node.style == StyleHints(size=18, weight="bold", align="center")

    def test_header_style_overrides(self):
        """Test that section style overrides individual defaults."""
        section = make_section(
            id="h",
            type="header",
            content="Title",
            style={"fontSize": 24, "textAlign": "left", "marginBottom": 6},
        )
        node = HeaderRenderer().render(section, {})
        assert node.style == StyleHints(size=24, weight="bold", align="left", margin_bottom=6)

    def test_header_without_content(self):
        """Test that a header without content still produces a node."""
        node = HeaderRenderer().render(make_section(id="h", type="header"), {})
        assert node.text == ""

    def test_body_defaults(self):
        """Test body text defaults to normal weight."""
        section = make_section(id="b", type="body", content="Subject: {{subject}}", style={"fontWeight": "bold"})
        node = BodyRenderer().render(section, {"subject": "Offer"})
        assert node.text == "Subject: Offer"
        assert node.style.weight == "bold"
        assert node.style.size == 11
        assert BodyRenderer().render(make_section(id="b", type="body"), {}).style.weight == "normal"

    def test_footer_smaller_than_body(self):
        """Test that footer text sits a size tier below body text."""
        footer = FooterRenderer().default_style
        body = BodyRenderer().default_style
        assert footer.size < body.size
        assert footer.weight == "normal"


# =============================================================================
# Detail Section Tests
# =============================================================================


class TestDetailSectionRenderer:
    """Test suite for the ``section`` kind."""

    @pytest.fixture
    def section(self):
        return make_section(
            id="summary",
            type="section",
            title="Summary for {{clientName}}",
            content="{{note}}",
            fields=[
                {"id": "subtotal", "key": "subtotal", "label": "Subtotal", "type": "number"},
                {"id": "tax", "key": "tax", "label": "Tax", "type": "number"},
                {"id": "total", "key": "total", "label": "Total", "type": "number"},
                {"id": "remark", "key": "remark", "label": "Remark"},
            ],
        )

    def test_present_fields_become_lines(self, section):
        """Test that only fields with values are rendered."""
        data = {"clientName": "Acme", "subtotal": 100, "tax": 0, "remark": ""}
        node = DetailSectionRenderer().render(section, data)

        assert node.title == "Summary for Acme"
        assert node.field_lines == (
            FieldLine(label="Subtotal", value="100"),
            FieldLine(label="Tax", value="0"),
        )
        assert node.field_lines[0].text == "Subtotal: 100"

    def test_empty_title_and_content_are_none(self, section):
        """Test that unresolved text collapses to None."""
        node = DetailSectionRenderer().render(make_section(id="s", type="section"), {})
        assert node.title is None
        assert node.text is None
        assert node.field_lines == ()

    def test_heading_style(self, section):
        """Test the heading default style."""
        node = DetailSectionRenderer(heading_font_size=14).render(section, {})
        assert node.style == StyleHints(size=14, weight="bold", align="left")


# =============================================================================
# Table Tests
# =============================================================================


class TestTableRenderer:
    """Test suite for table sections."""

    @pytest.fixture
    def section(self):
        return make_section(
            id="items",
            type="table",
            title="Items",
            columns=[
                {"id": "c1", "key": "desc", "label": "Description"},
                {"id": "c2", "key": "price", "label": "Price", "type": "number"},
            ],
        )

    def test_header_and_rows_in_input_order(self, section):
        """Test one header row plus one row per entry."""
        data = {"items": [{"desc": "A", "price": 10}, {"desc": "B", "price": 20}]}
        node = TableRenderer().render(section, data)

        assert node.header_row == ("Description", "Price")
        assert node.rows == (("A", "10"), ("B", "20"))
        assert node.title == "Items"

    def test_missing_cells_are_empty(self, section):
        """Test that absent and None cells render empty."""
        node = TableRenderer().render(section, {"items": [{"desc": "A"}, {"price": None}]})
        assert node.rows == (("A", ""), ("", ""))

    def test_no_columns_produces_nothing(self):
        """Test that a table without columns is skipped."""
        section = make_section(id="items", type="table", columns=[])
        assert TableRenderer().render(section, {"items": [{"a": 1}]}) is None

    def test_absent_rows_render_empty_table(self, section):
        """Test that missing row data gives a header-only table."""
        node = TableRenderer().render(section, {})
        assert node.header_row == ("Description", "Price")
        assert node.rows == ()

    def test_non_list_rows_ignored(self, section):
        """Test that a non-list row source renders no rows."""
        assert TableRenderer().render(section, {"items": "oops"}).rows == ()

    def test_non_mapping_row_gives_empty_cells(self, section):
        """Test that malformed row entries keep their slot."""
        node = TableRenderer().render(section, {"items": ["bad", {"desc": "ok", "price": 1}]})
        assert node.rows == (("", ""), ("ok", "1"))

    def test_legacy_fallback(self, section, caplog):
        """Test the shared tableData fallback and its deprecation warning."""
        data = {"tableData": [{"desc": "X", "price": 1}]}
        with caplog.at_level(logging.WARNING):
            node = TableRenderer().render(section, data)
        assert node.rows == (("X", "1"),)
        assert "tableData" in caplog.text

    def test_section_key_preferred_over_fallback(self, section):
        """Test that section-scoped rows win over tableData."""
        data = {"items": [{"desc": "S"}], "tableData": [{"desc": "T"}]}
        assert TableRenderer().render(section, data).rows == (("S", ""),)

    def test_fallback_disabled(self, section):
        """Test that the fallback can be turned off."""
        data = {"tableData": [{"desc": "X"}]}
        assert TableRenderer(legacy_fallback=False).render(section, data).rows == ()


# =============================================================================
# Separator and Signature Tests
# =============================================================================


class TestSeparatorRenderer:
    """Test suite for separators."""

    def test_fixed_width_divider(self):
        """Test the default divider ignores data."""
        section = make_section(id="sep", type="separator")
        first = SeparatorRenderer().render(section, {"anything": 1})
        second = SeparatorRenderer().render(section, {})
        assert first.divider == "-" * 80
        assert first == second

    def test_custom_width(self):
        """Test the divider width is configurable."""
        node = SeparatorRenderer(width=10).render(make_section(id="sep", type="separator"), {})
        assert node.divider == "-" * 10


class TestSignatureRenderer:
    """Test suite for signature blocks."""

    @pytest.fixture
    def section(self):
        return make_section(
            id="sig",
            type="signature",
            fields=[
                {"id": "n", "key": "signerName", "label": "Name"},
                {"id": "d", "key": "signerDate", "label": "Date", "type": "date"},
            ],
        )

    def test_default_title_and_blank_lines(self, section):
        """Test unset fields get a blank marker and the title defaults."""
        node = SignatureRenderer().render(section, {"signerName": "Ada"})

        assert node.title == "Signature"
        assert node.field_lines == (
            FieldLine(label="Name", value="Ada"),
            FieldLine(label="Date", value="_" * 24, blank=True),
        )
        assert node.signature_line is True

    def test_zero_and_false_are_values(self, section):
        """Test that 0 and False are printed rather than left blank."""
        node = SignatureRenderer().render(section, {"signerName": 0, "signerDate": False})
        assert [line.text for line in node.field_lines] == ["Name: 0", "Date: false"]
        assert not any(line.blank for line in node.field_lines)

    def test_title_resolved(self):
        """Test that the signature title is resolved through the parser."""
        section = make_section(id="sig", type="signature", title="For {{companyName}}")
        node = SignatureRenderer(blank="....").render(section, {"companyName": "Acme"})
        assert node.title == "For Acme"
        assert node.field_lines == ()
        assert node.signature_line is True


# =============================================================================
# Render Node Tests
# =============================================================================


class TestRenderNode:
    """Test suite for RenderNode serialization."""

    def test_to_dict_omits_unset(self):
        """Test that to_dict drops unset attributes and uses plain values."""
        node = RenderNode(kind=SectionKind.SEPARATOR, section_id="sep", divider="---")
        assert node.to_dict() == {"kind": "separator", "sectionId": "sep", "divider": "---"}

    def test_to_dict_text_and_style(self):
        """Test resolved text and style hints use the drawing layer's keys."""
        node = RenderNode(
            kind=SectionKind.HEADER,
            section_id="h",
            text="INVOICE",
            style=StyleHints(size=18, weight="bold", align="center", margin_bottom=6),
        )
        assert node.to_dict() == {
            "kind": "header",
            "sectionId": "h",
            "resolvedText": "INVOICE",
            "styleHints": {"fontSize": 18, "fontWeight": "bold", "textAlign": "center", "marginBottom": 6},
        }

    def test_to_dict_table(self):
        """Test that table header and rows become lists."""
        node = RenderNode(
            kind=SectionKind.TABLE,
            section_id="items",
            header_row=("Desc", "Price"),
            rows=(("A", "10"),),
        )
        assert node.to_dict() == {
            "kind": "table",
            "sectionId": "items",
            "headerRow": ["Desc", "Price"],
            "rows": [["A", "10"]],
        }

    def test_to_dict_table_and_lines(self):
        """Test that field lines carry their display text."""
        node = RenderNode(
            kind=SectionKind.SIGNATURE,
            section_id="sig",
            title="Signature",
            field_lines=(FieldLine(label="Name", value="Ada"), FieldLine(label="Date", value="___", blank=True)),
            signature_line=True,
        )
        raw = node.to_dict()
        assert set(raw) == {"kind", "sectionId", "title", "fieldLines", "signatureLine"}
        assert raw["fieldLines"] == [
            {"label": "Name", "value": "Ada", "text": "Name: Ada", "blank": False},
            {"label": "Date", "value": "___", "text": "Date: ___", "blank": True},
        ]
        assert raw["signatureLine"] is True
