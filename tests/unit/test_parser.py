"""Unit tests for the placeholder parser."""

import math

import pytest

from doctemplate.strategies.template_engine.parser import (
    extract_field_keys,
    humanize_key,
    is_present,
    is_truthy,
    replace_placeholders,
    to_display_string,
)


# =============================================================================
# Substitution Tests
# =============================================================================


class TestReplacePlaceholders:
    """Test suite for replace_placeholders."""

    def test_missing_value_becomes_empty(self):
        """Test that an unresolved placeholder without default is removed."""
        result = replace_placeholders("Hello {{name}}, total {{amount}}", {"name": "Acme"})
        assert result == "Hello Acme, total "

    def test_default_text_used_when_missing(self):
        """Test that default text is inserted when the key is absent."""
        assert replace_placeholders("{{name.Guest}}", {}) == "Guest"

    def test_default_text_used_for_empty_string(self):
        """Test that an empty string value falls back to the default text."""
        assert replace_placeholders("{{name.Guest}}", {"name": ""}) == "Guest"
        assert replace_placeholders("{{name.Guest}}", {"name": None}) == "Guest"

    def test_value_wins_over_default(self):
        """Test that a present value is preferred over default text."""
        assert replace_placeholders("{{name.Guest}}", {"name": "Ada"}) == "Ada"

    def test_default_text_may_contain_spaces_and_dots(self):
        """Test that default text is everything up to the closing braces."""
        result = replace_placeholders("Dear {{title.Sir or Madam, esq.}}", {})
        assert result == "Dear Sir or Madam, esq."

    def test_falsy_values_are_substituted(self):
        """Test that 0 and False are real values, not missing ones."""
        assert replace_placeholders("Tax: {{tax.n/a}}", {"tax": 0}) == "Tax: 0"
        assert replace_placeholders("Paid: {{paid.n/a}}", {"paid": False}) == "Paid: false"

    def test_values_are_stringified(self):
        """Test that numbers and lists render the way JSON clients show them."""
        data = {"amount": 10.0, "rate": 2.5, "tags": ["a", "b"], "ok": True}
        result = replace_placeholders("{{amount}} {{rate}} {{tags}} {{ok}}", data)
        assert result == "10 2.5 a,b true"

    def test_no_placeholders_is_noop(self):
        """Test that content without valid placeholders is returned unchanged."""
        samples = [
            "Plain text",
            "{name}",
            "{{ name }}",
            "{{}}",
            "{{na-me}}",
            "{{name.}}",
            "{{unclosed",
            "closed}}",
            "{{имя}}",
        ]
        for content in samples:
            assert replace_placeholders(content, {"name": "X", "na": "Y"}) == content

    def test_default_text_is_not_rescanned(self):
        """Test that a default that looks like a placeholder is emitted literally."""
        assert replace_placeholders("{{a.{{b}}", {"b": "X"}) == "{{b"

    def test_every_occurrence_replaced(self):
        """Test that repeated keys are all substituted and none left literal."""
        result = replace_placeholders("{{x}}-{{x}}-{{x.def}}", {"x": "7"})
        assert result == "7-7-7"
        assert "{{x}}" not in result

    def test_none_and_empty_content(self):
        """Test that missing content resolves to an empty string."""
        assert replace_placeholders(None, {"a": 1}) == ""
        assert replace_placeholders("", {"a": 1}) == ""

    def test_type_contract_violations_raise(self):
        """Test that wrong input shapes raise TypeError."""
        with pytest.raises(TypeError):
            replace_placeholders(42, {})
        with pytest.raises(TypeError):
            replace_placeholders("{{a}}", ["a"])


# =============================================================================
# Key Extraction Tests
# =============================================================================


class TestExtractFieldKeys:
    """Test suite for extract_field_keys."""

    def test_first_seen_order_without_duplicates(self):
        """Test that keys are deduplicated in first-seen order."""
        content = "{{b}} {{a}} {{b.other}} {{c.Default}}"
        assert extract_field_keys(content) == ["b", "a", "c"]

    def test_matches_substituted_keys(self):
        """Test that extraction finds exactly the keys substitution resolves."""
        content = "Hi {{a}} {b} {{ c }} {{d.e}} {{f.}}"
        keys = extract_field_keys(content)
        assert keys == ["a", "d"]

        data = {key: f"<{key}>" for key in ["a", "b", "c", "d", "f"]}
        assert replace_placeholders(content, data) == "Hi <a> {b} {{ c }} <d> {{f.}}"

    def test_empty_inputs(self):
        """Test that missing content yields no keys."""
        assert extract_field_keys(None) == []
        assert extract_field_keys("no placeholders") == []

    def test_non_string_raises(self):
        """Test that non-string content is a type contract violation."""
        with pytest.raises(TypeError):
            extract_field_keys(["{{a}}"])


# =============================================================================
# Helper Tests
# =============================================================================


class TestHelpers:
    """Test suite for humanize_key and value predicates."""

    @pytest.mark.parametrize(
        "key,label",
        [
            ("employeeName", "Employee Name"),
            ("name", "Name"),
            ("invoiceNumberTwo", "Invoice Number Two"),
            ("basic_pay", "Basic_pay"),
            ("", ""),
        ],
    )
    def test_humanize_key(self, key, label):
        """Test camelCase keys become readable labels."""
        assert humanize_key(key) == label

    def test_is_present(self):
        """Test that only None and empty string count as absent."""
        assert not is_present(None)
        assert not is_present("")
        assert is_present(0)
        assert is_present(False)
        assert is_present([])

    def test_is_truthy_follows_json_semantics(self):
        """Test truthiness matches the template's JSON clients."""
        for value in (None, False, 0, 0.0, "", math.nan):
            assert not is_truthy(value)
        for value in (True, 1, -1, "no", [], {}, ["x"]):
            assert is_truthy(value)

    def test_is_truthy_huge_integers(self):
        """Test that integers too large for a float are still evaluated."""
        assert is_truthy(10**400)
        assert is_truthy(-(10**400))

    def test_to_display_string(self):
        """Test stringification of scalars and lists."""
        assert to_display_string(None) == ""
        assert to_display_string(True) == "true"
        assert to_display_string(3.0) == "3"
        assert to_display_string(3.25) == "3.25"
        assert to_display_string([1, 2.0, "x"]) == "1,2,x"
