"""Placeholder parsing and substitution.

Section text may reference data with ``{{key}}`` or ``{{key.Default text}}``.
Default text is inserted literally and is never re-scanned, so a default that
itself looks like a placeholder is emitted as-is.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from doctemplate.interfaces.schema import DataRecord

# Group 1 is the key, optional group 2 the literal default text.
PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)(?:\.([^}]+))?\}\}")

_UPPERCASE_PATTERN = re.compile(r"([A-Z])")


def is_present(value: Any) -> bool:
    """Return True unless the value is None or an empty string.

    ``0`` and ``False`` are present: they are deliberate caller values.
    """
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def is_truthy(value: Any) -> bool:
    """Evaluate a data value the way the JSON clients of a template do.

    None, False, zero, NaN and the empty string are falsy. Lists and
    mappings are truthy even when empty.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def to_display_string(value: Any) -> str:
    """Convert a data value to the text shown in a document.

    Produces the same text a JSON client would: booleans are lowercase,
    integral floats drop the fraction and lists are comma-joined.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_display_string(item) for item in value)
    return str(value)


def _check_content(content: Any) -> str:
    if content is None:
        return ""
    if not isinstance(content, str):
        raise TypeError(f"content must be a string, got {type(content).__name__}")
    return content


def replace_placeholders(content: str | None, data: DataRecord) -> str:
    """Replace placeholders in content with values from data.

    For each placeholder the value ``data[key]`` is used when present (not
    None, not empty). Otherwise the literal default text is used if given,
    else the empty string. Text that does not match the placeholder grammar
    is left untouched.

    Args:
        content: Text that may contain placeholders.
        data: The data record to resolve against.

    Returns:
        The resolved text. Empty string when content is None or empty.

    Raises:
        TypeError: If content is not a string or data is not a mapping.
    """
    text = _check_content(content)
    if not isinstance(data, Mapping):
        raise TypeError(f"data must be a mapping, got {type(data).__name__}")
    if not text:
        return ""

    def _substitute(match: re.Match[str]) -> str:
        key, default_text = match.group(1), match.group(2)
        value = data.get(key)
        if is_present(value):
            return to_display_string(value)
        if default_text:
            return default_text
        return ""

    return PLACEHOLDER_PATTERN.sub(_substitute, text)


def extract_field_keys(content: str | None) -> list[str]:
    """Extract the keys referenced by placeholders in content.

    Args:
        content: Text that may contain placeholders.

    Returns:
        Deduplicated keys in first-seen order.

    Raises:
        TypeError: If content is not a string.
    """
    text = _check_content(content)
    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(text)))


def humanize_key(key: str) -> str:
    """Turn a camelCase key into a label, e.g. ``employeeName`` -> ``Employee Name``."""
    if not key:
        return ""
    return key[0].upper() + _UPPERCASE_PATTERN.sub(r" \1", key[1:])
