"""Default value merging."""

from collections.abc import Iterable
from typing import Any

from doctemplate.interfaces.schema import DataRecord, TemplateField


def merge_with_defaults(fields: Iterable[TemplateField], data: DataRecord) -> dict[str, Any]:
    """Layer field defaults under caller data.

    A field's default is used only when the key is absent from data or set
    to None. Explicit ``0``, ``False`` and ``""`` are kept. The input mapping
    is never modified.

    Args:
        fields: Fields whose ``default_value`` should be applied.
        data: Caller supplied data record.

    Returns:
        A new dict holding the merged record.
    """
    merged = dict(data)
    for field in fields:
        if field.default_value is not None and merged.get(field.key) is None:
            merged[field.key] = field.default_value
    return merged
