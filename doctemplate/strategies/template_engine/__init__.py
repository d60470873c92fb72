"""Template engine strategies.

Placeholder parsing, field discovery, default merging, validation and
template loading.
"""

from doctemplate.strategies.template_engine.defaults import merge_with_defaults
from doctemplate.strategies.template_engine.discovery import (
    DiscoveredFields,
    FieldConflict,
    collect_declared_fields,
    discover_fields,
)
from doctemplate.strategies.template_engine.loader import dump_template, load_template
from doctemplate.strategies.template_engine.parser import (
    extract_field_keys,
    humanize_key,
    replace_placeholders,
)
from doctemplate.strategies.template_engine.validator import (
    FieldViolation,
    ValidationResult,
    validate_field_constraints,
    validate_required_fields,
)

__all__ = [
    "DiscoveredFields",
    "FieldConflict",
    "FieldViolation",
    "ValidationResult",
    "collect_declared_fields",
    "discover_fields",
    "dump_template",
    "extract_field_keys",
    "humanize_key",
    "load_template",
    "merge_with_defaults",
    "replace_placeholders",
    "validate_field_constraints",
    "validate_required_fields",
]
