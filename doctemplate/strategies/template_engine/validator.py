"""Field validation.

Both checks are informational: they never raise on bad data and never block
rendering. Callers decide whether to stop a download or submission.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from doctemplate.interfaces.schema import DataRecord, FieldType, TemplateField
from doctemplate.strategies.template_engine.parser import is_present, to_display_string

logger = logging.getLogger(__name__)

_TEXT_TYPES = {
    FieldType.TEXT,
    FieldType.TEXTAREA,
    FieldType.EMAIL,
    FieldType.PHONE,
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the required-field check.

    Attributes:
        is_valid: True when no required field is missing.
        missing_fields: Keys of missing required fields, in field order.
    """

    is_valid: bool
    missing_fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldViolation:
    """A value that breaks a field's declared constraints.

    Attributes:
        key: Field key.
        rule: Which rule failed: "number", "min", "max", "pattern" or "options".
        message: Human readable explanation.
    """

    key: str
    rule: str
    message: str


def validate_required_fields(fields: Iterable[TemplateField], data: DataRecord) -> ValidationResult:
    """Check that every required field has a value.

    A required field is missing when its value is absent, None or ``""``.
    ``0`` and ``False`` count as values.
    """
    missing: list[str] = []
    for field in fields:
        if field.required and not is_present(data.get(field.key)) and field.key not in missing:
            missing.append(field.key)
    return ValidationResult(is_valid=not missing, missing_fields=tuple(missing))


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    # ints are compared exactly; large ones do not fit in a float
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _check_range(field: TemplateField, value: Any) -> list[FieldViolation]:
    rules = field.validation
    if rules is None or (rules.min is None and rules.max is None):
        return []

    if field.type is FieldType.NUMBER:
        measured = _as_number(value)
        what = "value"
        if measured is None:
            return [FieldViolation(field.key, "number", f"{field.label} must be a number")]
    elif field.type in _TEXT_TYPES:
        measured = float(len(to_display_string(value)))
        what = "length"
    else:
        return []

    violations = []
    if rules.min is not None and measured < rules.min:
        violations.append(FieldViolation(
            field.key, "min", rules.message or f"{field.label} {what} must be at least {rules.min:g}"
        ))
    if rules.max is not None and measured > rules.max:
        violations.append(FieldViolation(
            field.key, "max", rules.message or f"{field.label} {what} must be at most {rules.max:g}"
        ))
    return violations


def _check_pattern(field: TemplateField, value: Any) -> list[FieldViolation]:
    rules = field.validation
    if rules is None or not rules.pattern:
        return []
    try:
        pattern = re.compile(rules.pattern)
    except re.error as e:
        logger.warning(f"Ignoring invalid pattern on field '{field.key}': {e}")
        return []
    if pattern.fullmatch(to_display_string(value)) is None:
        return [FieldViolation(field.key, "pattern", rules.message or f"{field.label} has an invalid format")]
    return []


def _check_options(field: TemplateField, value: Any) -> list[FieldViolation]:
    if not field.options or field.type not in (FieldType.SELECT, FieldType.MULTISELECT):
        return []
    allowed = {option.value for option in field.options}
    chosen: Sequence[Any] = value if isinstance(value, (list, tuple)) else [value]
    unknown = [to_display_string(item) for item in chosen if to_display_string(item) not in allowed]
    if unknown:
        return [FieldViolation(field.key, "options", f"{field.label} has unknown option(s): {', '.join(unknown)}")]
    return []


def validate_field_constraints(fields: Iterable[TemplateField], data: DataRecord) -> list[FieldViolation]:
    """Check present values against declared min/max, pattern and options.

    Empty values are skipped; completeness is validate_required_fields' job.

    Args:
        fields: Fields to check.
        data: The data record.

    Returns:
        Violations in field order.
    """
    violations: list[FieldViolation] = []
    for field in fields:
        value = data.get(field.key)
        if not is_present(value):
            continue
        violations.extend(_check_range(field, value))
        violations.extend(_check_pattern(field, value))
        violations.extend(_check_options(field, value))
    return violations
