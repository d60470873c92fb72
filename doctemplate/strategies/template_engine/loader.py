"""Template loading and serialization.

Stored templates are JSON documents using camelCase keys. Loading validates
the document against the schema; a template that fails validation is
rejected as a whole rather than rendered partially.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from doctemplate.interfaces.schema import Template
from doctemplate.interfaces.template import TemplateLoadError

logger = logging.getLogger(__name__)


def load_template(source: str | bytes | Mapping[str, Any] | Template) -> Template:
    """Parse a template from JSON text or an already decoded mapping.

    Args:
        source: JSON text, bytes, a mapping or a Template.

    Returns:
        The validated Template.

    Raises:
        TemplateLoadError: If the JSON is invalid or does not match the schema.
        TypeError: If source is of an unsupported type.
    """
    if isinstance(source, Template):
        return source

    if isinstance(source, (str, bytes)):
        try:
            raw = json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TemplateLoadError(f"Template configuration is not valid JSON: {e}") from e
    elif isinstance(source, Mapping):
        raw = source
    else:
        raise TypeError(f"Unsupported template source: {type(source).__name__}")

    if not isinstance(raw, Mapping):
        raise TemplateLoadError("Template configuration must be a JSON object")

    try:
        template = Template.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Template validation failed: {e.error_count()} error(s)")
        raise TemplateLoadError(f"Invalid template configuration: {e}") from e

    logger.debug(f"Loaded template '{template.id}' v{template.version} ({len(template.sections)} sections)")
    return template


def dump_template(template: Template, indent: int | None = None) -> str:
    """Serialize a template to camelCase JSON, omitting unset attributes."""
    return template.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
