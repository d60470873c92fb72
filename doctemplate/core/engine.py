"""Document generation facade.

Runs the full pipeline for one document: field discovery, default merging,
validation and rendering. Every step is a pure function of the template and
data, so one engine can serve concurrent callers.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from doctemplate.core.config import Settings
from doctemplate.core.factory import ComponentFactory, get_factory
from doctemplate.interfaces.schema import DataRecord, Template, TemplateField
from doctemplate.interfaces.section_renderer import RenderNode
from doctemplate.strategies.template_engine import (
    FieldConflict,
    FieldViolation,
    ValidationResult,
    collect_declared_fields,
    discover_fields,
    load_template,
    merge_with_defaults,
    validate_field_constraints,
    validate_required_fields,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentRender:
    """Everything produced for one document.

    Attributes:
        nodes: Render nodes for the drawing layer.
        fields: Editable fields of the template, in form order.
        data: The data record the nodes were rendered from.
        validation: Required-field check result.
        violations: Constraint violations, informational.
        conflicts: Field key conflicts found during discovery.
    """

    nodes: tuple[RenderNode, ...]
    fields: tuple[TemplateField, ...]
    data: Mapping[str, Any]
    validation: ValidationResult
    violations: tuple[FieldViolation, ...] = ()
    conflicts: tuple[FieldConflict, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a camelCase JSON-ready summary for consumers outside Python."""
        return {
            "validation": {
                "isValid": self.validation.is_valid,
                "missingFields": list(self.validation.missing_fields),
            },
            "violations": [
                {"key": v.key, "rule": v.rule, "message": v.message} for v in self.violations
            ],
            "conflicts": [
                {"key": c.key, "kept": c.kept.id, "ignored": c.ignored.id, "source": c.source}
                for c in self.conflicts
            ],
            "nodes": [node.to_dict() for node in self.nodes],
        }


class TemplateEngine:
    """Generates render nodes for templates.

    Attributes:
        apply_defaults: Whether field defaults are merged before rendering.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        factory: ComponentFactory | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Engine settings. If None, uses the factory's settings.
            factory: Component factory. If None, one is built from settings,
                or the global factory is shared when settings is also None.
        """
        if factory is None:
            factory = ComponentFactory(settings) if settings is not None else get_factory()
        self._factory = factory
        self._settings = settings or self._factory.settings
        self._renderer = self._factory.get_template_renderer()

    @property
    def apply_defaults(self) -> bool:
        return self._settings.apply_defaults

    def prepare_data(self, template: Template, data: DataRecord) -> dict[str, Any]:
        """Return the data record with field defaults layered underneath."""
        if not self.apply_defaults:
            return dict(data)
        fields = collect_declared_fields(template)
        return merge_with_defaults(fields, data)

    def generate(
        self,
        template: Template | Mapping[str, Any] | str,
        data: DataRecord | None = None,
    ) -> DocumentRender:
        """Generate a document render for one template and data record.

        Validation problems are reported in the result; rendering always
        proceeds with whatever data is available.

        Args:
            template: A Template, or a template document to load.
            data: Caller data. Never modified.

        Returns:
            The DocumentRender.

        Raises:
            TemplateLoadError: If template is a document that does not load.
            TypeError: If data is not a mapping.
        """
        template = load_template(template)
        data = {} if data is None else data
        if not isinstance(data, Mapping):
            raise TypeError(f"data must be a mapping, got {type(data).__name__}")

        discovered = discover_fields(template)
        resolved = self.prepare_data(template, data)
        validation = validate_required_fields(discovered.fields, resolved)
        violations = validate_field_constraints(discovered.fields, resolved)
        nodes = self._renderer.render(template, resolved)

        if not validation.is_valid:
            logger.info(
                f"Template '{template.id}' rendered with missing required fields: "
                f"{', '.join(validation.missing_fields)}"
            )

        return DocumentRender(
            nodes=tuple(nodes),
            fields=discovered.fields,
            data=resolved,
            validation=validation,
            violations=tuple(violations),
            conflicts=discovered.conflicts,
        )
