"""Field inference for event interfaces.

Builds the ordered field mapping of one interface from its accessor methods.

Precedence:
    1. Interface-level override annotation: its entries are the whole answer.
    2. Method-level override annotation: entries overwrite whatever was
       inferred so far and are never reported as conflicts.
    3. Accessor classification: first-seen type wins; a different type for an
       existing name is reported as a conflict and dropped.
"""

from __future__ import annotations

import logging

from .classifier import classify
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink, type_conflict, unknown_method
from .explicit import find_override, override_entries, parse_explicit_fields
from .models import FieldMapping, InterfaceDef
from .types import TypeResolver, resolve_type_name

logger = logging.getLogger(__name__)


class FieldInferenceEngine:
    """Infers field mappings, one interface at a time.

    The engine holds no per-run state: ``infer`` depends only on its argument,
    so one engine can serve several runs or threads.

    Args:
        override_annotation: Qualified name of the explicit-field annotation.
            Empty disables override scanning everywhere.
        diagnostics: Sink for unknown-method and conflict warnings
        resolve_type: Type-resolution service for override entries
    """

    def __init__(
        self,
        override_annotation: str = "",
        diagnostics: DiagnosticSink | None = None,
        resolve_type: TypeResolver = resolve_type_name,
    ) -> None:
        self.override_annotation = override_annotation
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnosticSink()
        self.resolve_type = resolve_type

    def infer(self, event: InterfaceDef) -> FieldMapping:
        """Infer the field mapping of a single event interface.

        Raises:
            MalformedExplicitFieldError: If an override entry is malformed
        """
        fields: FieldMapping = {}
        if self._apply_override(fields, event.annotations):
            logger.debug("Explicit fields for %s: %s", event.qualified_name, list(fields))
            return fields

        for method in event.methods:
            if self._apply_override(fields, method.annotations):
                continue

            found = classify(method)
            if found is None:
                self.diagnostics.warning(unknown_method(method.signature, event.qualified_name))
                continue

            existing = fields.get(found.field_name)
            if existing is None:
                fields[found.field_name] = found.field_type
            elif existing != found.field_type:
                self.diagnostics.warning(
                    type_conflict(existing, found.field_type, found.field_name, event.qualified_name)
                )

        logger.debug("Inferred %d field(s) for %s", len(fields), event.qualified_name)
        return fields

    def _apply_override(self, fields: FieldMapping, annotations) -> bool:
        """Merge explicit entries into ``fields``; True if an override was present."""
        annotation = find_override(annotations, self.override_annotation)
        if annotation is None:
            return False
        parse_explicit_fields(override_entries(annotation), self.resolve_type, into=fields)
        return True
