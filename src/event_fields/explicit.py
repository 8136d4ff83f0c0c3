"""Explicit field overrides.

An override annotation lists fields as ``"name:type"`` strings and bypasses
inference entirely. Entries are applied in order; a repeated name simply
replaces the earlier type (no conflict check at this level).

Anything else in the annotation (a non-string entry, a non-list value, an
entry without exactly one ``:`` or with an empty name) is an authoring error
and raises MalformedExplicitFieldError.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .exceptions import MalformedExplicitFieldError
from .models import AnnotationDef, FieldMapping
from .types import TypeResolver, resolve_type_name

logger = logging.getLogger(__name__)

SEPARATOR = ":"


def parse_explicit_fields(
    entries: Iterable[str],
    resolve_type: TypeResolver = resolve_type_name,
    into: Optional[FieldMapping] = None,
) -> FieldMapping:
    """Parse ``"name:type"`` entries into a field mapping.

    Args:
        entries: Raw override entries
        resolve_type: Type-resolution service for the type part
        into: Existing mapping to merge into (entries overwrite)

    Returns:
        The populated mapping (``into`` when given)

    Raises:
        MalformedExplicitFieldError: If an entry is not a string, does not
            split into exactly two parts on ``:``, or has an empty name
    """
    fields: FieldMapping = {} if into is None else into
    for entry in entries:
        if not isinstance(entry, str):
            raise MalformedExplicitFieldError(entry, "expected a 'name:type' string")
        parts = entry.split(SEPARATOR)
        if len(parts) != 2:
            raise MalformedExplicitFieldError(
                entry, f"expected a name and type separated by ':', got {len(parts)} part(s)"
            )
        name, type_name = parts
        if not name:
            raise MalformedExplicitFieldError(entry, "field name is empty")
        fields[name] = resolve_type(type_name)
    return fields


def find_override(annotations: Iterable[AnnotationDef], annotation_type: str) -> Optional[AnnotationDef]:
    """Return the first annotation of the override type, if any.

    An empty ``annotation_type`` disables overrides: always returns None.
    """
    if not annotation_type:
        return None
    for annotation in annotations:
        if annotation.type_name == annotation_type:
            return annotation
    return None


def override_entries(annotation: AnnotationDef) -> list[str]:
    """Read the ``value`` element of an override annotation as a list of entries.

    Raises:
        MalformedExplicitFieldError: If ``value`` is neither a string nor a
            list of strings
    """
    value = annotation.element("value")
    if value is None:
        logger.debug("Override annotation %s has no value element", annotation.type_name)
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise MalformedExplicitFieldError(
            value, "value must be a string or a list of strings", annotation.type_name
        )
    for entry in value:
        if not isinstance(entry, str):
            raise MalformedExplicitFieldError(
                entry, "expected a 'name:type' string", annotation.type_name
            )
    return list(value)
