"""Validation exceptions: authoring errors in explicit field overrides."""

from typing import Any, Optional

from .base import EventFieldsError


class ValidationError(EventFieldsError):
    """Base class for input validation errors."""

    pass


class MalformedExplicitFieldError(ValidationError):
    """Raised when an override annotation does not hold ``name:type`` strings.

    Always fatal: the entry is a configuration authoring error and there is
    no sensible field to guess from it.
    """

    def __init__(self, entry: Any, reason: str, annotation: Optional[str] = None):
        super().__init__(
            f"Malformed explicit field entry {entry!r}: {reason}",
            annotation=annotation,
        )
        self.entry = entry
        self.reason = reason
        self.annotation = annotation
