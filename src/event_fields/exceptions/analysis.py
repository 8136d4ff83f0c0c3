"""Analysis-related exceptions: structural model input and type text."""

from pathlib import Path

from .base import EventFieldsError


class AnalysisError(EventFieldsError):
    """Base class for analysis-related errors."""
    pass


class ModelLoadError(AnalysisError):
    """Raised when a structural model dump cannot be read or understood."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot load interface model: {path}", reason=reason)
        self.path = path
        self.reason = reason


class TypeSyntaxError(AnalysisError):
    """Raised when a textual type name cannot be resolved."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot resolve type: {text!r}", reason=reason)
        self.text = text
        self.reason = reason
