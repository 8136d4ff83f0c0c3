"""Exception hierarchy for event-fields."""

from .analysis import AnalysisError, ModelLoadError, TypeSyntaxError
from .base import EventFieldsError
from .config import ConfigurationError, InitializationError, InvalidConfigError
from .validation import MalformedExplicitFieldError, ValidationError

__all__ = [
    "EventFieldsError",
    "AnalysisError",
    "ModelLoadError",
    "TypeSyntaxError",
    "ConfigurationError",
    "InvalidConfigError",
    "InitializationError",
    "ValidationError",
    "MalformedExplicitFieldError",
]
