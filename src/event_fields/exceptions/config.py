"""Configuration exceptions: settings and run initialization."""

from typing import Any

from .base import EventFieldsError


class ConfigurationError(EventFieldsError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a GeneratorConfig value is invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(f"Invalid configuration for {key}: {value!r}", reason=reason)
        self.key = key
        self.value = value
        self.reason = reason


class InitializationError(ConfigurationError):
    """Raised when a required collaborator is missing before a run starts."""

    def __init__(self, dependency: str, reason: str):
        super().__init__(f"Cannot initialize processor: missing {dependency}", reason=reason)
        self.dependency = dependency
        self.reason = reason
