"""Configuration loading and management for event-fields.

Configuration sources are merged in priority order:
    1. Defaults (defined in GeneratorConfig)
    2. Project config (./event-fields.toml, else [tool.event-fields] in
       ./pyproject.toml)
    3. Explicit config file
    4. Environment variables (EVENT_FIELDS_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(override_annotation="org.example.ImplementedBy")
    >>> config.override_annotation
    'org.example.ImplementedBy'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "EVENT_FIELDS_"
PROJECT_CONFIG_NAME = "event-fields.toml"
PYPROJECT_TABLE = "event-fields"


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for one field-inference run.

    Attributes:
        override_annotation: Qualified name of the annotation carrying explicit
            ``"name:type"`` field lists. Empty disables overrides entirely.
        include_patterns: Glob patterns a source file must match to be analyzed
        exclude_patterns: Glob patterns excluding source files from analysis
        verbosity: Logging verbosity level
        strict: Treat any inference warning as a failed run
    """

    override_annotation: str = ""
    include_patterns: list[str] = field(default_factory=lambda: ["*"])
    exclude_patterns: list[str] = field(default_factory=list)
    verbosity: Verbosity = "normal"
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet, normal or verbose")
        if not isinstance(self.override_annotation, str):
            raise InvalidConfigError(
                "override_annotation", self.override_annotation, "expected a string"
            )
        if self.override_annotation != self.override_annotation.strip():
            raise InvalidConfigError(
                "override_annotation", self.override_annotation, "surrounding whitespace"
            )
        for key in ("include_patterns", "exclude_patterns"):
            patterns = getattr(self, key)
            if isinstance(patterns, str) or not all(isinstance(p, str) for p in patterns):
                raise InvalidConfigError(key, patterns, "expected a list of glob patterns")

    @property
    def overrides_enabled(self) -> bool:
        return bool(self.override_annotation)


def load_config(config_file: Optional[Path] = None, **overrides) -> GeneratorConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored.

    Returns:
        Validated GeneratorConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    # 1. Project config
    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    pyproject = Path.cwd() / "pyproject.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config))
    elif pyproject.exists():
        merged.update(_read_config_file(pyproject))

    # 2. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file))

    # 3. Environment variables
    merged.update(_load_env_vars())

    # 4. CLI overrides (highest priority)
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return GeneratorConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    if path.name == "pyproject.toml":
        return dict(data.get("tool", {}).get(PYPROJECT_TABLE, {}))
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from EVENT_FIELDS_* environment variables.

    Supported environment variables:
        EVENT_FIELDS_OVERRIDE_ANNOTATION: str
        EVENT_FIELDS_INCLUDE_PATTERNS: comma-separated globs
        EVENT_FIELDS_EXCLUDE_PATTERNS: comma-separated globs
        EVENT_FIELDS_VERBOSITY: quiet/normal/verbose
        EVENT_FIELDS_STRICT: bool (true/false/1/0)

    Returns:
        Dict of field_name -> parsed_value for any EVENT_FIELDS_* vars found.
    """
    type_hints = get_type_hints(GeneratorConfig)

    result: dict[str, Any] = {}

    for field_name in GeneratorConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
