"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import GeneratorConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    annotation: Optional[str] = None,
    strict: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> GeneratorConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if annotation is not None:
        overrides["override_annotation"] = annotation
    if strict:
        overrides["strict"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
