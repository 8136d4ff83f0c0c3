"""Logging setup for event-fields.

Inference warnings are ordinary log records on the ``event_fields.diagnostics``
logger. The CLI maps the configured verbosity onto that tree and renders it
on stderr with rich, keeping stdout free for ``--format json``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "event_fields"
DIAGNOSTICS_LOGGER = f"{ROOT_LOGGER}.diagnostics"

# quiet hides inference warnings; verbose adds per-interface debug output
LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """Attach a rich stderr handler to the ``event_fields`` logger tree.

    Safe to call once per CLI invocation: a previously installed rich handler
    is replaced, not stacked.

    Returns:
        The diagnostics logger, ready to hand to a diagnostic sink.
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)

    root.addHandler(
        RichHandler(
            console=Console(stderr=True),
            level=level,
            markup=False,
            rich_tracebacks=True,
            show_time=verbose,
            show_path=verbose,
        )
    )
    return diagnostics_logger()


def diagnostics_logger() -> logging.Logger:
    """Logger receiving unknown-method and type-conflict warnings."""
    return logging.getLogger(DIAGNOSTICS_LOGGER)
