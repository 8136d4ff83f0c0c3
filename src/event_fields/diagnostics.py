"""Diagnostic sinks for recoverable inference problems.

Unknown methods and type conflicts are warnings, never errors: inference
keeps going with a best-effort result and reports through a sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class DiagnosticKind(Enum):
    """Kinds of recoverable inference problems."""

    UNKNOWN_METHOD = "unknown_method"
    TYPE_CONFLICT = "type_conflict"


@dataclass(frozen=True)
class Diagnostic:
    """A single warning emitted during inference.

    Attributes:
        kind: What went wrong
        message: Plain-text message, as logged
        interface: Qualified name of the interface being analyzed
        subject: Method signature or field name the warning is about
    """

    kind: DiagnosticKind
    message: str
    interface: str
    subject: str


class DiagnosticSink(Protocol):
    """Receives warning-level diagnostics."""

    def warning(self, diagnostic: Diagnostic) -> None: ...


class LoggingDiagnosticSink:
    """Forwards diagnostics to a logger at WARNING level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("event_fields.diagnostics")

    def warning(self, diagnostic: Diagnostic) -> None:
        self.logger.warning(diagnostic.message)


class CollectingDiagnosticSink(LoggingDiagnosticSink):
    """Logs diagnostics and keeps them for later inspection (CLI summary, tests)."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        super().__init__(logger)
        self.diagnostics: list[Diagnostic] = []

    def warning(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        super().warning(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def __len__(self) -> int:
        return len(self.diagnostics)


def unknown_method(signature: str, interface: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNKNOWN_METHOD,
        f"Unknown method type {signature} in {interface}",
        interface,
        signature,
    )


def type_conflict(existing: object, found: object, field_name: str, interface: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.TYPE_CONFLICT,
        f"Conflicting types {existing} and {found} for field name {field_name} in {interface}",
        interface,
        field_name,
    )
