"""Serialization of the event catalog for downstream code generators.

Output is plain JSON-able data; field and event order is preserved.
"""

from __future__ import annotations

from typing import Any

from .diagnostics import Diagnostic
from .models import EventCatalog, EventDescriptor, TypeRef


def type_to_dict(type_ref: TypeRef) -> dict[str, Any]:
    data: dict[str, Any] = {"name": type_ref.qualified_name}
    if type_ref.arguments:
        data["arguments"] = [type_to_dict(arg) for arg in type_ref.arguments]
    return data


def event_to_dict(event: EventDescriptor) -> dict[str, Any]:
    return {
        "qualified_name": event.qualified_name,
        "fields": [
            {"name": name, "type": str(type_ref), "type_ref": type_to_dict(type_ref)}
            for name, type_ref in event.fields.items()
        ],
    }


def catalog_to_dict(
    catalog: EventCatalog, diagnostics: list[Diagnostic] | None = None
) -> dict[str, Any]:
    """Render a catalog (and optionally its warnings) as JSON-able data.

    Returns:
        {
            "events": [{"qualified_name": "...", "fields": [...]}, ...],
            "warnings": [{"kind": "type_conflict", "interface": "...", ...}]
        }
    """
    output: dict[str, Any] = {"events": [event_to_dict(e) for e in catalog]}
    if diagnostics is not None:
        output["warnings"] = [
            {
                "kind": d.kind.value,
                "interface": d.interface,
                "subject": d.subject,
                "message": d.message,
            }
            for d in diagnostics
        ]
    return output
