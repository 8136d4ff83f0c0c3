"""Structural model loader.

Reads the interface model dumped by a front end as JSON:

    {
      "interfaces": [
        {
          "qualified_name": "org.example.event.PlayerJoinEvent",
          "source_file": "src/main/java/org/example/event/PlayerJoinEvent.java",
          "annotations": [{"type": "org.example.ImplementedBy", "values": {"value": ["a:int"]}}],
          "methods": [
            {"name": "getPlayer", "return_type": "org.example.Player"},
            {"name": "setMessage", "parameters": [{"name": "message", "type": "java.lang.String"}]}
          ]
        }
      ]
    }

Types are either strings (parsed with the type resolver) or objects of the
form ``{"name": "java.util.Optional", "arguments": [...]}``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import EventFieldsError, ModelLoadError
from .models import VOID, AnnotationDef, InterfaceDef, MethodDef, ParameterDef, TypeRef
from .types import TypeResolver, resolve_type_name

logger = logging.getLogger(__name__)


def load_interfaces(path: Path, resolve_type: TypeResolver = resolve_type_name) -> list[InterfaceDef]:
    """Load interface definitions from a JSON model file.

    Raises:
        ModelLoadError: If the file is unreadable or not a valid model
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ModelLoadError(path, str(e))
    except json.JSONDecodeError as e:
        raise ModelLoadError(path, f"invalid JSON: {e}")

    try:
        interfaces = parse_model(raw, resolve_type)
    except ModelLoadError:
        raise
    except (EventFieldsError, AttributeError, KeyError, TypeError, ValueError) as e:
        raise ModelLoadError(path, f"{type(e).__name__}: {e}")

    logger.debug("Loaded %d interface(s) from %s", len(interfaces), path)
    return interfaces


def parse_model(raw: Any, resolve_type: TypeResolver = resolve_type_name) -> list[InterfaceDef]:
    """Build interface definitions from already-decoded JSON data."""
    if isinstance(raw, dict):
        entries = raw["interfaces"]
    else:
        entries = raw
    if not isinstance(entries, list):
        raise TypeError("'interfaces' must be a list")
    return [_parse_interface(entry, resolve_type) for entry in entries]


def _parse_interface(data: dict, resolve_type: TypeResolver) -> InterfaceDef:
    return InterfaceDef(
        qualified_name=data["qualified_name"],
        methods=[_parse_method(m, resolve_type) for m in data.get("methods", [])],
        annotations=[_parse_annotation(a) for a in data.get("annotations", [])],
        source_file=data.get("source_file"),
    )


def _parse_method(data: dict, resolve_type: TypeResolver) -> MethodDef:
    return_type = data.get("return_type")
    return MethodDef(
        name=data["name"],
        parameters=[
            ParameterDef(p.get("name", f"arg{i}"), _parse_type(p["type"], resolve_type))
            for i, p in enumerate(data.get("parameters", []))
        ],
        return_type=VOID if return_type is None else _parse_type(return_type, resolve_type),
        annotations=[_parse_annotation(a) for a in data.get("annotations", [])],
    )


def _parse_annotation(data: dict) -> AnnotationDef:
    return AnnotationDef(type_name=data["type"], values=dict(data.get("values", {})))


def _parse_type(data: Any, resolve_type: TypeResolver) -> TypeRef:
    if isinstance(data, str):
        return resolve_type(data)
    return TypeRef(
        data["name"],
        tuple(_parse_type(arg, resolve_type) for arg in data.get("arguments", [])),
    )
