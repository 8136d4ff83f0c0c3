"""Shared test fixtures and builders for event-fields tests."""

from __future__ import annotations

import pytest

from event_fields.diagnostics import CollectingDiagnosticSink
from event_fields.inference import FieldInferenceEngine
from event_fields.models import AnnotationDef, InterfaceDef, MethodDef, ParameterDef, TypeRef

OVERRIDE = "org.example.event.ImplementedFields"

INT = TypeRef("int")
LONG = TypeRef("long")
STRING = TypeRef("java.lang.String")


def make_type(name: str, *arguments: TypeRef) -> TypeRef:
    return TypeRef(name, tuple(arguments))


def make_override(*entries: str, type_name: str = OVERRIDE) -> AnnotationDef:
    return AnnotationDef(type_name=type_name, values={"value": list(entries)})


def make_method(
    name: str,
    params: list[TypeRef] | None = None,
    returns: TypeRef | None = None,
    annotations: list[AnnotationDef] | None = None,
) -> MethodDef:
    """Helper to create MethodDef for testing."""
    return MethodDef(
        name=name,
        parameters=[ParameterDef(f"arg{i}", t) for i, t in enumerate(params or [])],
        return_type=returns if returns is not None else TypeRef("void"),
        annotations=annotations or [],
    )


def make_interface(
    name: str = "org.example.event.TestEvent",
    methods: list[MethodDef] | None = None,
    annotations: list[AnnotationDef] | None = None,
    source_file: str | None = None,
) -> InterfaceDef:
    """Helper to create InterfaceDef for testing."""
    return InterfaceDef(
        qualified_name=name,
        methods=methods or [],
        annotations=annotations or [],
        source_file=source_file,
    )


@pytest.fixture
def sink():
    """Diagnostic sink that records warnings."""
    return CollectingDiagnosticSink()


@pytest.fixture
def engine(sink):
    """Inference engine with overrides enabled."""
    return FieldInferenceEngine(override_annotation=OVERRIDE, diagnostics=sink)
