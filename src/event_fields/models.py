"""Data models for event field inference.

Two layers live here:

    - The structural model handed over by the front end: ``InterfaceDef``,
      ``MethodDef``, ``ParameterDef``, ``AnnotationDef`` and ``TypeRef``.
    - The inferred result: ``FieldMapping`` per interface, wrapped into an
      ``EventDescriptor`` and collected into an ``EventCatalog``.

The front end is trusted: these classes do not validate names against any
host language grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

# Ordered name -> type mapping; dict insertion order is the field order.
FieldMapping = Dict[str, "TypeRef"]


@dataclass(frozen=True)
class TypeRef:
    """Reference to a type in the host type system.

    Compared structurally: two references are equal when their qualified
    names and generic arguments are equal.

    Attributes:
        qualified_name: Fully-qualified type name (e.g., "java.util.Optional")
        arguments: Generic type arguments, in declaration order
    """

    qualified_name: str
    arguments: tuple[TypeRef, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @property
    def simple_name(self) -> str:
        """Last segment of the qualified name ("java.util.Optional" -> "Optional")."""
        return self.qualified_name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        if not self.arguments:
            return self.qualified_name
        inner = ", ".join(str(arg) for arg in self.arguments)
        return f"{self.qualified_name}<{inner}>"


VOID = TypeRef("void")


@dataclass(frozen=True)
class AnnotationDef:
    """An annotation attached to an interface or method.

    Attributes:
        type_name: Qualified name of the annotation type
        values: Named element values (e.g., {"value": ["foo:int"]})
    """

    type_name: str
    values: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def element(self, name: str = "value") -> Any:
        """Get a named element value, or None if absent."""
        return self.values.get(name)


@dataclass(frozen=True)
class ParameterDef:
    """A single method parameter."""

    name: str
    type: TypeRef


@dataclass
class MethodDef:
    """A method declared on an event interface.

    Attributes:
        name: Simple method name
        parameters: Parameters in declaration order
        return_type: Declared return type (VOID when nothing is returned)
        annotations: Annotations attached to the method
    """

    name: str
    parameters: list[ParameterDef] = field(default_factory=list)
    return_type: TypeRef = VOID
    annotations: list[AnnotationDef] = field(default_factory=list)

    @property
    def signature(self) -> str:
        """Human-readable signature used in diagnostics: ``name(T1, T2)``."""
        params = ", ".join(str(p.type) for p in self.parameters)
        return f"{self.name}({params})"


@dataclass
class InterfaceDef:
    """An event interface under analysis.

    Attributes:
        qualified_name: Stable identity of the interface
        methods: Declared methods, in declaration order
        annotations: Annotations attached to the interface itself
        source_file: File the interface was declared in (None if unknown)
    """

    qualified_name: str
    methods: list[MethodDef] = field(default_factory=list)
    annotations: list[AnnotationDef] = field(default_factory=list)
    source_file: Optional[str] = None

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class EventDescriptor:
    """One analyzed interface together with its inferred fields.

    The field mapping is frozen into a read-only view on construction.
    """

    qualified_name: str
    fields: Mapping[str, TypeRef] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True)
class EventCatalog:
    """All descriptors of one analysis run, ordered by qualified name."""

    events: tuple[EventDescriptor, ...] = ()

    def __iter__(self) -> Iterator[EventDescriptor]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def __contains__(self, qualified_name: object) -> bool:
        return any(e.qualified_name == qualified_name for e in self.events)

    def get(self, qualified_name: str) -> Optional[EventDescriptor]:
        """Look up a descriptor by interface name."""
        for event in self.events:
            if event.qualified_name == qualified_name:
                return event
        return None

    @property
    def names(self) -> list[str]:
        return [e.qualified_name for e in self.events]
