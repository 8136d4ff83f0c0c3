"""Method classification rules.

Classifies an interface method as a getter or a setter and derives the
field it implies. Rules are evaluated in declaration order; first matching
rule wins, so the getter rule always shadows the setter rule.

Note that the getter rule also accepts *any* zero-argument method, whatever
its name. ``cancel()`` therefore implies a field ``cancel`` typed by its
return type. This is observable behavior and is kept as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .models import MethodDef, TypeRef

OPTIONAL_SIMPLE_NAME = "Optional"


class MethodKind(Enum):
    """Accessor kinds, in evaluation order."""

    GETTER = "getter"
    SETTER = "setter"


@dataclass(frozen=True)
class Classification:
    """Field implied by a single accessor method."""

    kind: MethodKind
    field_name: str
    field_type: TypeRef


@dataclass(frozen=True)
class MethodRule:
    """A single classification rule.

    Attributes:
        kind: Accessor kind produced by this rule
        prefix: Name prefix stripped when deriving the field name
        matches: Predicate deciding whether the rule applies
        extract_type: Derives the field type from a matching method
    """

    kind: MethodKind
    prefix: str
    matches: Callable[[MethodDef, str], bool]
    extract_type: Callable[[MethodDef], TypeRef]

    def field_name(self, method: MethodDef) -> str:
        """Strip the prefix (when present) and lower-case the first character."""
        name = method.name
        if name.startswith(self.prefix):
            name = name[len(self.prefix):]
        if not name:
            return ""
        return name[0].lower() + name[1:]


def _has_prefix(name: str, prefix: str) -> bool:
    return len(name) > len(prefix) and name.startswith(prefix)


def _matches_getter(method: MethodDef, prefix: str) -> bool:
    return _has_prefix(method.name, prefix) or not method.parameters


def _matches_setter(method: MethodDef, prefix: str) -> bool:
    return _has_prefix(method.name, prefix) and len(method.parameters) == 1


def unwrap_optional(type_ref: TypeRef) -> TypeRef:
    """Unwrap ``Optional<T>`` to ``T``; anything else is returned unchanged."""
    if type_ref.simple_name == OPTIONAL_SIMPLE_NAME and len(type_ref.arguments) == 1:
        return type_ref.arguments[0]
    return type_ref


def _getter_type(method: MethodDef) -> TypeRef:
    return unwrap_optional(method.return_type)


def _setter_type(method: MethodDef) -> TypeRef:
    return method.parameters[0].type


GETTER = MethodRule(MethodKind.GETTER, "get", _matches_getter, _getter_type)
SETTER = MethodRule(MethodKind.SETTER, "set", _matches_setter, _setter_type)

# Order matters: getter before setter.
RULES: tuple[MethodRule, ...] = (GETTER, SETTER)


def classify(method: MethodDef) -> Optional[Classification]:
    """Classify a method as an accessor.

    Args:
        method: Method from the structural model

    Returns:
        The implied field, or None when no rule matches or the derived
        field name is empty (the caller reports it as an unknown method).
    """
    for rule in RULES:
        if rule.matches(method, rule.prefix):
            name = rule.field_name(method)
            if not name:
                return None
            return Classification(rule.kind, name, rule.extract_type(method))
    return None
