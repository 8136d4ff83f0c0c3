"""Default type-resolution service.

Turns textual type names such as ``java.util.List<java.lang.String>`` into
``TypeRef`` values. Front ends with a real type system inject their own
resolver instead; any ``Callable[[str], TypeRef]`` will do.
"""

from __future__ import annotations

from typing import Callable

from .exceptions import TypeSyntaxError
from .models import TypeRef

TypeResolver = Callable[[str], TypeRef]


def resolve_type_name(text: str) -> TypeRef:
    """Parse a textual type reference.

    Supports nested generic arguments with ``<`` / ``>`` and ``,``.
    Whitespace around names is ignored.

    Raises:
        TypeSyntaxError: On empty names or unbalanced brackets
    """
    type_ref, pos = _parse(text, 0)
    if text[pos:].strip():
        raise TypeSyntaxError(text, f"unexpected trailing input at offset {pos}")
    return type_ref


def _parse(text: str, pos: int) -> tuple[TypeRef, int]:
    start = pos
    while pos < len(text) and text[pos] not in "<>,":
        pos += 1
    name = text[start:pos].strip()
    if not name:
        raise TypeSyntaxError(text, f"missing type name at offset {start}")

    if pos >= len(text) or text[pos] != "<":
        return TypeRef(name), pos

    arguments: list[TypeRef] = []
    pos += 1
    while True:
        argument, pos = _parse(text, pos)
        arguments.append(argument)
        if pos >= len(text):
            raise TypeSyntaxError(text, "unclosed '<'")
        if text[pos] == ",":
            pos += 1
            continue
        if text[pos] == ">":
            return TypeRef(name, tuple(arguments)), pos + 1
        raise TypeSyntaxError(text, f"unexpected {text[pos]!r} at offset {pos}")
