"""
Type and literal resolution from metamodel names to Go syntax.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...utils import exported_name
from ..errors import RenderError
from ..schema_ast.nodes import TypeRef

GO_INT = "int"

# Schema primitive -> Go primitive, any other name passes through
PRIMITIVE_TYPES: dict[str, str] = {
    "integer": GO_INT,
    "uinteger": GO_INT,
}

# Remaining metamodel base types, used when resolving full type references
BASE_TYPES: dict[str, str] = {
    "boolean": "bool",
    "decimal": "float64",
    "string": "string",
    "URI": "string",
    "DocumentUri": "string",
    "RegExp": "string",
    "null": "any",
}

STRING_TYPE = "string"
INTEGER_TYPES = {"integer", "uinteger"}

GO_ANY = "any"

_GO_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def resolve_primitive(name: str, overrides: Mapping[str, str] | None = None) -> str:
    """Map a schema primitive name to its Go name, unknown names pass through."""
    if overrides and name in overrides:
        return overrides[name]
    return PRIMITIVE_TYPES.get(name, name)


def go_quote(text: str) -> str:
    """Quote text as a Go interpreted string literal, as Go's %q does."""
    out = ['"']
    for ch in text:
        code = ord(ch)
        if ch in _GO_ESCAPES:
            out.append(_GO_ESCAPES[ch])
        elif 0xD800 <= code <= 0xDFFF:
            # Lone surrogate, not representable in UTF-8
            out.append("\ufffd")
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def format_literal(value: Any, underlying_type: str) -> str:
    """
    Format an enumeration value as a Go literal.

    Args:
        value: The metamodel value (string or integer)
        underlying_type: The enumeration's underlying schema type

    Returns:
        Quoted string literal or bare decimal integer

    Raises:
        RenderError: If the value cannot be written for this underlying type
    """
    if underlying_type == STRING_TYPE:
        if not isinstance(value, str):
            raise RenderError(f"cannot represent {value!r} as a Go string literal")
        return go_quote(value)

    if underlying_type in INTEGER_TYPES:
        if isinstance(value, bool) or not isinstance(value, int):
            raise RenderError(f"cannot represent {value!r} as a Go integer literal")
        if underlying_type == "uinteger" and value < 0:
            raise RenderError(f"negative value {value} for unsigned underlying type")
        return str(value)

    raise RenderError(f"no literal syntax for underlying type '{underlying_type}' (value {value!r})")


class TypeResolver:
    """Resolves metamodel type references to Go type expressions."""

    def __init__(self, type_map: Mapping[str, str] | None = None):
        """
        Initialize the resolver.

        Args:
            type_map: Extra schema name -> Go type mappings, checked first
        """
        self.type_map = dict(type_map or {})

    def primitive(self, name: str) -> str:
        """Resolve a schema primitive name with the configured overrides."""
        return resolve_primitive(name, self.type_map)

    def resolve(self, type_ref: TypeRef) -> str:
        """
        Translate a type reference to a Go type expression.

        Args:
            type_ref: The type reference

        Returns:
            Go type expression
        """
        kind = type_ref.kind

        if kind == "base":
            name = type_ref.name or ""
            if name in self.type_map or name in PRIMITIVE_TYPES:
                return self.primitive(name)
            return BASE_TYPES.get(name, name)

        if kind == "reference":
            return exported_name(type_ref.name or "")

        if kind == "array":
            return "[]" + self.resolve(type_ref.element)

        if kind == "map":
            return f"map[{self.resolve(type_ref.key)}]{self.resolve(type_ref.value)}"

        if kind == "or":
            members = [t for t in type_ref.items if not (t.kind == "base" and t.name == "null")]
            return self._common([self.resolve(t) for t in members])

        if kind == "tuple":
            return "[]" + self._common([self.resolve(t) for t in type_ref.items])

        if kind == "stringLiteral":
            return BASE_TYPES[STRING_TYPE]

        if kind == "integerLiteral":
            return self.primitive("integer")

        if kind == "booleanLiteral":
            return BASE_TYPES["boolean"]

        # "and" and inline "literal" structures belong to the structure generator
        return GO_ANY

    def _common(self, resolved: list[str]) -> str:
        """Return the single type shared by all members, else any."""
        if resolved and all(r == resolved[0] for r in resolved):
            return resolved[0]
        return GO_ANY
