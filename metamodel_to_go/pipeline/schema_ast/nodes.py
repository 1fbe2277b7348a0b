"""
Node definitions for the parsed protocol metamodel.

These nodes are the read-only model every later phase consumes. They are
built once by the parser and never modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class TypeRef:
    """A metamodel type reference (``{"kind": ..., ...}``)."""

    kind: str
    name: str | None = None  # "base" and "reference"
    element: TypeRef | None = None  # "array"
    key: TypeRef | None = None  # "map"
    value: TypeRef | None = None  # "map"
    items: tuple[TypeRef, ...] = ()  # "or", "and", "tuple"
    literal: Any = None  # "stringLiteral", "integerLiteral", "booleanLiteral", "literal"


@dataclass(frozen=True)
class EnumValue:
    """One member of an enumeration."""

    name: str
    value: int | str
    documentation: str | None = None
    since: str | None = None
    deprecated: str | None = None
    proposed: bool = False


@dataclass(frozen=True)
class Enumeration:
    """A named group of constants sharing one underlying primitive type."""

    name: str
    type: TypeRef
    values: tuple[EnumValue, ...]
    documentation: str | None = None
    supports_custom_values: bool = False
    since: str | None = None
    deprecated: str | None = None
    proposed: bool = False

    @property
    def underlying_type(self) -> str:
        return self.type.name or ""


@dataclass(frozen=True)
class TypeAlias:
    """A named alias for another metamodel type."""

    name: str
    type: TypeRef
    documentation: str | None = None
    since: str | None = None
    deprecated: str | None = None
    proposed: bool = False


@dataclass(frozen=True)
class SchemaModel:
    """Root of the parsed metamodel."""

    enumerations: tuple[Enumeration, ...] = ()
    type_aliases: tuple[TypeAlias, ...] = ()

    # Raw "metaData" section (e.g. {"version": "3.17.0"})
    meta_data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    # Every other top-level section (structures, requests, notifications), untouched
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def version(self) -> str:
        return str(self.meta_data.get("version", ""))
