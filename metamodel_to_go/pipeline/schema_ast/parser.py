"""
Metamodel parser that builds the schema model.

Phase 1 of the pipeline: turn the JSON metamodel into immutable nodes,
checking only the collections the generator consumes.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..errors import LoadError
from .nodes import EnumValue, Enumeration, SchemaModel, TypeAlias, TypeRef

# Python types accepted for the values of each known underlying type
VALUE_TYPES: dict[str, type] = {
    "string": str,
    "integer": int,
    "uinteger": int,
}


class MetaModelParser:
    """Parses a metamodel document into a SchemaModel."""

    # Sections consumed by the generator, everything else is carried in extras
    CONSUMED_SECTIONS = {"enumerations", "typeAliases", "metaData"}

    TYPE_KINDS = {
        "base",
        "reference",
        "array",
        "map",
        "or",
        "and",
        "tuple",
        "literal",
        "stringLiteral",
        "integerLiteral",
        "booleanLiteral",
    }

    def parse(self, document: Any) -> SchemaModel:
        """
        Parse a metamodel document.

        Args:
            document: The decoded JSON document

        Returns:
            SchemaModel with enumerations and type aliases in document order

        Raises:
            LoadError: If a consumed section is missing or malformed
        """
        if not isinstance(document, dict):
            raise LoadError("metamodel document must be a JSON object")

        enumerations = [
            self._parse_enumeration(item, f"enumerations/{i}") for i, item in enumerate(self._section(document, "enumerations"))
        ]
        aliases = [self._parse_type_alias(item, f"typeAliases/{i}") for i, item in enumerate(self._section(document, "typeAliases"))]

        meta_data = document.get("metaData") or {}
        if not isinstance(meta_data, dict):
            raise LoadError("metaData: expected an object")

        extras = {k: v for k, v in document.items() if k not in self.CONSUMED_SECTIONS}

        return SchemaModel(
            enumerations=tuple(enumerations),
            type_aliases=tuple(aliases),
            meta_data=MappingProxyType(dict(meta_data)),
            extras=MappingProxyType(extras),
        )

    def _section(self, document: dict[str, Any], key: str) -> list[Any]:
        if key not in document:
            raise LoadError(f"missing required section '{key}'")
        section = document[key]
        if not isinstance(section, list):
            raise LoadError(f"{key}: expected an array, got {type(section).__name__}")
        return section

    def _require(self, item: dict[str, Any], key: str, path: str) -> Any:
        if key not in item:
            raise LoadError(f"{path}: missing required field '{key}'")
        return item[key]

    def _object(self, item: Any, path: str) -> dict[str, Any]:
        if not isinstance(item, dict):
            raise LoadError(f"{path}: expected an object, got {type(item).__name__}")
        return item

    def _name(self, item: dict[str, Any], path: str) -> str:
        name = self._require(item, "name", path)
        if not isinstance(name, str) or not name:
            raise LoadError(f"{path}: 'name' must be a non-empty string")
        return name

    def _optional_str(self, item: dict[str, Any], key: str, path: str) -> str | None:
        value = item.get(key)
        if value is not None and not isinstance(value, str):
            raise LoadError(f"{path}: '{key}' must be a string")
        return value

    def _doc_fields(self, item: dict[str, Any], path: str) -> dict[str, Any]:
        """Extract the documentation fields shared by all entities."""
        return {
            "documentation": self._optional_str(item, "documentation", path),
            "since": self._optional_str(item, "since", path),
            "deprecated": self._optional_str(item, "deprecated", path),
            "proposed": bool(item.get("proposed", False)),
        }

    def _parse_enumeration(self, item: Any, path: str) -> Enumeration:
        """Parse one entry of the enumerations section."""
        item = self._object(item, path)
        name = self._name(item, path)
        path = f"{path} ({name})"

        type_ref = self._parse_type_ref(self._require(item, "type", path), f"{path}/type")
        if type_ref.kind != "base" or not type_ref.name:
            raise LoadError(f"{path}: enumeration type must be a base type")

        raw_values = self._require(item, "values", path)
        if not isinstance(raw_values, list):
            raise LoadError(f"{path}: 'values' must be an array")
        if not raw_values:
            raise LoadError(f"{path}: enumeration has no values")

        values = tuple(self._parse_enum_value(v, type_ref.name, f"{path}/values/{i}") for i, v in enumerate(raw_values))

        return Enumeration(
            name=name,
            type=type_ref,
            values=values,
            supports_custom_values=bool(item.get("supportsCustomValues", False)),
            **self._doc_fields(item, path),
        )

    def _parse_enum_value(self, item: Any, underlying_type: str, path: str) -> EnumValue:
        """Parse one enumeration value, checking it against the underlying type."""
        item = self._object(item, path)
        name = self._name(item, path)
        value = self._require(item, "value", path)

        expected = VALUE_TYPES.get(underlying_type)
        if expected is not None and (isinstance(value, bool) or not isinstance(value, expected)):
            raise LoadError(f"{path} ({name}): value {value!r} does not match underlying type '{underlying_type}'")
        if not isinstance(value, (int, str)) or isinstance(value, bool):
            raise LoadError(f"{path} ({name}): value must be an integer or a string")

        return EnumValue(name=name, value=value, **self._doc_fields(item, path))

    def _parse_type_alias(self, item: Any, path: str) -> TypeAlias:
        """Parse one entry of the typeAliases section."""
        item = self._object(item, path)
        name = self._name(item, path)
        path = f"{path} ({name})"
        type_ref = self._parse_type_ref(self._require(item, "type", path), f"{path}/type")
        return TypeAlias(name=name, type=type_ref, **self._doc_fields(item, path))

    def _parse_type_ref(self, item: Any, path: str) -> TypeRef:
        """Parse a type reference recursively."""
        item = self._object(item, path)
        kind = self._require(item, "kind", path)
        if kind not in self.TYPE_KINDS:
            raise LoadError(f"{path}: unknown type kind {kind!r}")

        if kind in ("base", "reference"):
            return TypeRef(kind=kind, name=self._name(item, path))

        if kind == "array":
            return TypeRef(kind=kind, element=self._parse_type_ref(self._require(item, "element", path), f"{path}/element"))

        if kind == "map":
            return TypeRef(
                kind=kind,
                key=self._parse_type_ref(self._require(item, "key", path), f"{path}/key"),
                value=self._parse_type_ref(self._require(item, "value", path), f"{path}/value"),
            )

        if kind in ("or", "and", "tuple"):
            items = self._require(item, "items", path)
            if not isinstance(items, list) or not items:
                raise LoadError(f"{path}: '{kind}' type needs a non-empty 'items' array")
            return TypeRef(kind=kind, items=tuple(self._parse_type_ref(t, f"{path}/items/{i}") for i, t in enumerate(items)))

        # Literal kinds keep their raw value, structural contents are not examined
        return TypeRef(kind=kind, literal=item.get("value"))


def load_metamodel(path: str | Path) -> SchemaModel:
    """
    Read and parse a metamodel JSON file.

    Args:
        path: Path to the metaModel.json file

    Returns:
        The parsed SchemaModel

    Raises:
        LoadError: If the file cannot be read, decoded or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise LoadError(f"cannot read metamodel {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"{path}: invalid JSON: {e}") from e

    return MetaModelParser().parse(document)
