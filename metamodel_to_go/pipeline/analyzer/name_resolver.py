"""
Name resolver for exported Go identifiers.

Derives type and constant names from the metamodel and rejects models whose
entities would declare the same identifier twice in one package.
"""

from __future__ import annotations

from collections import defaultdict

from ...utils import exported_name
from ..config import ScopingMode
from ..errors import RenderError
from ..schema_ast.nodes import Enumeration, EnumValue, SchemaModel


class NameResolver:
    """Resolves exported names and detects collisions."""

    def __init__(self, scoping: ScopingMode = ScopingMode.FLAT):
        self.scoping = scoping

    def type_name(self, name: str) -> str:
        """Name of the Go type declared for an enumeration or type alias."""
        return exported_name(name)

    def constant_name(self, enumeration: Enumeration, value: EnumValue) -> str:
        """Name of the Go constant declared for an enumeration value."""
        if self.scoping == ScopingMode.QUALIFIED:
            return exported_name(enumeration.name) + exported_name(value.name)
        return exported_name(value.name)

    def check(self, model: SchemaModel) -> None:
        """
        Verify every declared identifier is unique in the output scope.

        Go types and constants share one package scope, so type names and
        constant names are registered in a single namespace. The one pairing
        left through is an enumeration whose own value resolves to the
        enumeration's type name (``type Off string`` with ``Off Off = "off"``);
        Go rejects it as well, qualified scoping avoids it.

        Args:
            model: The schema model feeding one output unit

        Raises:
            RenderError: Naming every duplicated identifier and its origins
        """
        # identifier -> [(owning entity, is a type, origin)]
        names: dict[str, list[tuple[str, bool, str]]] = defaultdict(list)

        for enumeration in model.enumerations:
            owner = f"enumeration {enumeration.name}"
            names[self.type_name(enumeration.name)].append((owner, True, owner))
            for value in enumeration.values:
                names[self.constant_name(enumeration, value)].append((owner, False, f"{owner} value '{value.name}'"))

        for alias in model.type_aliases:
            origin = f"type alias {alias.name}"
            names[self.type_name(alias.name)].append((origin, True, origin))

        duplicates = {
            ident: [origin for _, _, origin in entries] for ident, entries in names.items() if self._collides(entries)
        }
        if duplicates:
            details = "; ".join(f"{ident} ({', '.join(origins)})" for ident, origins in duplicates.items())
            raise RenderError(f"duplicate identifiers in output scope: {details}", duplicates=duplicates)

    @staticmethod
    def _collides(entries: list[tuple[str, bool, str]]) -> bool:
        if len(entries) < 2:
            return False
        owners = {owner for owner, _, _ in entries}
        types = sum(1 for _, is_type, _ in entries if is_type)
        return len(owners) > 1 or types > 1 or len(entries) - types > 1
