"""
Schema model module.

Contains the metamodel node definitions and the parser building them.
"""

from __future__ import annotations

from .nodes import Enumeration, EnumValue, SchemaModel, TypeAlias, TypeRef
from .parser import MetaModelParser, load_metamodel

__all__ = [
    "Enumeration",
    "EnumValue",
    "TypeAlias",
    "TypeRef",
    "SchemaModel",
    "MetaModelParser",
    "load_metamodel",
]
