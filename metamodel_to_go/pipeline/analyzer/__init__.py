"""
Analyzer module.

Resolves metamodel names, types and literals to Go syntax.
"""

from __future__ import annotations

from .name_resolver import NameResolver
from .type_resolver import TypeResolver, format_literal, go_quote, resolve_primitive

__all__ = [
    "NameResolver",
    "TypeResolver",
    "format_literal",
    "go_quote",
    "resolve_primitive",
]
