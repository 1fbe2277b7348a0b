"""
Exceptions and warnings raised by the generation pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class GeneratorError(Exception):
    """Base exception for all generation errors."""

    pass


class LoadError(GeneratorError):
    """Raised when the metamodel document cannot be loaded.

    This can happen when:
    - The file cannot be read or is not valid JSON
    - A required collection or field is missing
    - An entity violates an invariant (e.g. an enumeration with no values)
    - A value literal does not match its enumeration's underlying type
    """

    pass


class RenderError(GeneratorError):
    """Raised when a render target cannot be produced.

    Attributes:
        duplicates: Duplicated identifier -> descriptions of the entities producing it
    """

    def __init__(self, message: str, duplicates: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.duplicates = duplicates or {}


class FormatError(GeneratorError):
    """Raised by a formatter that rejects the generated code."""

    pass


@dataclass(frozen=True)
class FormatWarning:
    """Non-fatal result of a formatter failure.

    The unformatted code was persisted at ``path``.
    """

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: error: {self.message}"
