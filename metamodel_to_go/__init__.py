"""Metamodel to Go Generator

Generates Go enumeration and type alias declarations from a protocol
metamodel (LSP metaModel.json), formatted with gofmt.
"""

__version__ = "1.0.0"

from .pipeline import (
    GenerationReport,
    GeneratorConfig,
    LoadError,
    PipelineGenerator,
    RenderError,
    ScopingMode,
    load_metamodel,
)

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "GeneratorConfig",
    "ScopingMode",
    "LoadError",
    "RenderError",
    "load_metamodel",
]
