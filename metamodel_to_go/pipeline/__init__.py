"""
Pipeline - metamodel to Go source generator.

1. Phase 1 (Parser): Parse the metamodel JSON into an immutable SchemaModel
2. Phase 2 (Analyzer): Resolve exported names, types and literals, reject collisions
3. Phase 3 (Backend): Render Go declarations through Jinja2 render targets
4. Phase 4 (Formatter): Pipe the source through gofmt
5. Phase 5 (Writer): Atomically persist the result, unformatted if gofmt failed
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import FormatterConfig, GeneratorConfig, OutputConfig, ScopingMode
from .emitter import EmitResult, Emitter
from .errors import FormatError, FormatWarning, GeneratorError, LoadError, RenderError
from .generator import GenerationReport, PipelineGenerator, TargetResult
from .schema_ast import MetaModelParser, SchemaModel, load_metamodel

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "TargetResult",
    "GeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "ScopingMode",
    "Emitter",
    "EmitResult",
    "AtomicWriter",
    "GeneratorError",
    "LoadError",
    "RenderError",
    "FormatError",
    "FormatWarning",
    "MetaModelParser",
    "SchemaModel",
    "load_metamodel",
]
