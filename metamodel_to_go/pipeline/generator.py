"""
Pipeline generator: runs every render target over one schema model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .. import __version__
from .atomic_writer import AtomicWriter
from .backends import GoBackend
from .config import GeneratorConfig
from .emitter import Emitter
from .errors import FormatWarning, RenderError
from .formatters import Formatter
from .schema_ast.nodes import SchemaModel

logger = logging.getLogger(__name__)


@dataclass
class TargetResult:
    """Result of one render target."""

    name: str
    path: Path
    bytes_written: int = 0
    warning: FormatWarning | None = None
    error: RenderError | None = None


@dataclass
class GenerationReport:
    """Results of a generation run, one entry per render target."""

    results: list[TargetResult] = field(default_factory=list)

    @property
    def warnings(self) -> list[FormatWarning]:
        return [r.warning for r in self.results if r.warning is not None]

    @property
    def errors(self) -> list[RenderError]:
        return [r.error for r in self.results if r.error is not None]

    @property
    def ok(self) -> bool:
        """True when every target was rendered and formatted."""
        return not self.warnings and not self.errors


class PipelineGenerator:
    """Generates Go sources from a schema model.

    Every template in the template directory is one render target producing
    one file in the output directory.
    """

    def __init__(
        self,
        model: SchemaModel,
        config: GeneratorConfig | None = None,
        template_dir: Path | None = None,
        formatter: Formatter | None = None,
        command_line: str = "metamodel_to_go",
    ):
        """
        Initialize the generator.

        Args:
            model: The parsed metamodel
            config: Code generation configuration
            template_dir: Directory of render targets, defaults to the packaged Go templates
            formatter: Formatter to use, defaults to gofmt
            command_line: Command recorded in the generation comment
        """
        self.model = model
        self.config = config or GeneratorConfig()
        self.backend = GoBackend(self.config, template_dir)
        self.emitter = Emitter(
            self.config.formatter,
            formatter,
            AtomicWriter(self.config.output.file_mode),
        )
        self.command_line = command_line

    def generation_comment(self) -> str:
        """Header marking the file as generated, in the form Go tools recognize."""
        if not self.config.add_generation_comment:
            return ""
        return f"// Code generated by metamodel_to_go v{__version__}: {self.command_line}. DO NOT EDIT."

    def targets(self) -> list[str]:
        return self.backend.targets()

    def render(self, target: str) -> str:
        """
        Render one target to unformatted source.

        Raises:
            RenderError: On collisions, unrepresentable literals or template errors
        """
        context = self.backend.prepare(self.model, self.generation_comment())
        return self.backend.render(target, context)

    def generate(self, output_dir: Path) -> GenerationReport:
        """
        Render, format and write every target.

        Args:
            output_dir: Directory receiving the generated files

        Returns:
            GenerationReport with one result per target

        Raises:
            RenderError: In strict mode, on the first target that cannot be rendered
            OSError: If an output file cannot be written
        """
        output_dir = Path(output_dir)
        report = GenerationReport()

        targets = self.targets()
        if not targets:
            logger.warning("no render targets found in %s", self.backend.template_dir)

        formatter_config = self.config.formatter
        if formatter_config.enabled and not self.emitter.formatter.is_available(formatter_config):
            logger.warning("formatter %s not found, output will not be formatted", formatter_config.command)

        # Render everything first so a strict failure leaves no new files behind
        rendered: list[tuple[TargetResult, str]] = []
        for target in targets:
            result = TargetResult(name=target, path=output_dir / self.backend.output_name(target))
            report.results.append(result)
            try:
                rendered.append((result, self.render(target)))
            except RenderError as e:
                if self.config.strict:
                    raise
                logger.error("%s: %s", target, e)
                result.error = e

        for result, text in rendered:
            logger.info("generating %s from %s", result.path, result.name)
            emitted = self.emitter.emit(text, result.path)
            result.bytes_written = emitted.bytes_written
            result.warning = emitted.warning

        return report
