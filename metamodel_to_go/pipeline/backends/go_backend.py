"""
Go backend: renders enumerations and type aliases as Go declarations.

Declarations are built here and handed to Jinja2 render targets, which only
decide file layout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from ...utils import COMMENT_MARKER, exported_name, render_doc
from ..analyzer.name_resolver import NameResolver
from ..analyzer.type_resolver import TypeResolver, format_literal, resolve_primitive
from ..config import GeneratorConfig
from ..errors import RenderError
from ..schema_ast.nodes import Enumeration, SchemaModel, TypeAlias

TEMPLATE_SUFFIX = ".jinja2"

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "go"


class GoBackend:
    """Renders a SchemaModel into Go source through Jinja2 templates."""

    INDENT = "\t"

    def __init__(self, config: GeneratorConfig, template_dir: Path | None = None):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
            template_dir: Directory holding the render targets, defaults to the packaged Go templates
        """
        self.config = config
        self.types = TypeResolver(config.type_map)
        self.names = NameResolver(config.scoping)
        self.template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        # Helpers available to templates as filters
        self.jinja_env.filters["type"] = lambda name: resolve_primitive(name, self.types.type_map)
        self.jinja_env.filters["title"] = exported_name
        self.jinja_env.filters["comment"] = render_doc
        self.jinja_env.filters["literal"] = format_literal
        self.jinja_env.filters["resolve"] = self.types.resolve

    def targets(self) -> list[str]:
        """Names of the top-level templates in the template directory, sorted."""
        return self.jinja_env.list_templates(filter_func=lambda name: "/" not in name and name.endswith(TEMPLATE_SUFFIX))

    @staticmethod
    def output_name(template_name: str) -> str:
        """File name produced by a template (``lsp_gen.go.jinja2`` -> ``lsp_gen.go``)."""
        return Path(template_name).name.removesuffix(TEMPLATE_SUFFIX)

    def _comment(self, documentation: str | None, indent: str = "") -> list[str]:
        block = render_doc(documentation, COMMENT_MARKER)
        if not block:
            return []
        return [indent + line for line in block.split("\n")]

    def render_enumeration(self, enumeration: Enumeration) -> str:
        """
        Render one enumeration as a named type followed by a const block.

        Args:
            enumeration: The enumeration

        Returns:
            Go declaration text without a trailing newline
        """
        type_name = self.names.type_name(enumeration.name)
        base = self.types.primitive(enumeration.underlying_type)

        lines = self._comment(enumeration.documentation)
        lines.append(f"type {type_name} {base}")
        lines.append("")
        lines.append("const (")
        for i, value in enumerate(enumeration.values):
            doc = self._comment(value.documentation, self.INDENT)
            if doc and i > 0:
                lines.append("")
            lines.extend(doc)
            literal = format_literal(value.value, enumeration.underlying_type)
            lines.append(f"{self.INDENT}{self.names.constant_name(enumeration, value)} {type_name} = {literal}")
        lines.append(")")
        return "\n".join(lines)

    def render_type_alias(self, alias: TypeAlias) -> str:
        """Render one type alias as a named type declaration."""
        lines = self._comment(alias.documentation)
        lines.append(f"type {self.names.type_name(alias.name)} {self.types.resolve(alias.type)}")
        return "\n".join(lines)

    def prepare(self, model: SchemaModel, generation_comment: str = "") -> dict[str, Any]:
        """
        Build the template context for one output unit.

        Args:
            model: The schema model
            generation_comment: Header comment, empty to omit it

        Returns:
            Template variables

        Raises:
            RenderError: On identifier collisions or unrepresentable literals
        """
        self.names.check(model)

        enumerations = [self.render_enumeration(e) for e in model.enumerations]
        type_aliases = [self.render_type_alias(a) for a in model.type_aliases]

        return {
            "package": self.config.package_name,
            "generation_comment": generation_comment,
            "enumerations": enumerations,
            "type_aliases": type_aliases,
            "declarations": enumerations + type_aliases,
            "model": model,
            "version": model.version,
        }

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """
        Render one target.

        Args:
            template_name: Template file name relative to the template directory
            context: Variables built by prepare()

        Returns:
            Source text ending with exactly one newline

        Raises:
            RenderError: If the template cannot be loaded or rendered
        """
        try:
            text = self.jinja_env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise RenderError(f"{template_name}: {e}") from e
        return text.rstrip("\n") + "\n"
