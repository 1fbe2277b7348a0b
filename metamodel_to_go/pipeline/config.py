"""
Configuration for the metamodel to Go generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ScopingMode(str, Enum):
    """How enumeration constants are named in the generated package scope."""

    FLAT = "flat"  # Default: constant named after the value, must be unique package-wide
    QUALIFIED = "qualified"  # Constant prefixed with its enumeration name


@dataclass
class FormatterConfig:
    """Configuration for the external Go formatter."""

    # Whether formatting is enabled
    enabled: bool = True

    # Formatter command, reads source on stdin and writes formatted source on stdout
    command: list[str] = field(default_factory=lambda: ["gofmt"])

    # Seconds before the formatter process is considered failed
    timeout: float = 30.0


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        file_mode: Permission bits of the generated files
    """

    file_mode: int = 0o644


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Go package clause of the generated files
    package_name: str = "lsp"

    # Extra schema type name -> Go type name mappings, applied before the built-in ones
    type_map: dict[str, str] = field(default_factory=dict)

    # Naming of enumeration constants
    scoping: ScopingMode = ScopingMode.FLAT

    # Abort the run on the first render error instead of skipping the target
    strict: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(**v)
            elif k == "scoping":
                config.scoping = ScopingMode(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "type_map": dict(self.type_map),
            "scoping": self.scoping.value,
            "strict": self.strict,
            "add_generation_comment": self.add_generation_comment,
            "formatter": {
                "enabled": self.formatter.enabled,
                "command": list(self.formatter.command),
                "timeout": self.formatter.timeout,
            },
            "output": {
                "file_mode": self.output.file_mode,
            },
        }
