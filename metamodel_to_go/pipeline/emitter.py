"""
Emitter: formats rendered source and persists it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from .atomic_writer import AtomicWriter
from .config import FormatterConfig
from .errors import FormatError, FormatWarning
from .formatters import Formatter, GofmtFormatter

logger = logging.getLogger(__name__)


class EmitResult(NamedTuple):
    """Outcome of emitting one output unit."""

    bytes_written: int
    warning: FormatWarning | None = None


class Emitter:
    """Formats and writes one output unit at a time.

    Holds no state between calls, each emit() is independent.
    """

    def __init__(
        self,
        formatter_config: FormatterConfig | None = None,
        formatter: Formatter | None = None,
        writer: AtomicWriter | None = None,
    ):
        self.formatter_config = formatter_config or FormatterConfig()
        self.formatter = formatter or GofmtFormatter()
        self.writer = writer or AtomicWriter()

    def emit(self, rendered_text: str, path: Path) -> EmitResult:
        """
        Format rendered text and write it to path.

        If the formatter fails, the unformatted text is written anyway so it
        can be inspected, and a warning is returned.

        Args:
            rendered_text: Source produced by the backend
            path: Output file

        Returns:
            EmitResult with the byte count and an optional FormatWarning

        Raises:
            OSError: If the file cannot be written
        """
        text = rendered_text
        warning = None

        if self.formatter_config.enabled:
            try:
                text = self.formatter.format(rendered_text, self.formatter_config)
            except FormatError as e:
                warning = FormatWarning(path=path, message=str(e))
                logger.warning("%s: formatting failed, writing unformatted source: %s", path, e)
                text = rendered_text

        bytes_written = self.writer.write(path, text)
        logger.debug("%s: wrote %d bytes", path, bytes_written)
        return EmitResult(bytes_written, warning)
