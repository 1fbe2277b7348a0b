"""
gofmt formatter for Go code.
"""

from __future__ import annotations

import shutil
import subprocess

from ..config import FormatterConfig
from ..errors import FormatError
from .base import Formatter


class GofmtFormatter(Formatter):
    """Formatter piping Go source through gofmt (or a compatible command)."""

    def is_available(self, config: FormatterConfig) -> bool:
        """Check if the formatter command is on the PATH."""
        return bool(config.command) and shutil.which(config.command[0]) is not None

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Go code.

        Args:
            code: Go source code to format
            config: Formatter configuration

        Returns:
            Formatted code

        Raises:
            FormatError: If the command is missing, cannot be run, times out or rejects the code
        """
        if not config.command:
            raise FormatError("no formatter command configured")

        try:
            result = subprocess.run(
                config.command,
                input=code.encode("utf-8"),
                capture_output=True,
                timeout=config.timeout,
            )
        except FileNotFoundError as e:
            raise FormatError(f"formatter not found: {config.command[0]}") from e
        except OSError as e:
            raise FormatError(f"cannot run formatter {config.command[0]}: {e}") from e
        except subprocess.SubprocessError as e:
            raise FormatError(f"formatter failed: {e}") from e

        if result.returncode != 0:
            message = result.stderr.decode("utf-8", errors="replace").strip()
            raise FormatError(message or f"{config.command[0]} exited with status {result.returncode}")

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"formatter output is not UTF-8: {e}") from e
