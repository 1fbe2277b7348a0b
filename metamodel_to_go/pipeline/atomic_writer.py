"""
Atomic file writer for generated sources.

Ensures that an interrupted or short write never leaves a truncated
output file in place.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Check every byte was written and flush it to disk
    3. Atomically replace the target file

    Readers see either the previous file or the complete new one.
    """

    def __init__(self, file_mode: int = 0o644):
        """Initialize the atomic writer.

        Args:
            file_mode: Permission bits given to written files
        """
        self.file_mode = file_mode

    def write(self, path: Path, content: str) -> int:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write, encoded as UTF-8

        Returns:
            Number of bytes written

        Raises:
            OSError: If file operations fail or the write is short
        """
        data = content.encode("utf-8")

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "wb") as f:
                written = f.write(data)
                if written != len(data):
                    raise OSError(f"short write to {temp_path}: {written} of {len(data)} bytes")
                f.flush()
                os.fsync(f.fileno())

            os.chmod(temp_path, self.file_mode)
            temp_path.replace(path)

        except BaseException:
            # Clean up temp file on any error
            temp_path.unlink(missing_ok=True)
            raise

        return len(data)
