"""
Identifier and comment helpers for the Go generator.
"""

import re

# Line breaks in metamodel documentation
_LINE_BREAK = re.compile(r"\r\n|\n")

COMMENT_MARKER = "//"


def exported_name(name: str) -> str:
    """Make a metamodel name visible outside its Go package.

    Metamodel names are already camelCase or PascalCase, so only the first
    character changes.

    Examples:
        "textDocument" -> "TextDocument"
        "Full" -> "Full"
        "uri" -> "Uri"

    Args:
        name: The metamodel name

    Returns:
        Exported Go identifier
    """
    if not name:
        return ""
    return name[0].upper() + name[1:]


def render_doc(text: str | None, marker: str = COMMENT_MARKER) -> str:
    """Turn documentation into a block of line comments.

    Empty lines become a bare marker. Returns "" for missing documentation so
    the caller can leave the block out.
    """
    if not text:
        return ""
    return "\n".join(f"{marker} {line}" if line else marker for line in _LINE_BREAK.split(text))


def strip_doc(block: str, marker: str = COMMENT_MARKER) -> str:
    """Recover the documentation text from a block built by render_doc."""
    if not block:
        return ""
    lines = []
    for line in block.split("\n"):
        line = line.lstrip()
        if line.startswith(f"{marker} "):
            lines.append(line[len(marker) + 1 :])
        elif line == marker:
            lines.append("")
        else:
            raise ValueError(f"not a comment line: {line!r}")
    return "\n".join(lines)
