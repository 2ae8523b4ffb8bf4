from __future__ import annotations

from typing import Optional

from lightset.core.models import RawLine

COMMENT_PREFIX = "#"
SEPARATOR = "="


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n``, ``\\r\\n`` or ``\\r``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def split_line(line: str) -> Optional[RawLine]:
    """
    Split a declaration line, or return ``None`` when the line declares nothing.

    Blank lines, lines starting with ``#`` in the first column and lines without ``=`` are
    skipped. The key and value keep any surrounding whitespace.
    """
    if line.startswith(COMMENT_PREFIX) or not line.strip():
        return None

    key, separator, raw_value = line.partition(SEPARATOR)
    if not separator:
        return None
    return RawLine(key=key, raw_value=raw_value)
