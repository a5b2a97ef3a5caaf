"""Position utilities over source text.

Converts character offsets to line/column positions. TextReader uses
column_offset to recompute its column after undoing a newline, and
source_span to locate construction errors.

Only \\n delimits lines (see textreader.constants.NEWLINE).
"""

from textreader.constants import NEWLINE
from textreader.diagnostics.codes import SourceSpan

__all__ = ["column_offset", "line_offset", "source_span"]


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)   # Start of text
        0
        >>> line_offset(source, 6)   # Start of line2
        1
        >>> line_offset(source, 12)  # Start of line3
        2
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    # O(1) memory: count in range instead of creating substring
    return source.count(NEWLINE, 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    The result is the number of characters between the most recent newline
    before pos (or the start of source) and pos. The scan is bounded by the
    length of the line containing pos.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> source = "hello\\nworld"
        >>> column_offset(source, 0)   # 'h' in "hello"
        0
        >>> column_offset(source, 5)   # the newline itself
        5
        >>> column_offset(source, 6)   # 'w' in "world"
        0
        >>> column_offset(source, 10)  # 'd' in "world"
        4
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind(NEWLINE, 0, pos)

    # If no newline found, column is from start of text
    if line_start == -1:
        return pos

    return pos - line_start - 1


def source_span(source: str, start: int, end: int | None = None) -> SourceSpan:
    """Build a 1-indexed SourceSpan for the characters [start, end).

    Args:
        source: Complete source text
        start: Character offset where the span begins
        end: Exclusive end offset (defaults to start + 1)

    Returns:
        SourceSpan whose line/column describe start

    Example:
        >>> source_span("ab\\ncd", 4)
        SourceSpan(start=4, end=5, line=2, column=2)
    """
    if end is None:
        end = start + 1
    return SourceSpan(
        start=start,
        end=end,
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )
