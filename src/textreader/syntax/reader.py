"""Mutable character reader with exact backward undo.

TextReader walks a fixed in-memory text one code point at a time, keeping
(position, line, column) in step with every read, and can undo any read
exactly. Hand-written tokenizers use it directly and through Detector for
speculative multi-character lookahead.

Design Philosophy:
    - The text is fixed at construction; only (position, line, column) move
    - Exhaustion is a value (None), never an exception
    - back() at position 0 is a no-op, not an error
    - Column is derived, not stored per position: undoing a newline rescans
      backward to the previous newline (bounded by the line's length)

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, \\r counts
      as a column)
    - CR-only (Classic Mac, \\r): NOT a line delimiter

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from textreader.constants import DEFAULT_ENCODING, NEWLINE
from textreader.core import ReaderLease
from textreader.diagnostics import SourceDecodeError
from textreader.diagnostics.templates import ErrorTemplate

from .detector import Detector
from .position import column_offset, source_span

__all__ = ["ReaderState", "TextReader"]

logger = logging.getLogger(__name__)

# Lone surrogates are code points but not Unicode scalar values.
_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True, slots=True)
class ReaderState:
    """Snapshot of a reader's scan state.

    Attributes:
        position: Index of the next unread character
        line: 1-based line of the character last consumed
        column: Characters consumed since the last consumed newline
    """

    position: int
    line: int
    column: int


class TextReader:
    """Character reader with line/column tracking and exact undo.

    Example:
        >>> reader = TextReader("ab\\ncd")
        >>> reader.read_next()
        'a'
        >>> reader.read_next(), reader.read_next()
        ('b', '\\n')
        >>> reader.line, reader.column
        (2, 0)
        >>> reader.back().line, reader.column
        (1, 2)
        >>> reader.current_line_text()
        'ab'

    Thread Safety:
        Not thread-safe. A reader and its detector belong to one thread.
    """

    __slots__ = ("_column", "_lease", "_length", "_line", "_position", "_source")

    def __init__(
        self,
        source: str | bytes | bytearray | memoryview,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Create a reader positioned at (0, 1, 0).

        Args:
            source: Text, or bytes to decode with encoding
            encoding: Codec for bytes input (ignored for str input)

        Raises:
            SourceDecodeError: If bytes cannot be decoded, the codec is
                unknown, or the text contains a lone surrogate
            TypeError: If source is neither str nor bytes-like
        """
        self._source = _decode_source(source, encoding)
        self._length = len(self._source)
        self._position = 0
        self._line = 1
        self._column = 0
        self._lease = ReaderLease()
        logger.debug("TextReader created over %d characters", self._length)

    def __repr__(self) -> str:
        return (
            f"TextReader(position={self._position}, line={self._line}, "
            f"column={self._column}, length={self._length})"
        )

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        ch = self.read_next()
        if ch is None:
            raise StopIteration
        return ch

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        """The full text being read."""
        return self._source

    @property
    def position(self) -> int:
        """Index of the next unread character, in [0, length]."""
        return self._position

    @property
    def line(self) -> int:
        """1-based line number of the character last consumed."""
        return self._line

    @property
    def column(self) -> int:
        """Characters consumed since the last consumed newline."""
        return self._column

    @property
    def length(self) -> int:
        """Number of characters (code points) in the text."""
        return self._length

    @property
    def state(self) -> ReaderState:
        """Current (position, line, column) as an immutable snapshot."""
        return ReaderState(self._position, self._line, self._column)

    @property
    def lease(self) -> ReaderLease:
        """Guard that lets at most one Detector bind to this reader."""
        return self._lease

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def has_next(self) -> bool:
        """Check whether an unread character remains."""
        return self._position < self._length

    def peek_previous(self) -> str | None:
        """Return the character last consumed, or None at position 0.

        Does not move the reader.
        """
        if self._position == 0:
            return None
        return self._source[self._position - 1]

    def read_next(self) -> str | None:
        """Consume and return the next character.

        Returns:
            The character at position, or None when the text is exhausted
            (state unchanged in that case)
        """
        if self._position >= self._length:
            return None
        ch = self._source[self._position]
        self._position += 1
        self._column += 1
        if ch == NEWLINE:
            self._line += 1
            self._column = 0
        return ch

    def back(self) -> TextReader:
        """Undo the most recent read_next().

        No-op at position 0. Undoing a newline steps the line back and
        recomputes the column from the text before the newline; position
        and line are never touched by that rescan.

        Returns:
            self, for chaining (reader.back().back())
        """
        if self._position == 0:
            return self
        self._position -= 1
        if self._source[self._position] != NEWLINE:
            self._column -= 1
            return self
        self._line -= 1
        self._column = column_offset(self._source, self._position)
        return self

    def reset(self) -> TextReader:
        """Rewind to (0, 1, 0). The text is unchanged."""
        self._position = 0
        self._line = 1
        self._column = 0
        return self

    def current_line_text(self) -> str | None:
        """Return the text of the line containing the current position.

        Walks with back() and read_next(), then restores the saved state,
        so position, line and column are the same before and after the call.
        The trailing newline is never part of the result.

        Returns:
            The line's text, or None when the line is empty (empty text,
            just past a trailing newline, or between two newlines)
        """
        saved = self.state

        while self._position > 0 and self.peek_previous() != NEWLINE:
            self.back()
        line_start = self._position

        while self.has_next():
            if self.read_next() == NEWLINE:
                self.back()
                break
        line_end = self._position

        self._restore(saved)
        if line_start == line_end:
            return None
        return self._source[line_start:line_end]

    def detector(self) -> Detector:
        """Bind a new Detector to this reader.

        Raises:
            DetectorBusyError: If another detector on this reader is open
        """
        return Detector(self)

    def _restore(self, state: ReaderState) -> None:
        self._position = state.position
        self._line = state.line
        self._column = state.column


def _decode_source(source: str | bytes | bytearray | memoryview, encoding: str) -> str:
    """Turn construction input into a string of Unicode scalar values."""
    if isinstance(source, str):
        text = source
    elif isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
        try:
            text = data.decode(encoding)
        except LookupError as e:
            logger.debug("TextReader rejected unknown encoding %r", encoding)
            raise SourceDecodeError(ErrorTemplate.source_unknown_encoding(encoding)) from e
        except UnicodeDecodeError as e:
            # Locate the failure in characters: decode the valid prefix.
            prefix = data[: e.start].decode(encoding, errors="replace")
            span = source_span(prefix, len(prefix))
            logger.debug("TextReader rejected undecodable input at byte %d", e.start)
            raise SourceDecodeError(
                ErrorTemplate.source_decode_failed(encoding, e.reason, span)
            ) from e
    else:
        msg = f"TextReader source must be str or bytes, got {type(source).__name__}"
        raise TypeError(msg)

    match = _SURROGATE.search(text)
    if match is not None:
        span = source_span(text, match.start())
        logger.debug("TextReader rejected lone surrogate at offset %d", match.start())
        raise SourceDecodeError(
            ErrorTemplate.source_invalid_codepoint(ord(match.group()), span)
        )
    return text
