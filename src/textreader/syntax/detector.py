"""Speculative multi-character matching on a TextReader.

A Detector describes an expected continuation of the input and decides
whether the upcoming characters match it. Success consumes exactly the
expected characters; failure restores the reader to the state it had before
the attempt, so callers never write their own recovery logic.

Example:
    >>> from textreader import TextReader
    >>> reader = TextReader('"typeA"')
    >>> reader.read_next()
    '"'
    >>> with reader.detector() as detector:
    ...     if detector.expect_text("type").succeeds():
    ...         detector.rollback()
    >>> reader.position
    1

Ownership:
    A detector holds its reader's lease from bind until close(), or until it
    is garbage collected if it is simply dropped. While it is open and alive
    no other detector can bind to the same reader, and once closed it refuses
    further work. The chained form needs no close():

        if reader.detector().expect_text("type").succeeds():
            ...

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textreader.diagnostics import DetectorClosedError
from textreader.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from .reader import TextReader

__all__ = ["Detector"]

logger = logging.getLogger(__name__)


class Detector:
    """Speculative matcher bound exclusively to one TextReader.

    Usage:
        with reader.detector() as detector:
            if detector.expect_char("<").expect_text("!--").succeeds():
                ...  # reader now sits just past "<!--"

    Attributes are read-only; expected grows through expect_char() and
    expect_text().
    """

    __slots__ = ("__weakref__", "_closed", "_expected", "_matched_length", "_reader")

    def __init__(self, reader: TextReader) -> None:
        """Bind to reader with an empty expectation.

        Raises:
            DetectorBusyError: If another live detector on reader is still open
        """
        self._reader = reader
        self._expected: list[str] = []
        self._matched_length = 0
        # Stays closed if the bind below is rejected.
        self._closed = True
        reader.lease.acquire(self)
        self._closed = False
        logger.debug("Detector bound at position %d", reader.position)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return (
            f"Detector(expected={self.expected!r}, "
            f"matched_length={self._matched_length}, {state})"
        )

    def __enter__(self) -> Detector:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    @property
    def reader(self) -> TextReader:
        """The reader this detector is bound to."""
        return self._reader

    @property
    def expected(self) -> str:
        """Characters the next match attempt expects, in order."""
        return "".join(self._expected)

    @property
    def matched_length(self) -> int:
        """Length of the most recent successful match (0 if none)."""
        return self._matched_length

    @property
    def closed(self) -> bool:
        """True once close() has run, or if the bind was rejected."""
        return self._closed

    def expect_char(self, ch: str) -> Detector:
        """Append one character to the expectation.

        Raises:
            TypeError: If ch is not a str
            ValueError: If ch is not exactly one character
        """
        self._check_open("expect_char")
        if not isinstance(ch, str):
            msg = f"Expected a str character, got {type(ch).__name__}"
            raise TypeError(msg)
        if len(ch) != 1:
            msg = f"Expected exactly one character, got {len(ch)}"
            raise ValueError(msg)
        self._expected.append(ch)
        return self

    def expect_text(self, text: str) -> Detector:
        """Append every character of text to the expectation, in order."""
        self._check_open("expect_text")
        if not isinstance(text, str):
            msg = f"Expected str text, got {type(text).__name__}"
            raise TypeError(msg)
        self._expected.extend(text)
        return self

    def succeeds(self) -> bool:
        """Match the expectation against the upcoming input.

        On success the reader sits exactly len(expected) characters further
        on. On failure the reader is back where it started.
        """
        self._check_open("succeeds")
        return self._detect()

    def fails(self) -> bool:
        """Negation of succeeds(), with identical side effects."""
        self._check_open("fails")
        return not self._detect()

    def rollback(self) -> Detector:
        """Undo the reader movement of the most recent successful match.

        The recorded match length drops to 0, so a second rollback() does
        not move the reader again.
        """
        self._check_open("rollback")
        for _ in range(self._matched_length):
            self._reader.back()
        if self._matched_length:
            logger.debug(
                "Detector rolled back %d characters to position %d",
                self._matched_length,
                self._reader.position,
            )
        self._matched_length = 0
        return self

    def close(self) -> None:
        """Release the reader so another detector can bind. Idempotent."""
        if self._closed:
            return
        self._reader.lease.release(self)
        self._closed = True
        logger.debug("Detector closed at position %d", self._reader.position)

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise DetectorClosedError(ErrorTemplate.detector_closed(operation))

    def _detect(self) -> bool:
        reader = self._reader
        expected = self._expected
        length = len(expected)
        ix = 0

        while reader.has_next():
            ch = reader.read_next()
            if ix == length:
                # Full match with input to spare: give the lookahead back.
                reader.back()
                self._matched_length = length
                return True
            if ch != expected[ix]:
                self._undo(ix + 1)
                return False
            ix += 1

        # Input exhausted: end of text is an accepted match boundary.
        if ix == length:
            self._matched_length = length
            return True
        self._undo(ix)
        return False

    def _undo(self, count: int) -> None:
        for _ in range(count):
            self._reader.back()
