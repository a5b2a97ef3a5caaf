"""Character scanning package.

Provides the TextReader cursor, its speculative Detector, and offset to
line/column helpers. Separate from diagnostics so tooling can depend on the
error types alone.

Python 3.13+.
"""

from .detector import Detector
from .position import column_offset, line_offset, source_span
from .reader import ReaderState, TextReader

__all__ = [
    "Detector",
    "ReaderState",
    "TextReader",
    "column_offset",
    "line_offset",
    "source_span",
]
