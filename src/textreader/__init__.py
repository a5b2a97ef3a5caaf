"""textreader - character reader with exact undo and speculative matching.

A low-level scanning primitive for hand-written tokenizers and parsers:
a cursor over in-memory text with forward reads, exact backward undo,
line/column tracking, and a detector that looks ahead and either commits
or rolls back.

Public API:
    TextReader - Character cursor with back(), line/column and line text
    ReaderState - Immutable (position, line, column) snapshot
    Detector - Speculative multi-character matcher bound to one reader

Exceptions:
    TextReaderError - Base exception class
    SourceDecodeError - Input is not a valid sequence of Unicode scalar values
    DetectorError - Misuse of the reader/detector binding
    DetectorBusyError - A second detector was bound while one is open
    DetectorClosedError - A closed detector was used

Submodules:
    textreader.syntax.position - Offset to line/column helpers
    textreader.diagnostics - Diagnostic codes, templates and error types
"""

from .diagnostics import (
    DetectorBusyError,
    DetectorClosedError,
    DetectorError,
    SourceDecodeError,
    TextReaderError,
)
from .syntax import Detector, ReaderState, TextReader

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textreader")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Detector",
    "DetectorBusyError",
    "DetectorClosedError",
    "DetectorError",
    "ReaderState",
    "SourceDecodeError",
    "TextReader",
    "TextReaderError",
    "__version__",
]
