"""Diagnostic system for textreader errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DetectorBusyError,
    DetectorClosedError,
    DetectorError,
    SourceDecodeError,
    TextReaderError,
)
from .templates import ErrorTemplate

__all__ = [
    "DetectorBusyError",
    "DetectorClosedError",
    "DetectorError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "SourceDecodeError",
    "SourceSpan",
    "TextReaderError",
]
