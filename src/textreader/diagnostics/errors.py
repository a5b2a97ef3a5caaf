"""textreader exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DetectorBusyError",
    "DetectorClosedError",
    "DetectorError",
    "SourceDecodeError",
    "TextReaderError",
]


class TextReaderError(Exception):
    """Base exception for all textreader errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextReaderError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SourceDecodeError(TextReaderError):
    """Input cannot be turned into a sequence of Unicode scalar values.

    Raised only by TextReader construction. The reader is never produced,
    so there is nothing to recover.
    """


class DetectorError(TextReaderError):
    """Misuse of the exclusive binding between a detector and its reader."""


class DetectorBusyError(DetectorError):
    """A reader already has an open detector.

    Two detectors interleaving reads and undos on one reader would corrupt
    its position, line and column.
    """


class DetectorClosedError(DetectorError):
    """A closed detector was asked to match, expect, or roll back."""
