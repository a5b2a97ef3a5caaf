"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    _DOCS_BASE = "https://docs.python.org/3/library/codecs.html"

    @staticmethod
    def source_decode_failed(encoding: str, reason: str, span: SourceSpan) -> Diagnostic:
        """Bytes input could not be decoded.

        Args:
            encoding: Codec used for decoding
            reason: Codec's description of the failure
            span: Location of the first undecodable character

        Returns:
            Diagnostic for SOURCE_DECODE_FAILED
        """
        msg = f"Source is not valid {encoding}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_DECODE_FAILED,
            message=msg,
            span=span,
            hint="Decode the input with the encoding it was written in",
            help_url=f"{ErrorTemplate._DOCS_BASE}#error-handlers",
        )

    @staticmethod
    def source_invalid_codepoint(codepoint: int, span: SourceSpan) -> Diagnostic:
        """Text contains a code point that is not a Unicode scalar value.

        Args:
            codepoint: The offending code point (a lone surrogate)
            span: Location of the code point

        Returns:
            Diagnostic for SOURCE_INVALID_CODEPOINT
        """
        msg = f"Source contains lone surrogate U+{codepoint:04X}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_INVALID_CODEPOINT,
            message=msg,
            span=span,
            hint="Surrogates usually come from decoding with 'surrogateescape'; "
            "decode strictly or replace invalid bytes",
        )

    @staticmethod
    def source_unknown_encoding(encoding: str) -> Diagnostic:
        """Requested codec does not exist.

        Args:
            encoding: The codec name that was not found

        Returns:
            Diagnostic for SOURCE_UNKNOWN_ENCODING
        """
        msg = f"Unknown encoding '{encoding}'"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNKNOWN_ENCODING,
            message=msg,
            hint="Use a codec name accepted by codecs.lookup()",
            help_url=f"{ErrorTemplate._DOCS_BASE}#standard-encodings",
        )

    @staticmethod
    def detector_busy() -> Diagnostic:
        """A second detector was bound while another one is open.

        Returns:
            Diagnostic for DETECTOR_BUSY
        """
        return Diagnostic(
            code=DiagnosticCode.DETECTOR_BUSY,
            message="Reader already has an open detector",
            hint="Close the previous detector, or bind it with "
            "'with reader.detector() as detector:'",
        )

    @staticmethod
    def detector_closed(operation: str) -> Diagnostic:
        """An operation was attempted on a closed detector.

        Args:
            operation: Name of the rejected operation

        Returns:
            Diagnostic for DETECTOR_CLOSED
        """
        msg = f"Cannot call {operation}() on a closed detector"
        return Diagnostic(
            code=DiagnosticCode.DETECTOR_CLOSED,
            message=msg,
            hint="Bind a new detector with reader.detector()",
        )
