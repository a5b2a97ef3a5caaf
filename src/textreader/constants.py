"""Shared constants for textreader.

Placing constants here avoids circular imports between the syntax layer and
the diagnostics layer and keeps a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_ENCODING",
    "NEWLINE",
]

# Line delimiter. CRLF input still works (the \n is present); a lone \r is an
# ordinary character and never starts a new line.
NEWLINE: str = "\n"

# Encoding used when TextReader is given bytes and no explicit encoding.
DEFAULT_ENCODING: str = "utf-8"
