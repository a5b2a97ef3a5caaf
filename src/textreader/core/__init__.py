"""Core utilities shared by the syntax layer.

Exports:
    ReaderLease: Guard that lets at most one detector bind to a reader

Python 3.13+.
"""

from .lease import ReaderLease

__all__ = ["ReaderLease"]
