"""Exclusive lease between a TextReader and its open Detector.

A detector speculatively reads and undoes characters on its reader. Two
detectors doing so on the same reader would interleave their undos and
corrupt (position, line, column), so each reader owns one lease and at most
one live detector holds it at a time.

The lease keeps only a weak reference to its holder. A detector that is
dropped without close() stops holding the lease as soon as it is collected,
which for CPython is the moment its last reference goes away.

Single-threaded: the lease rejects a second holder, it does not wait for one.
Python 3.13+.
"""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field

from textreader.diagnostics import DetectorBusyError
from textreader.diagnostics.templates import ErrorTemplate

__all__ = ["ReaderLease"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReaderLease:
    """Runtime guard for the one-open-detector rule.

    Usage:
        lease = ReaderLease()
        lease.acquire(detector)   # raises DetectorBusyError if held by another
        ...
        lease.release(detector)

    Mutability Note:
        Intentionally mutable (not frozen=True): the holder reference is set
        on acquire and cleared on release.

    Holders must support weak references. A holder that has been garbage
    collected no longer counts, so the lease is free again.
    """

    _holder_ref: weakref.ref[object] | None = field(default=None, init=False, repr=False)

    @property
    def holder(self) -> object | None:
        """Live object currently holding the lease, or None."""
        if self._holder_ref is None:
            return None
        return self._holder_ref()

    @property
    def held(self) -> bool:
        """True while some live detector holds the lease."""
        return self.holder is not None

    def acquire(self, holder: object) -> None:
        """Take the lease for holder.

        Re-acquiring by the current holder is a no-op.

        Raises:
            DetectorBusyError: If a different live holder has the lease
            TypeError: If holder cannot be weakly referenced
        """
        current = self.holder
        if current is not None and current is not holder:
            logger.warning("Rejected detector bind: reader already has an open detector")
            raise DetectorBusyError(ErrorTemplate.detector_busy())
        self._holder_ref = weakref.ref(holder)

    def release(self, holder: object) -> None:
        """Give the lease back. Ignored unless holder currently holds it."""
        if self.holder is holder:
            self._holder_ref = None

    def is_held_by(self, holder: object) -> bool:
        """Check whether holder currently owns the lease."""
        return self.holder is holder
