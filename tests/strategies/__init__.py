"""Hypothesis strategies for textreader property-based testing.

Usage:
    from tests.strategies import source_texts, reader_ops
    from tests.strategies.text import multiline_texts, text_and_position
"""

from .text import (
    ReaderOp,
    multiline_texts,
    pattern_at_position,
    reader_ops,
    source_texts,
    text_and_position,
)

__all__ = [
    "ReaderOp",
    "multiline_texts",
    "pattern_at_position",
    "reader_ops",
    "source_texts",
    "text_and_position",
]
