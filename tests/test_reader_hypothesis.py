"""Hypothesis property-based tests for TextReader.

Tests undo exactness, exhaustion, and agreement between incrementally
tracked (line, column) and positions computed directly from the text.
Complements test_reader.py with property-based testing.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies import multiline_texts, reader_ops, source_texts, text_and_position
from textreader import ReaderState, TextReader
from textreader.syntax.position import column_offset, line_offset


def _expected_state(text: str, position: int) -> ReaderState:
    """State a pure forward scan reaches at position."""
    return ReaderState(
        position,
        line_offset(text, position) + 1,
        column_offset(text, position),
    )


def _advance(reader: TextReader, count: int) -> None:
    for _ in range(count):
        reader.read_next()


# ============================================================================
# PROPERTY TESTS - UNDO
# ============================================================================


class TestReaderUndoProperties:
    """read_next() and back() are exact inverses."""

    @given(data=text_and_position(multiline_texts()))
    @settings(max_examples=300)
    def test_read_then_back_restores_state(self, data: tuple[str, int]) -> None:
        """INVARIANT: read_next() followed by back() restores the state."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, position)
        before = reader.state

        if reader.read_next() is not None:
            reader.back()

        assert reader.state == before

    @given(data=text_and_position(multiline_texts()))
    @settings(max_examples=300)
    def test_back_reaches_forward_scan_state(self, data: tuple[str, int]) -> None:
        """PROPERTY: backing up k steps equals scanning forward to the same spot."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, len(text))

        for _ in range(len(text) - position):
            reader.back()

        assert reader.state == _expected_state(text, position)

    @given(text=multiline_texts())
    @settings(max_examples=200)
    def test_back_to_start_is_initial_state(self, text: str) -> None:
        """PROPERTY: undoing every read yields (0, 1, 0)."""
        reader = TextReader(text)
        _advance(reader, len(text))

        for _ in range(len(text) + 2):
            reader.back()

        assert reader.state == ReaderState(0, 1, 0)


# ============================================================================
# PROPERTY TESTS - FORWARD SCAN
# ============================================================================


class TestReaderForwardProperties:
    """Forward scanning, exhaustion and codepoint addressing."""

    @given(text=source_texts)
    @settings(max_examples=200)
    def test_scan_to_exhaustion_reaches_length(self, text: str) -> None:
        """PROPERTY: position == length once has_next() is False."""
        reader = TextReader(text)
        while reader.has_next():
            reader.read_next()

        assert reader.position == reader.length == len(text)
        assert reader.read_next() is None

    @given(text=source_texts)
    @settings(max_examples=200)
    def test_reads_reproduce_text(self, text: str) -> None:
        """PROPERTY: reading everything returns the text unchanged."""
        reader = TextReader(text)

        assert "".join(reader) == text

    @given(data=text_and_position(multiline_texts()))
    @settings(max_examples=200)
    def test_forward_state_matches_position_helpers(self, data: tuple[str, int]) -> None:
        """PROPERTY: incremental (line, column) equals offsets computed from text."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, position)

        assert reader.state == _expected_state(text, position)

    @given(text=source_texts)
    @settings(max_examples=100)
    def test_utf8_bytes_equal_str(self, text: str) -> None:
        """PROPERTY: UTF-8 bytes and the str they encode read identically."""
        assert TextReader(text.encode()).source == TextReader(text).source

    @given(data=text_and_position())
    @settings(max_examples=200)
    def test_has_next_iff_before_end(self, data: tuple[str, int]) -> None:
        """PROPERTY: has_next() is True iff position < length."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, position)

        assert reader.has_next() == (reader.position < reader.length)


# ============================================================================
# PROPERTY TESTS - LINE TEXT
# ============================================================================


class TestReaderLineTextProperties:
    """current_line_text() against str.split()."""

    @given(data=text_and_position(multiline_texts()))
    @settings(max_examples=300)
    def test_line_text_is_observationally_pure(self, data: tuple[str, int]) -> None:
        """INVARIANT: current_line_text() never changes the state."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, position)
        before = reader.state

        reader.current_line_text()

        assert reader.state == before

    @given(data=text_and_position(multiline_texts()))
    @settings(max_examples=300)
    def test_line_text_matches_split(self, data: tuple[str, int]) -> None:
        """PROPERTY: the returned line is the split line at position, None if empty."""
        text, position = data
        reader = TextReader(text)
        _advance(reader, position)

        expected = text.split("\n")[line_offset(text, position)]

        assert reader.current_line_text() == (expected or None)


# ============================================================================
# PROPERTY TESTS - RANDOM OPERATION SEQUENCES
# ============================================================================


class TestReaderOperationSequences:
    """Arbitrary mixes of operations keep the state reachable."""

    @given(text=multiline_texts(), ops=reader_ops)
    @settings(max_examples=300)
    def test_state_always_reachable(self, text: str, ops: list[str]) -> None:
        """INVARIANT: after any op sequence the state is a forward-scan state."""
        reader = TextReader(text)

        for op in ops:
            match op:
                case "read":
                    reader.read_next()
                case "back":
                    reader.back()
                case "line_text":
                    reader.current_line_text()
                case "reset":
                    reader.reset()
            assert reader.state == _expected_state(text, reader.position)

    @given(text=source_texts, steps=st.integers(min_value=0, max_value=50))
    @settings(max_examples=100)
    def test_reset_after_any_reads(self, text: str, steps: int) -> None:
        """PROPERTY: reset() always returns to (0, 1, 0)."""
        reader = TextReader(text)
        _advance(reader, steps)

        assert reader.reset().state == ReaderState(0, 1, 0)
