"""Quickstart Example - Scanning Text With TextReader and Detector.

Demonstrates the building blocks a hand-written tokenizer uses:

1. Forward reads with line/column tracking
2. Exact undo with back()
3. Line text for error context
4. Speculative matching with Detector (commit or roll back)

Python 3.13+.
"""

from __future__ import annotations

from textreader import DetectorBusyError, TextReader


def example_1_reading() -> None:
    """Read characters and watch line/column move."""
    print("=" * 60)
    print("Example 1: Reading")
    print("=" * 60)

    reader = TextReader("華文\ndef")
    for ch in reader:
        print(f"{ch!r:6} -> line {reader.line}, column {reader.column}")
    print(f"position={reader.position} length={reader.length}")
    print()


def example_2_undo() -> None:
    """Undo reads, including across a newline."""
    print("=" * 60)
    print("Example 2: Undo")
    print("=" * 60)

    reader = TextReader("abc\ndef")
    for _ in range(5):
        reader.read_next()
    print(f"after 5 reads: {reader.state}")
    reader.back().back()
    print(f"after 2 backs: {reader.state}")
    print(f"current line: {reader.current_line_text()!r}")
    print()


def example_3_detector() -> None:
    """Look for a keyword after each quote, then commit or roll back."""
    print("=" * 60)
    print("Example 3: Detector")
    print("=" * 60)

    reader = TextReader('{"type": "typeA", "name": "Earth"}')
    keys: list[int] = []
    peeks: list[int] = []
    while reader.has_next():
        if reader.read_next() != '"':
            continue
        with reader.detector() as detector:
            if detector.expect_text("type").expect_char('"').succeeds():
                keys.append(reader.position)
        with reader.detector() as detector:
            if detector.expect_text("type").succeeds():
                # Only looking: give the characters back to the caller.
                detector.rollback()
                peeks.append(reader.position)
    print(f"'type' key consumed, ending at positions {keys}")
    print(f"'type' prefix seen without consuming at positions {peeks}")

    # A detector nobody keeps a reference to frees the reader by itself.
    reader.reset()
    if reader.detector().expect_text('{"').succeeds():
        print(f"chained detector matched the opening, now at {reader.position}")

    try:
        with reader.detector(), reader.detector():
            pass
    except DetectorBusyError as e:
        print(e)
    print()


if __name__ == "__main__":
    example_1_reading()
    example_2_undo()
    example_3_detector()
