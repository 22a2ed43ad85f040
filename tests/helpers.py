"""Shared test data: a 100-line reference document and cursor.

Lines use a 4-space indent unless overridden below. The cursor sits at line
50, column 50 (1-based), i.e. ``TextPosition(49, 49)``.
"""

from __future__ import annotations

from select_to_line.core.positions import TextPosition
from select_to_line.editor.snapshot import CursorSnapshot, DocumentSnapshot

DEFAULT_LINE = "    lorem ipsum dolor sit amet"  # len 30, h=4, l=30
SPECIAL_LINES: dict[int, str] = {
    1: "",
    2: "   \t ",  # whitespace only, len 5
    9: "plain text without indent",  # len 25, h=0
    49: "    " + "x" * 97 + " ",  # len 102, h=4, l=101
    59: "\tindented with a tab  ",  # len 22, h=1, l=20
}
LINE_COUNT = 100
CURSOR = TextPosition(49, 49)


def reference_lines() -> list[str]:
    return [SPECIAL_LINES.get(index, DEFAULT_LINE) for index in range(LINE_COUNT)]


def reference_document() -> DocumentSnapshot:
    return DocumentSnapshot.from_lines(reference_lines())


def reference_cursor() -> CursorSnapshot:
    return CursorSnapshot.caret(CURSOR)


def spread_whitespace(text: str, filler: str = " ") -> str:
    """Insert ``filler`` before, between and after every character of ``text``."""

    return filler + filler.join(text) + filler
