"""Tests for document/cursor snapshots and text positions."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from select_to_line.core.positions import TextPosition, clamp_index
from select_to_line.editor.snapshot import CursorSnapshot, DocumentSnapshot, LineSource


def test_from_text_splits_and_normalizes_line_endings() -> None:
    snapshot = DocumentSnapshot.from_text("alpha\r\nbeta\rgamma\n")

    assert snapshot.lines == ("alpha", "beta", "gamma", "")
    assert snapshot.line_count == 4
    assert snapshot.line_text(1) == "beta"
    assert snapshot.line_length(2) == 5


def test_empty_text_is_one_empty_line() -> None:
    snapshot = DocumentSnapshot.from_text("")

    assert snapshot.lines == ("",)
    assert DocumentSnapshot() == snapshot


def test_snapshot_requires_a_line() -> None:
    with pytest.raises(ValueError):
        DocumentSnapshot.from_lines([])


def test_snapshot_satisfies_line_source_protocol(document) -> None:
    assert isinstance(document, LineSource)

    class _Lines:
        line_count = 1

        def line_text(self, index: int) -> str:
            return "x"

    assert isinstance(_Lines(), LineSource)


def test_cursor_caret_accepts_pairs() -> None:
    cursor = CursorSnapshot.caret((3, 4))

    assert cursor.anchor == cursor.active == TextPosition(3, 4)


def test_text_position_validation() -> None:
    with pytest.raises(ValueError):
        TextPosition(-1, 0)
    with pytest.raises(TypeError):
        TextPosition(True, 0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TextPosition(1.5, 0)  # type: ignore[arg-type]


def test_text_position_ordering_and_sequence_behaviour() -> None:
    position = TextPosition(2, 5)

    assert TextPosition(1, 9) < position < TextPosition(2, 6)
    assert list(position) == [2, 5]
    assert position[0] == 2 and position[1] == 5
    assert position[:] == (2, 5)
    assert len(position) == 2
    assert position.to_dict() == {"line": 2, "character": 5}
    assert position.one_based() == (3, 6)
    with pytest.raises(IndexError):
        _ = position[2]


def test_text_position_from_value() -> None:
    expected = TextPosition(1, 2)

    assert TextPosition.from_value(expected) is expected
    assert TextPosition.from_value({"line": 1, "character": 2}) == expected
    assert TextPosition.from_value([1, 2]) == expected
    assert TextPosition.from_value(SimpleNamespace(line=1, character=2)) == expected
    with pytest.raises(ValueError):
        TextPosition.from_value({"line": 1})
    with pytest.raises(ValueError):
        TextPosition.from_value((1, 2, 3))
    with pytest.raises(TypeError):
        TextPosition.from_value("1,2")


def test_clamp_index() -> None:
    assert clamp_index(-4, 10) == 0
    assert clamp_index(4, 10) == 4
    assert clamp_index(40, 10) == 10
