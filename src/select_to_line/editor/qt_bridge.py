"""Adapters between a PySide6 ``QPlainTextEdit`` and the interpreter.

Qt addresses text by absolute character offsets; blocks map one-to-one to
document lines, so a ``TextPosition`` becomes ``block.position() + character``.
"""

from __future__ import annotations

import logging

from PySide6.QtGui import QTextCursor, QTextDocument
from PySide6.QtWidgets import QPlainTextEdit

from ..core.positions import TextPosition, clamp_index
from ..interpreter.interpret import interpret
from ..interpreter.targets import GoToTarget, SelectionTarget, Target
from ..services.settings import NavigatorSettings
from .snapshot import CursorSnapshot, DocumentSnapshot

LOGGER = logging.getLogger(__name__)


def capture_document(editor: QPlainTextEdit) -> DocumentSnapshot:
    """Copy the editor's lines into an immutable snapshot."""

    document = editor.document()
    block = document.firstBlock()
    lines: list[str] = []
    while block.isValid():
        lines.append(block.text())
        block = block.next()
    return DocumentSnapshot.from_lines(lines or [""])


def capture_cursor(editor: QPlainTextEdit) -> CursorSnapshot:
    """Return the primary selection as 0-based line/character pairs."""

    cursor = editor.textCursor()
    document = editor.document()
    return CursorSnapshot(
        anchor=_position_for_offset(document, cursor.anchor()),
        active=_position_for_offset(document, cursor.position()),
    )


def apply_target(editor: QPlainTextEdit, target: Target) -> None:
    """Move the editor's caret or selection to ``target``."""

    document = editor.document()
    cursor = editor.textCursor()
    if isinstance(target, GoToTarget):
        cursor.setPosition(_offset_for_position(document, target.position))
    elif isinstance(target, SelectionTarget):
        cursor.setPosition(_offset_for_position(document, target.anchor))
        cursor.setPosition(
            _offset_for_position(document, target.active),
            QTextCursor.MoveMode.KeepAnchor,
        )
    else:
        raise TypeError(f"Unsupported target: {target!r}")
    editor.setTextCursor(cursor)
    editor.ensureCursorVisible()


def interpret_in_editor(
    editor: QPlainTextEdit,
    raw_input: str,
    settings: NavigatorSettings | None = None,
    *,
    apply: bool = False,
) -> Target | None:
    """Interpret ``raw_input`` against the editor's current state.

    When ``apply`` is set and the input is accepted the target is applied
    right away, the way the input box does on accept.
    """

    target = interpret(raw_input, capture_document(editor), capture_cursor(editor), settings)
    if target is not None and apply:
        apply_target(editor, target)
        LOGGER.debug("Applied %s to editor", target)
    return target


def _position_for_offset(document: QTextDocument, offset: int) -> TextPosition:
    block = document.findBlock(offset)
    if not block.isValid():
        block = document.lastBlock()
    character = clamp_index(offset - block.position(), len(block.text()))
    return TextPosition(block.blockNumber(), character)


def _offset_for_position(document: QTextDocument, position: TextPosition) -> int:
    line = clamp_index(position.line, document.blockCount() - 1)
    block = document.findBlockByNumber(line)
    return block.position() + clamp_index(position.character, len(block.text()))


__all__ = ["apply_target", "capture_cursor", "capture_document", "interpret_in_editor"]
