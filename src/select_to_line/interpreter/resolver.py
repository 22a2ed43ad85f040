"""Semantic pass turning a syntax tree into a concrete :class:`Target`.

All numbers in the tree are 1-based as typed by the user; everything this
module returns is 0-based and clamped to the document snapshot it was given.
Every syntax tree the parser can build resolves, so there is no rejection
path here.
"""

from __future__ import annotations

from ..core.positions import TextPosition, clamp_index
from ..editor.snapshot import CursorSnapshot, LineSource
from ..services.settings import ActiveRelativeTo, ColumnDefault, NavigatorSettings
from .errors import GrammarContractError
from .syntax import (
    AbsoluteColumn,
    AbsoluteLine,
    Column,
    ColumnOnly,
    ExactRangeEnd,
    Line,
    LineWithOptionalColumn,
    NegativeLine,
    Position,
    QuickRangeEnd,
    RangeEnd,
    RangeEndOnly,
    ShortcutColumn,
    ShortcutKind,
    StartWithOptionalRangeEnd,
    SyntaxTarget,
)
from .targets import GoToTarget, SelectionTarget, Target

_DEFAULT_COLUMNS: dict[ColumnDefault, ShortcutColumn] = {
    ColumnDefault.START_OF_LINE: ShortcutColumn(ShortcutKind.START_OF_LINE),
    ColumnDefault.END_OF_LINE: ShortcutColumn(ShortcutKind.END_OF_LINE),
    ColumnDefault.FIRST_NON_WHITESPACE: ShortcutColumn(ShortcutKind.FIRST_NON_WHITESPACE),
    ColumnDefault.ONE_PAST_LAST_NON_WHITESPACE: ShortcutColumn(ShortcutKind.ONE_PAST_LAST_NON_WHITESPACE),
}


def interpret_target(
    tree: SyntaxTarget,
    document: LineSource,
    cursor: CursorSnapshot,
    settings: NavigatorSettings,
) -> Target:
    """Resolve ``tree`` against one document/cursor snapshot."""

    origin = _clamp_to_document(cursor.active, document)
    if isinstance(tree, StartWithOptionalRangeEnd):
        start = resolve_position(tree.start, origin.line, origin.line, document, settings)
        if tree.end is None:
            return GoToTarget(start)
        return _resolve_selection(start, tree.end, document, origin, settings)
    if isinstance(tree, RangeEndOnly):
        return _resolve_selection(origin, tree.end, document, origin, settings)
    raise GrammarContractError("TARGET", tree)


def _resolve_selection(
    start: TextPosition,
    range_end: RangeEnd,
    document: LineSource,
    origin: TextPosition,
    settings: NavigatorSettings,
) -> SelectionTarget:
    if settings.active_relative_to is ActiveRelativeTo.ANCHOR:
        reference_line = start.line
    else:
        reference_line = origin.line
    end = resolve_position(range_end.position, reference_line, origin.line, document, settings)
    if isinstance(range_end, QuickRangeEnd):
        return quick_selection(start, end, document)
    if isinstance(range_end, ExactRangeEnd):
        return SelectionTarget(anchor=start, active=end, quick=False)
    raise GrammarContractError("RANGE_END", range_end)


def quick_selection(start: TextPosition, end: TextPosition, document: LineSource) -> SelectionTarget:
    """Widen ``start``..``end`` so both lines are covered in full.

    When ``end`` is on or below ``start``'s line the selection runs from the
    start of ``start``'s line to the end of ``end``'s line. Otherwise it runs
    backwards, from the end of ``start``'s line to the start of ``end``'s line.
    """

    if end.line >= start.line:
        anchor = TextPosition(start.line, 0)
        active = TextPosition(end.line, _line_length(document, end.line))
    else:
        anchor = TextPosition(start.line, _line_length(document, start.line))
        active = TextPosition(end.line, 0)
    return SelectionTarget(anchor=anchor, active=active, quick=True)


def resolve_position(
    position: Position,
    reference_line: int,
    cursor_line: int,
    document: LineSource,
    settings: NavigatorSettings,
) -> TextPosition:
    """Resolve a ``POSITION`` whose relative terms count from ``reference_line``.

    A column-only position always sits on ``cursor_line``; the reference only
    moves negative lines.
    """

    if isinstance(position, LineWithOptionalColumn):
        line = resolve_line(position.line, reference_line, document.line_count)
        column = position.column
        if column is None:
            column = default_column(settings.column_defaults_to)
    elif isinstance(position, ColumnOnly):
        line = clamp_index(cursor_line, document.line_count - 1)
        column = position.column
    else:
        raise GrammarContractError("POSITION", position)
    return TextPosition(line, resolve_column(column, document.line_text(line)))


def default_column(column_default: ColumnDefault) -> ShortcutColumn:
    """Return the shortcut column standing in for an omitted column."""

    try:
        return _DEFAULT_COLUMNS[column_default]
    except KeyError:
        raise GrammarContractError("COLUMN_DEFAULT", column_default) from None


def resolve_line(line: Line, reference_line: int, line_count: int) -> int:
    """Return the 0-based line index for ``line``, clamped to ``[0, line_count - 1]``."""

    if isinstance(line, AbsoluteLine):
        index = line.magnitude - 1
    elif isinstance(line, NegativeLine):
        index = reference_line - line.magnitude
    else:
        raise GrammarContractError("LINE", line)
    return clamp_index(index, line_count - 1)


def resolve_column(column: Column, text: str) -> int:
    """Return the 0-based character index for ``column`` within ``text``.

    One past the last character is a valid result.
    """

    if isinstance(column, AbsoluteColumn):
        return clamp_index(column.magnitude - 1, len(text))
    if not isinstance(column, ShortcutColumn):
        raise GrammarContractError("COLUMN", column)
    kind = column.kind
    if kind is ShortcutKind.START_OF_LINE:
        return 0
    if kind is ShortcutKind.END_OF_LINE:
        return len(text)
    if kind is ShortcutKind.FIRST_NON_WHITESPACE:
        return first_non_whitespace_index(text)
    if kind is ShortcutKind.ONE_PAST_LAST_NON_WHITESPACE:
        return one_past_last_non_whitespace_index(text)
    raise GrammarContractError("COLUMN", column)


def first_non_whitespace_index(text: str) -> int:
    """Defaults to ``0`` when ``text`` is empty or all whitespace."""

    stripped = text.lstrip()
    return len(text) - len(stripped) if stripped else 0


def one_past_last_non_whitespace_index(text: str) -> int:
    """Defaults to ``0`` when ``text`` is empty or all whitespace."""

    return len(text.rstrip())


def _line_length(document: LineSource, index: int) -> int:
    return len(document.line_text(index))


def _clamp_to_document(position: TextPosition, document: LineSource) -> TextPosition:
    line = clamp_index(position.line, document.line_count - 1)
    return TextPosition(line, clamp_index(position.character, _line_length(document, line)))


__all__ = [
    "default_column",
    "first_non_whitespace_index",
    "interpret_target",
    "one_past_last_non_whitespace_index",
    "quick_selection",
    "resolve_column",
    "resolve_line",
    "resolve_position",
]
