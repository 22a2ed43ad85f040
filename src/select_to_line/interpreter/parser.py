"""Recursive-descent parser for the navigation grammar.

    TARGET             -> POSITION OPTIONAL_RANGE_END | RANGE_END
    OPTIONAL_RANGE_END -> RANGE_END | e
    RANGE_END          -> '.' POSITION | '..' POSITION
    POSITION           -> LINE OPTIONAL_COLUMN | COLUMN
    LINE               -> N | -N
    OPTIONAL_COLUMN    -> COLUMN | e
    COLUMN             -> SEP N | 'H' | 'L' | 'h' | 'l'

Each variable has one function deciding its production from a single
``peek``. The FIRST and FOLLOW tables below are the only source of those
decisions; ``tests/test_parser.py`` checks they stay LL(1).

Rejection is the :data:`REJECTED` sentinel rather than ``None`` because
``None`` is a legitimate value for the two optional variables.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Literal, TypeVar, Union

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
from .tokens import TokenKind, TokenStream

LOGGER = logging.getLogger(__name__)


class _Rejected(Enum):
    REJECTED = "rejected"


REJECTED = _Rejected.REJECTED

T = TypeVar("T")
Parsed = Union[T, Literal[_Rejected.REJECTED]]

_SHORTCUT_TOKENS: dict[TokenKind, ShortcutKind] = {
    TokenKind.CAPITAL_H: ShortcutKind.START_OF_LINE,
    TokenKind.CAPITAL_L: ShortcutKind.END_OF_LINE,
    TokenKind.SMALL_H: ShortcutKind.FIRST_NON_WHITESPACE,
    TokenKind.SMALL_L: ShortcutKind.ONE_PAST_LAST_NON_WHITESPACE,
}

_FIRST_LINE = frozenset({TokenKind.NUMBER, TokenKind.NEGATIVE_NUMBER})
_FIRST_COLUMN = frozenset({TokenKind.COMMA_OR_COLON, *_SHORTCUT_TOKENS})
_FIRST_RANGE_END = frozenset({TokenKind.PERIOD, TokenKind.DOUBLE_PERIOD})

FIRST: dict[str, frozenset[TokenKind]] = {
    "TARGET": _FIRST_LINE | _FIRST_COLUMN | _FIRST_RANGE_END,
    "OPTIONAL_RANGE_END": _FIRST_RANGE_END,
    "RANGE_END": _FIRST_RANGE_END,
    "POSITION": _FIRST_LINE | _FIRST_COLUMN,
    "LINE": _FIRST_LINE,
    "OPTIONAL_COLUMN": _FIRST_COLUMN,
    "COLUMN": _FIRST_COLUMN,
}

FOLLOW: dict[str, frozenset[TokenKind]] = {
    "OPTIONAL_RANGE_END": frozenset({TokenKind.EOF}),
    "OPTIONAL_COLUMN": _FIRST_RANGE_END | {TokenKind.EOF},
}


def parse(stream: TokenStream) -> SyntaxTarget | None:
    """Parse the whole stream into a syntax tree, or return ``None``.

    An empty stream is rejected, as is any stream with tokens left over once
    ``TARGET`` has been derived.
    """

    target = _parse_target(stream)
    if target is REJECTED:
        return None
    if stream.has_tokens_remaining():
        LOGGER.debug("Rejected %r: trailing token %s", stream, stream.peek())
        return None
    return target


def _parse_target(stream: TokenStream) -> Parsed[SyntaxTarget]:
    kind = stream.peek().kind
    if kind in FIRST["POSITION"]:
        start = _parse_position(stream)
        if start is REJECTED:
            return REJECTED
        end = _parse_optional_range_end(stream)
        if end is REJECTED:
            return REJECTED
        return StartWithOptionalRangeEnd(start=start, end=end)
    if kind in FIRST["RANGE_END"]:
        end = _parse_range_end(stream)
        if end is REJECTED:
            return REJECTED
        return RangeEndOnly(end=end)
    return _reject(stream, "TARGET")


def _parse_optional_range_end(stream: TokenStream) -> Parsed[RangeEnd | None]:
    kind = stream.peek().kind
    if kind in FIRST["RANGE_END"]:
        return _parse_range_end(stream)
    if kind in FOLLOW["OPTIONAL_RANGE_END"]:
        return None
    return _reject(stream, "OPTIONAL_RANGE_END")


def _parse_range_end(stream: TokenStream) -> Parsed[RangeEnd]:
    kind = stream.peek().kind
    if kind not in FIRST["RANGE_END"]:
        return _reject(stream, "RANGE_END")
    stream.advance()
    position = _parse_position(stream)
    if position is REJECTED:
        return REJECTED
    if kind is TokenKind.PERIOD:
        return QuickRangeEnd(position=position)
    return ExactRangeEnd(position=position)


def _parse_position(stream: TokenStream) -> Parsed[Position]:
    kind = stream.peek().kind
    if kind in FIRST["LINE"]:
        line = _parse_line(stream)
        if line is REJECTED:
            return REJECTED
        column = _parse_optional_column(stream)
        if column is REJECTED:
            return REJECTED
        return LineWithOptionalColumn(line=line, column=column)
    if kind in FIRST["COLUMN"]:
        column = _parse_column(stream)
        if column is REJECTED:
            return REJECTED
        return ColumnOnly(column=column)
    return _reject(stream, "POSITION")


def _parse_line(stream: TokenStream) -> Parsed[Line]:
    token = stream.peek()
    if token.kind is TokenKind.NUMBER:
        stream.advance()
        return AbsoluteLine(token.magnitude)
    if token.kind is TokenKind.NEGATIVE_NUMBER:
        stream.advance()
        return NegativeLine(token.magnitude)
    return _reject(stream, "LINE")


def _parse_optional_column(stream: TokenStream) -> Parsed[Column | None]:
    kind = stream.peek().kind
    if kind in FIRST["COLUMN"]:
        return _parse_column(stream)
    if kind in FOLLOW["OPTIONAL_COLUMN"]:
        return None
    return _reject(stream, "OPTIONAL_COLUMN")


def _parse_column(stream: TokenStream) -> Parsed[Column]:
    kind = stream.peek().kind
    if kind is TokenKind.COMMA_OR_COLON:
        stream.advance()
        token = stream.peek()
        if token.kind is not TokenKind.NUMBER:
            return _reject(stream, "COLUMN")
        stream.advance()
        return AbsoluteColumn(token.magnitude)
    if kind in _SHORTCUT_TOKENS:
        stream.advance()
        return ShortcutColumn(_SHORTCUT_TOKENS[kind])
    return _reject(stream, "COLUMN")


def _reject(stream: TokenStream, variable: str) -> Literal[_Rejected.REJECTED]:
    LOGGER.debug("Rejected %r: unexpected %s while parsing %s", stream, stream.peek(), variable)
    return REJECTED


__all__ = ["FIRST", "FOLLOW", "REJECTED", "parse"]
