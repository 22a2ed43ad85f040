"""Syntax tree produced by the parser.

One dataclass per grammar alternative; the union aliases name the grammar
variables. Nodes carry only what was typed, never resolved coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ShortcutKind(Enum):
    """Column shortcut terms."""

    START_OF_LINE = "H"
    END_OF_LINE = "L"
    FIRST_NON_WHITESPACE = "h"
    ONE_PAST_LAST_NON_WHITESPACE = "l"


@dataclass(slots=True, frozen=True)
class AbsoluteLine:
    """``N``: 1-based line number."""

    magnitude: int


@dataclass(slots=True, frozen=True)
class NegativeLine:
    """``-N``: ``magnitude`` lines above the reference line."""

    magnitude: int


@dataclass(slots=True, frozen=True)
class AbsoluteColumn:
    """``,N`` or ``:N``: 1-based column number."""

    magnitude: int


@dataclass(slots=True, frozen=True)
class ShortcutColumn:
    kind: ShortcutKind


@dataclass(slots=True, frozen=True)
class LineWithOptionalColumn:
    line: Line
    column: Column | None = None


@dataclass(slots=True, frozen=True)
class ColumnOnly:
    column: Column


@dataclass(slots=True, frozen=True)
class QuickRangeEnd:
    """``.POSITION``: the selection is widened to whole lines."""

    position: Position


@dataclass(slots=True, frozen=True)
class ExactRangeEnd:
    """``..POSITION``: the selection stops at the exact position."""

    position: Position


@dataclass(slots=True, frozen=True)
class StartWithOptionalRangeEnd:
    start: Position
    end: RangeEnd | None = None


@dataclass(slots=True, frozen=True)
class RangeEndOnly:
    end: RangeEnd


Line = Union[AbsoluteLine, NegativeLine]
Column = Union[AbsoluteColumn, ShortcutColumn]
Position = Union[LineWithOptionalColumn, ColumnOnly]
RangeEnd = Union[QuickRangeEnd, ExactRangeEnd]
SyntaxTarget = Union[StartWithOptionalRangeEnd, RangeEndOnly]


__all__ = [
    "AbsoluteColumn",
    "AbsoluteLine",
    "Column",
    "ColumnOnly",
    "ExactRangeEnd",
    "Line",
    "LineWithOptionalColumn",
    "NegativeLine",
    "Position",
    "QuickRangeEnd",
    "RangeEnd",
    "RangeEndOnly",
    "ShortcutColumn",
    "ShortcutKind",
    "StartWithOptionalRangeEnd",
    "SyntaxTarget",
]
