"""Read-only document and cursor snapshots consumed by the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, runtime_checkable

from ..core.positions import TextPosition


@runtime_checkable
class LineSource(Protocol):
    """Minimal document view needed to resolve a target.

    ``line_count`` is always at least one; ``line_text`` excludes the line break.
    """

    @property
    def line_count(self) -> int:
        ...

    def line_text(self, index: int) -> str:
        ...


@dataclass(slots=True, frozen=True)
class DocumentSnapshot(LineSource):
    """Immutable copy of a document's lines taken at one instant."""

    lines: tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if not lines:
            raise ValueError("DocumentSnapshot requires at least one line")
        object.__setattr__(self, "lines", lines)

    @classmethod
    def from_text(cls, text: str) -> DocumentSnapshot:
        """Split ``text`` into lines; a trailing newline yields a final empty line."""

        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        return cls(tuple(normalized.split("\n")))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DocumentSnapshot:
        return cls(tuple(lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_text(self, index: int) -> str:
        return self.lines[index]

    def line_length(self, index: int) -> int:
        return len(self.lines[index])


@dataclass(slots=True, frozen=True)
class CursorSnapshot:
    """The primary selection at the moment the input was read."""

    anchor: TextPosition
    active: TextPosition

    @classmethod
    def caret(cls, position: TextPosition | tuple[int, int]) -> CursorSnapshot:
        """Return a collapsed selection sitting at ``position``."""

        point = TextPosition.from_value(position)
        return cls(anchor=point, active=point)


__all__ = ["CursorSnapshot", "DocumentSnapshot", "LineSource"]
