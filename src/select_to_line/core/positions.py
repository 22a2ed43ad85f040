"""Line/character coordinates shared by the interpreter and editor adapters."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator


def clamp_index(value: int, upper: int) -> int:
    """Clamp ``value`` into ``[0, upper]``."""

    if value < 0:
        return 0
    if value > upper:
        return upper
    return value


@dataclass(slots=True, frozen=True, order=True)
class TextPosition(Sequence[int]):
    """A 0-based ``(line, character)`` pair.

    Ordering compares the line first, then the character, which matches how
    positions compare inside a document.
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        for label in ("line", "character"):
            value = getattr(self, label)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"TextPosition {label} must be an integer")
            if value < 0:
                raise ValueError(f"TextPosition {label} must not be negative")

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.line
        if index == 1:
            return self.character
        raise IndexError("TextPosition index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.line
        yield self.character

    def to_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}

    def one_based(self) -> tuple[int, int]:
        """Return the coordinates as the UI labels them."""

        return (self.line + 1, self.character + 1)

    @classmethod
    def from_value(cls, value: Any) -> TextPosition:
        """Coerce a mapping, pair, or position-like object into a :class:`TextPosition`."""

        if isinstance(value, TextPosition):
            return value
        if isinstance(value, Mapping):
            if "line" not in value or "character" not in value:
                raise ValueError("TextPosition mappings require line and character keys")
            return cls(int(value["line"]), int(value["character"]))
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 2:
                raise ValueError("TextPosition sequences must have exactly two entries")
            return cls(int(seq[0]), int(seq[1]))
        line = getattr(value, "line", None)
        character = getattr(value, "character", None)
        if line is not None and character is not None:
            return cls(int(line), int(character))
        raise TypeError("Unsupported TextPosition input")


__all__ = ["TextPosition", "clamp_index"]
