"""Resolved navigation targets handed back to the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ..core.positions import TextPosition


@dataclass(slots=True, frozen=True)
class GoToTarget:
    """Move the caret to ``position`` without selecting anything."""

    position: TextPosition

    kind: ClassVar[str] = "goTo"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "position": self.position.to_dict()}


@dataclass(slots=True, frozen=True)
class SelectionTarget:
    """Select from ``anchor`` to ``active``.

    ``quick`` marks a selection that was widened to cover whole lines.
    """

    anchor: TextPosition
    active: TextPosition
    quick: bool = False

    kind: ClassVar[str] = "selection"

    @property
    def start(self) -> TextPosition:
        return min(self.anchor, self.active)

    @property
    def end(self) -> TextPosition:
        return max(self.anchor, self.active)

    @property
    def is_reversed(self) -> bool:
        """Return ``True`` when the active end sits before the anchor."""

        return self.active < self.anchor

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "anchor": self.anchor.to_dict(),
            "active": self.active.to_dict(),
            "quick": self.quick,
        }


Target = Union[GoToTarget, SelectionTarget]


__all__ = ["GoToTarget", "SelectionTarget", "Target"]
