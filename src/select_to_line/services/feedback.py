"""Status messages shown next to the input box while the user types."""

from __future__ import annotations

from dataclasses import dataclass

from ..editor.snapshot import CursorSnapshot, LineSource
from ..interpreter.targets import GoToTarget, SelectionTarget, Target

USAGE_HINT = (
    "Usage: <line>[,<column>][.[.]<line>[,<column>]] | Example: 1,10..5,20 or -3,5.-10"
)


@dataclass(slots=True, frozen=True)
class Feedback:
    """Validation outcome for the current input.

    ``ok`` is ``False`` for rejected input; the message then tells the user
    where the cursor is and which line numbers are valid.
    """

    ok: bool
    message: str


def describe_target(target: Target) -> str:
    """Return a 1-based, human-readable summary of ``target``."""

    if isinstance(target, GoToTarget):
        line, column = target.position.one_based()
        return f"Go to line {line} and column {column}."
    if isinstance(target, SelectionTarget):
        anchor_line, anchor_column = target.anchor.one_based()
        active_line, active_column = target.active.one_based()
        verb = "Quick select" if target.quick else "Select"
        return (
            f"{verb} from line {anchor_line} and column {anchor_column} "
            f"to line {active_line} and column {active_column}."
        )
    raise TypeError(f"Unsupported target: {target!r}")


def describe_rejection(document: LineSource, cursor: CursorSnapshot) -> str:
    line, column = cursor.active.one_based()
    return (
        f"Current Line: {line}, Column: {column}. "
        f"Type a line number between 1 and {document.line_count} to navigate to."
    )


def feedback_for(target: Target | None, document: LineSource, cursor: CursorSnapshot) -> Feedback:
    """Build the validation message for one ``interpret`` result."""

    if target is None:
        return Feedback(ok=False, message=describe_rejection(document, cursor))
    return Feedback(ok=True, message=describe_target(target))


__all__ = ["Feedback", "USAGE_HINT", "describe_rejection", "describe_target", "feedback_for"]
