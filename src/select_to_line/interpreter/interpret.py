"""Single entry point turning raw input into a navigation target."""

from __future__ import annotations

import logging

from ..editor.snapshot import CursorSnapshot, LineSource
from ..services.settings import NavigatorSettings
from .parser import parse
from .resolver import interpret_target
from .targets import Target
from .tokenizer import tokenize

LOGGER = logging.getLogger(__name__)


def interpret(
    raw_input: str,
    document: LineSource,
    cursor: CursorSnapshot,
    settings: NavigatorSettings | None = None,
) -> Target | None:
    """Resolve ``raw_input`` against the given snapshots.

    Returns ``None`` when the input contains an unknown character, does not
    match the grammar, or is empty. The call is pure: nothing passed in is
    modified, so it is safe to run on every keystroke and discard the result.
    """

    stream = tokenize(raw_input)
    if stream is None:
        return None
    tree = parse(stream)
    if tree is None:
        return None
    target = interpret_target(tree, document, cursor, settings or NavigatorSettings())
    LOGGER.debug("Resolved %r to %s", raw_input, target)
    return target


__all__ = ["interpret"]
