"""Resolve compact go-to/selection expressions against a text document."""

from .core.positions import TextPosition
from .editor.snapshot import CursorSnapshot, DocumentSnapshot, LineSource
from .interpreter import GoToTarget, SelectionTarget, Target, interpret
from .services.settings import ActiveRelativeTo, ColumnDefault, NavigatorSettings, SettingsStore

__all__ = [
    "ActiveRelativeTo",
    "ColumnDefault",
    "CursorSnapshot",
    "DocumentSnapshot",
    "GoToTarget",
    "LineSource",
    "NavigatorSettings",
    "SelectionTarget",
    "SettingsStore",
    "Target",
    "TextPosition",
    "interpret",
]

__version__ = "0.3.0"
