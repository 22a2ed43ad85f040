"""Settings and user-facing feedback services."""

from .feedback import Feedback, USAGE_HINT, describe_target, feedback_for
from .settings import ActiveRelativeTo, ColumnDefault, NavigatorSettings, SettingsStore

__all__ = [
    "ActiveRelativeTo",
    "ColumnDefault",
    "Feedback",
    "NavigatorSettings",
    "SettingsStore",
    "USAGE_HINT",
    "describe_target",
    "feedback_for",
]
