"""Settings dataclasses and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema

__all__ = [
    "ActiveRelativeTo",
    "ColumnDefault",
    "NavigatorSettings",
    "SETTINGS_SCHEMA",
    "SettingsStore",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".select-to-line"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENUM_ENV_OVERRIDES: Mapping[str, str] = {
    "SELECT_TO_LINE_COLUMN_DEFAULT": "column_defaults_to",
    "SELECT_TO_LINE_ACTIVE_RELATIVE_TO": "active_relative_to",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "SELECT_TO_LINE_DEBUG_LOGGING": "debug_logging",
}
_INT_ENV_OVERRIDES: Mapping[str, str] = {
    "SELECT_TO_LINE_VIEWPORT_DELAY": "viewport_change_delay_ms",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


class ColumnDefault(Enum):
    """Column used when an input names a line but no column."""

    START_OF_LINE = "start-of-line"
    END_OF_LINE = "end-of-line"
    FIRST_NON_WHITESPACE = "first-non-whitespace"
    ONE_PAST_LAST_NON_WHITESPACE = "one-past-last-non-whitespace"

    @classmethod
    def parse(cls, value: Any) -> ColumnDefault:
        if isinstance(value, ColumnDefault):
            return value
        normalized = str(value).strip()
        normalized = _LEGACY_COLUMN_DEFAULTS.get(normalized, normalized)
        return cls(normalized.lower())


class ActiveRelativeTo(Enum):
    """What relative terms in a range end are measured from."""

    ANCHOR = "anchor"
    CURSOR = "cursor"

    @classmethod
    def parse(cls, value: Any) -> ActiveRelativeTo:
        if isinstance(value, ActiveRelativeTo):
            return value
        return cls(str(value).strip().lower())


_LEGACY_COLUMN_DEFAULTS: Mapping[str, str] = {
    "startOfLine": ColumnDefault.START_OF_LINE.value,
    "endOfLine": ColumnDefault.END_OF_LINE.value,
    "firstNonWhitespaceCharacterOfLine": ColumnDefault.FIRST_NON_WHITESPACE.value,
    "onePastLastNonWhitespaceCharacterOfLine": ColumnDefault.ONE_PAST_LAST_NON_WHITESPACE.value,
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "version": {"type": "integer"},
        "column_defaults_to": {
            "type": "string",
            "enum": [item.value for item in ColumnDefault] + list(_LEGACY_COLUMN_DEFAULTS),
        },
        "active_relative_to": {
            "type": "string",
            "enum": [item.value for item in ActiveRelativeTo],
        },
        "viewport_change_delay_ms": {"type": "integer", "minimum": 0},
        "debug_logging": {"type": "boolean"},
    },
}


@dataclass(slots=True, frozen=True)
class NavigatorSettings:
    """User-configurable settings read once per interpretation."""

    column_defaults_to: ColumnDefault = ColumnDefault.FIRST_NON_WHITESPACE
    active_relative_to: ActiveRelativeTo = ActiveRelativeTo.ANCHOR
    viewport_change_delay_ms: int = 200
    debug_logging: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "column_defaults_to", ColumnDefault.parse(self.column_defaults_to))
        object.__setattr__(self, "active_relative_to", ActiveRelativeTo.parse(self.active_relative_to))
        if self.viewport_change_delay_ms < 0:
            raise ValueError("viewport_change_delay_ms must not be negative")


class SettingsStore:
    """Persistence adapter for :class:`NavigatorSettings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> NavigatorSettings:
        """Load settings from disk, applying CLI/environment overrides when present."""

        payload = self._read_payload()
        settings = NavigatorSettings()
        if payload:
            data = _filter_fields(payload)
            try:
                settings = NavigatorSettings(**data)
            except (TypeError, ValueError) as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = NavigatorSettings()
            LOGGER.debug("Settings loaded from %s: %s", self._path, sorted(data))

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="CLI")

        return self._apply_env_overrides(settings)

    def save(self, settings: NavigatorSettings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload = self._serialize(settings)
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _serialize(self, settings: NavigatorSettings) -> Dict[str, Any]:
        data = asdict(settings)
        data["column_defaults_to"] = settings.column_defaults_to.value
        data["active_relative_to"] = settings.active_relative_to.value
        data["version"] = _SETTINGS_VERSION
        return data

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        try:
            jsonschema.validate(payload, SETTINGS_SCHEMA)
        except jsonschema.ValidationError as exc:
            LOGGER.warning("Settings file %s failed validation: %s", self._path, exc.message)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: NavigatorSettings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> NavigatorSettings:
        allowed = {field.name for field in fields(NavigatorSettings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        if not filtered:
            return settings
        LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
        try:
            return replace(settings, **filtered)
        except ValueError as exc:
            LOGGER.warning("Ignoring invalid %s settings overrides: %s", source, exc)
            return settings

    def _apply_env_overrides(self, settings: NavigatorSettings) -> NavigatorSettings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENUM_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        for env_name, field_name in _INT_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            try:
                overrides[field_name] = int(value, 10)
            except ValueError:
                LOGGER.warning(
                    "Environment override %s=%s is not a valid integer",
                    env_name,
                    value,
                )
        for field_name, value in overrides.items():
            settings = self._apply_overrides(settings, {field_name: value}, source="environment")
        return settings


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {field.name for field in fields(NavigatorSettings)}
    return {key: value for key, value in payload.items() if key in allowed}
