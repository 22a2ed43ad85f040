"""Tests for the settings persistence layer."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import pytest

from select_to_line.services.settings import (
    ActiveRelativeTo,
    ColumnDefault,
    NavigatorSettings,
    SettingsStore,
)


def test_load_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    settings = store.load()

    assert settings == NavigatorSettings()
    assert settings.column_defaults_to is ColumnDefault.FIRST_NON_WHITESPACE
    assert settings.active_relative_to is ActiveRelativeTo.ANCHOR
    assert settings.viewport_change_delay_ms == 200
    assert settings.debug_logging is False


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path)
    original = NavigatorSettings(
        column_defaults_to=ColumnDefault.END_OF_LINE,
        active_relative_to=ActiveRelativeTo.CURSOR,
        viewport_change_delay_ms=50,
        debug_logging=True,
    )

    saved_path = store.save(original)

    assert saved_path == path
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload == {
        "active_relative_to": "cursor",
        "column_defaults_to": "end-of-line",
        "debug_logging": True,
        "version": 1,
        "viewport_change_delay_ms": 50,
    }
    assert not path.with_suffix(".tmp").exists()
    assert store.load() == original


def test_legacy_column_names_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"column_defaults_to": "onePastLastNonWhitespaceCharacterOfLine"}), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings.column_defaults_to is ColumnDefault.ONE_PAST_LAST_NON_WHITESPACE


def test_unknown_fields_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"active_relative_to": "cursor", "theme": "dark"}), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings == NavigatorSettings(active_relative_to=ActiveRelativeTo.CURSOR)


def test_invalid_json_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="select_to_line.services.settings"):
        settings = SettingsStore(path).load()

    assert settings == NavigatorSettings()
    assert "not valid JSON" in caplog.text


def test_schema_violation_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"viewport_change_delay_ms": -5, "column_defaults_to": "end-of-line"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="select_to_line.services.settings"):
        settings = SettingsStore(path).load()

    assert settings == NavigatorSettings()
    assert "failed validation" in caplog.text


def test_cli_overrides_skip_none_values(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    settings = store.load(overrides={"column_defaults_to": "start-of-line", "active_relative_to": None, "bogus": 1})

    assert settings.column_defaults_to is ColumnDefault.START_OF_LINE
    assert settings.active_relative_to is ActiveRelativeTo.ANCHOR


def test_environment_overrides_win_over_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "settings.json"
    SettingsStore(path).save(NavigatorSettings(column_defaults_to=ColumnDefault.END_OF_LINE))
    monkeypatch.setenv("SELECT_TO_LINE_COLUMN_DEFAULT", "startOfLine")
    monkeypatch.setenv("SELECT_TO_LINE_ACTIVE_RELATIVE_TO", "CURSOR")
    monkeypatch.setenv("SELECT_TO_LINE_DEBUG_LOGGING", "yes")
    monkeypatch.setenv("SELECT_TO_LINE_VIEWPORT_DELAY", "75")

    settings = SettingsStore(path).load()

    assert settings == NavigatorSettings(
        column_defaults_to=ColumnDefault.START_OF_LINE,
        active_relative_to=ActiveRelativeTo.CURSOR,
        viewport_change_delay_ms=75,
        debug_logging=True,
    )


def test_invalid_environment_values_are_ignored(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("SELECT_TO_LINE_VIEWPORT_DELAY", "soon")
    monkeypatch.setenv("SELECT_TO_LINE_ACTIVE_RELATIVE_TO", "sideways")

    with caplog.at_level(logging.WARNING, logger="select_to_line.services.settings"):
        settings = SettingsStore(tmp_path / "settings.json").load()

    assert settings == NavigatorSettings()
    assert "not a valid integer" in caplog.text
    assert "Ignoring invalid environment settings overrides" in caplog.text


def test_bad_environment_value_keeps_other_overrides(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("SELECT_TO_LINE_ACTIVE_RELATIVE_TO", "sideways")
    monkeypatch.setenv("SELECT_TO_LINE_COLUMN_DEFAULT", "end-of-line")
    monkeypatch.setenv("SELECT_TO_LINE_DEBUG_LOGGING", "on")

    with caplog.at_level(logging.WARNING, logger="select_to_line.services.settings"):
        settings = SettingsStore(tmp_path / "settings.json").load()

    assert settings == NavigatorSettings(column_defaults_to=ColumnDefault.END_OF_LINE, debug_logging=True)
    assert "sideways" in caplog.text


def test_settings_coerce_strings_and_reject_negative_delay() -> None:
    settings = NavigatorSettings(column_defaults_to="endOfLine", active_relative_to="cursor")  # type: ignore[arg-type]

    assert settings.column_defaults_to is ColumnDefault.END_OF_LINE
    assert settings.active_relative_to is ActiveRelativeTo.CURSOR
    with pytest.raises(ValueError):
        replace(settings, viewport_change_delay_ms=-1)
    with pytest.raises(ValueError):
        ColumnDefault.parse("middle-of-line")


def test_default_path_lives_in_home_directory() -> None:
    assert SettingsStore().path == Path.home() / ".select-to-line" / "settings.json"
