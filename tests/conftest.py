"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from select_to_line.editor.snapshot import CursorSnapshot, DocumentSnapshot  # noqa: E402
from select_to_line.services.settings import NavigatorSettings  # noqa: E402

from tests.helpers import reference_cursor, reference_document  # noqa: E402


@pytest.fixture
def document() -> DocumentSnapshot:
    return reference_document()


@pytest.fixture
def cursor() -> CursorSnapshot:
    return reference_cursor()


@pytest.fixture
def settings() -> NavigatorSettings:
    return NavigatorSettings()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in list(os.environ):
        if name.startswith("SELECT_TO_LINE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SELECT_TO_LINE_LOG_DIR", str(tmp_path / "logs"))
