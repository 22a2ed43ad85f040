"""Log file setup for the command line helper.

Handlers hang off the ``select_to_line`` package logger rather than the root
logger, so an embedding editor keeps its own logging configuration.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["get_log_path", "level_for", "setup_logging"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_PACKAGE_LOGGER = "select_to_line"
_LOG_FILE_NAME = "select_to_line.log"
_installed: list[logging.Handler] = []
_log_path: Path | None = None


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    force: bool = False,
) -> Path:
    """Write package logs to a rotating ``select_to_line.log``.

    ``log_dir`` wins over ``SELECT_TO_LINE_LOG_DIR``, which wins over
    ``~/.select-to-line/logs``. A second call only reconfigures with ``force``.
    """

    global _log_path
    if _log_path is not None and not force:
        return _log_path

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in _installed:
        package_logger.removeHandler(handler)
        handler.close()
    _installed.clear()

    directory = Path(log_dir or os.environ.get("SELECT_TO_LINE_LOG_DIR") or _default_log_dir()).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / _LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler = logging.handlers.RotatingFileHandler(path, maxBytes=512_000, backupCount=2, encoding="utf-8")
    _installed.append(file_handler)
    if console:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setLevel(logging.WARNING)
        _installed.append(stderr_handler)
    for handler in _installed:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    _log_path = path
    return path


def level_for(debug_logging: bool, *, verbose: bool = False) -> int:
    """Map the ``debug_logging`` setting and ``--verbose`` to a logging level."""

    return logging.DEBUG if debug_logging or verbose else logging.INFO


def get_log_path() -> Path | None:
    return _log_path


def _default_log_dir() -> Path:
    return Path.home() / ".select-to-line" / "logs"
