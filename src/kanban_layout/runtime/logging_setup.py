"""Logging configuration for kanban-layout.

The root logger gets a stderr handler (level from ``LOG_LEVEL`` or the
caller) and, unless disabled, a rotating DEBUG file under the state
directory. ``KANBAN_LOG_DIR`` moves the state directory.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

DEFAULT_LOG_DIR = Path.home() / ".local" / "state" / "kanban-layout"
LOG_FORMAT = "[%(name)s] %(message)s"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
MAX_BYTES = 1_000_000  # 1 MB per file
BACKUP_COUNT = 3

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_stderr_handler: logging.StreamHandler | None = None
_file_handler: RotatingFileHandler | None = None


def log_file_path() -> Path:
    base = os.environ.get("KANBAN_LOG_DIR")
    return (Path(base) if base else DEFAULT_LOG_DIR) / "app.log"


def _resolve_level(console_level: str | None) -> str:
    env_level = os.environ.get("LOG_LEVEL", "").upper()
    if env_level in VALID_LEVELS:
        return env_level
    if console_level and console_level.upper() in VALID_LEVELS:
        return console_level.upper()
    return "INFO"


def configure_logging(console_level: str | None = None, *, log_to_file: bool = True) -> None:
    """Attach the stderr (and optionally file) handler to the root logger.

    Calling again only adjusts the stderr level, so handlers never pile up.
    """
    global _stderr_handler, _file_handler  # noqa: PLW0603

    level = _resolve_level(console_level)
    if _stderr_handler is not None:
        set_stderr_level(level)
        return

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    _stderr_handler = logging.StreamHandler(sys.stderr)
    _stderr_handler.setLevel(getattr(logging, level))
    _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_stderr_handler)

    if log_to_file:
        log_file = log_file_path()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT
        )
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root.addHandler(_file_handler)


def set_stderr_level(level_name: str) -> None:
    """Change the stderr handler log level at runtime."""
    if _stderr_handler is None:
        return
    upper = level_name.upper()
    if upper in VALID_LEVELS:
        _stderr_handler.setLevel(getattr(logging, upper))


def reset_logging() -> None:
    """Detach and close the handlers installed by :func:`configure_logging`."""
    global _stderr_handler, _file_handler  # noqa: PLW0603

    root = logging.getLogger()
    for handler in (_stderr_handler, _file_handler):
        if handler is not None:
            root.removeHandler(handler)
            handler.close()
    _stderr_handler = None
    _file_handler = None


def log_files_chronological() -> list[Path]:
    """Return all log files oldest-first (backup.3 -> backup.1 -> current)."""
    log_file = log_file_path()
    files = [
        log_file.with_suffix(f".log.{i}")
        for i in range(BACKUP_COUNT, 0, -1)
        if log_file.with_suffix(f".log.{i}").exists()
    ]
    if log_file.exists():
        files.append(log_file)
    return files


def export_logs(dest: str | Path | None = None, stream: TextIO | None = None) -> Path | None:
    """Concatenate all log files oldest first into *dest*, or *stream* (stdout)."""
    if dest is None:
        out = stream or sys.stdout
        for log_file in log_files_chronological():
            with log_file.open() as f:
                shutil.copyfileobj(f, out)
        return None

    dest = Path(dest)
    with dest.open("w") as out:
        for log_file in log_files_chronological():
            with log_file.open() as f:
                shutil.copyfileobj(f, out)
    return dest
