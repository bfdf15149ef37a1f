"""Logging setup for the matte-themes command line."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["setup_logging", "get_log_path"]

_DEFAULT_LOG_DIR = Path.home() / ".matte_themes" / "logs"
_LOG_DIR_ENV = "MATTE_THEMES_LOG_DIR"
_LOG_FILE_NAME = "matte-themes.log"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_log_path: Path | None = None


def setup_logging(
    level: int = logging.INFO,
    *,
    console_level: int | None = None,
    log_dir: Path | str | None = None,
    log_file: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path | None:
    """Install the root handlers for one run, replacing any installed earlier.

    The console handler writes to stderr so themes exported to stdout stay
    clean. When the log directory cannot be used the run keeps console output
    only. Returns the log file path, or ``None`` without a file handler.
    """

    global _log_path
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level if console_level is None else console_level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    _log_path = None
    file_error: OSError | None = None
    if log_file:
        target = _resolve_log_dir(log_dir) / _LOG_FILE_NAME
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                target, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as exc:
            file_error = exc
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
            _log_path = target

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.captureWarnings(True)
    if file_error is not None:
        logging.getLogger(__name__).warning("Logging to console only: %s", file_error)
    return _log_path


def get_log_path() -> Path | None:
    """Return the log file of the current run, if one is open."""

    return _log_path


def _resolve_log_dir(log_dir: Path | str | None) -> Path:
    return Path(log_dir or os.environ.get(_LOG_DIR_ENV) or _DEFAULT_LOG_DIR).expanduser()
