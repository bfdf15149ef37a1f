"""Tests for the logging helpers."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from matte_themes.utils.logging import get_log_path, setup_logging


def test_setup_logging_writes_rotating_file(tmp_path: Path) -> None:
    log_path = setup_logging(logging.DEBUG, log_dir=tmp_path)

    logging.getLogger("matte_themes.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path == tmp_path / "matte-themes.log"
    assert get_log_path() == log_path
    assert "hello from the test" in log_path.read_text(encoding="utf-8")


def test_log_dir_defaults_to_environment(tmp_path: Path) -> None:
    assert setup_logging() == tmp_path / "logs" / "matte-themes.log"


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "a")
    second = setup_logging(log_dir=tmp_path / "b")

    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert second == tmp_path / "b" / "matte-themes.log"
    assert [Path(h.baseFilename) for h in file_handlers] == [second]


def test_log_file_can_be_disabled(tmp_path: Path) -> None:
    assert setup_logging(log_dir=tmp_path, log_file=False) is None
    assert get_log_path() is None
    assert not (tmp_path / "matte-themes.log").exists()


def test_unusable_log_dir_falls_back_to_console(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    assert setup_logging(log_dir=blocker / "logs", console_level=logging.WARNING) is None
    assert "Logging to console only" in capsys.readouterr().err
