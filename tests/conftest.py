"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Iterator

import pytest

from matte_themes.hosts.memory import InMemoryHost
from matte_themes.theme import ThemeManager


@pytest.fixture
def memory_host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def manager() -> ThemeManager:
    return ThemeManager()


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep log files and environment overrides away from the real user profile."""

    monkeypatch.setenv("MATTE_THEMES_LOG_DIR", str(tmp_path / "logs"))
    for name in (
        "MATTE_THEME",
        "MATTE_EXPORT_DIR",
        "MATTE_USE_LINKS",
        "MATTE_DEBUG_LOGGING",
        "MATTE_THEMES_DEBUG",
        "MATTE_THEMES_SETTINGS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers() -> Iterator[None]:
    """Close handlers installed by ``setup_logging`` so later tests never write to stale streams."""

    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler or isinstance(handler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
