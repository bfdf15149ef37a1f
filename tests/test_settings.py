"""Tests for the settings persistence layer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from matte_themes.services.settings import Settings, SettingsStore


def test_load_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    assert store.load() == Settings()
    assert not store.path.exists()


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    original = Settings(
        theme="abanoub",
        use_links=False,
        theme_paths=[str(tmp_path / "dusk.yaml")],
        export_dir=str(tmp_path / "nvim"),
    )

    SettingsStore(path).save(original)
    reloaded = SettingsStore(path).load()

    assert reloaded == original
    assert json.loads(path.read_text(encoding="utf-8"))["version"] == 1
    assert not path.with_suffix(".tmp").exists()


def test_unknown_keys_are_ignored_and_payload_migrated(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"theme": "matte_vibrant", "font_size": 14}), encoding="utf-8")

    loaded = SettingsStore(path).load()

    assert loaded.theme == "matte_vibrant"
    migrated = json.loads(path.read_text(encoding="utf-8"))
    assert migrated["version"] == 1
    assert "font_size" not in migrated


def test_invalid_json_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("WARNING"):
        loaded = SettingsStore(path).load()

    assert loaded == Settings()
    assert "not valid JSON" in caplog.text


def test_non_object_payload_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_cli_overrides_skip_unknown_and_unset_keys(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsStore(path).save(Settings(export_dir=str(tmp_path / "nvim")))

    loaded = SettingsStore(path).load(overrides={"theme": "abanoub", "unknown": 1, "export_dir": None})

    assert loaded.theme == "abanoub"
    assert loaded.export_dir == str(tmp_path / "nvim")


def test_wrongly_typed_values_fall_back_to_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "theme": None,
                "use_links": "sometimes",
                "theme_paths": ["ok.yaml", 3],
                "export_dir": "/tmp/nvim",
                "version": 1,
            }
        ),
        encoding="utf-8",
    )

    with caplog.at_level("WARNING"):
        loaded = SettingsStore(path).load()

    assert loaded == Settings(export_dir="/tmp/nvim")
    assert "Ignoring setting 'theme'" in caplog.text
    assert "Ignoring setting 'theme_paths'" in caplog.text


def test_env_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsStore(path).save(Settings(theme="matte", use_links=True))
    monkeypatch.setenv("MATTE_THEME", "abanoub")
    monkeypatch.setenv("MATTE_USE_LINKS", "off")
    monkeypatch.setenv("MATTE_DEBUG_LOGGING", "yes")

    overridden = SettingsStore(path).load(overrides={"theme": "matte_vibrant"})

    assert overridden.theme == "abanoub"
    assert overridden.use_links is False
    assert overridden.debug_logging is True
