"""Tests for the theme registry and its import/export helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from matte_themes.theme import (
    NotFoundError,
    Palette,
    Theme,
    ThemeManager,
    available_themes,
    build_matte_theme,
    load_theme,
    style,
)
from matte_themes.theme.manager import render_theme


def _custom_theme(name: str = "paper") -> Theme:
    palette = Palette(name, {"background": "#FAFAFA", "foreground": "#202020"})
    return Theme.from_definitions(
        name=name,
        palette=palette,
        definitions={"Normal": style(palette.foreground, palette.background)},
    )


def test_get_theme_is_case_and_whitespace_insensitive(manager: ThemeManager) -> None:
    assert manager.get_theme(" MATTE ").name == "matte"


def test_unknown_theme_lists_available_names(manager: ThemeManager) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        manager.get_theme("nonexistent")

    assert excinfo.value.name == "nonexistent"
    assert excinfo.value.available == ["abanoub", "matte", "matte_vibrant"]
    assert "available: abanoub, matte, matte_vibrant" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)


def test_available_names_are_sorted(manager: ThemeManager) -> None:
    assert manager.available_names() == ["abanoub", "matte", "matte_vibrant"]
    assert available_themes() == ["abanoub", "matte", "matte_vibrant"]


def test_register_adds_and_replaces_themes(manager: ThemeManager) -> None:
    manager.register(_custom_theme())
    assert "paper" in manager.list_themes()

    replacement = _custom_theme()
    manager.register(replacement)
    assert manager.get_theme("paper") is replacement

    with pytest.raises(ValueError):
        manager.register(_custom_theme(), overwrite=False)


def test_default_and_set_default(manager: ThemeManager) -> None:
    assert manager.default().name == "matte"
    assert manager.resolve(None).name == "matte"

    manager.set_default("abanoub")
    assert manager.default().name == "abanoub"

    with pytest.raises(NotFoundError):
        manager.set_default("nonexistent")
    assert manager.default().name == "abanoub"


def test_empty_registry_rejects_lookups() -> None:
    manager = ThemeManager(themes=[])

    assert manager.list_themes() == set()
    with pytest.raises(NotFoundError):
        manager.default()


def test_default_falls_back_to_first_registered_theme() -> None:
    manager = ThemeManager(themes=[_custom_theme()])

    assert manager.default().name == "paper"


def test_load_theme_accepts_instances_and_names() -> None:
    theme = build_matte_theme()

    assert load_theme(theme) is theme
    assert load_theme("matte_vibrant").name == "matte_vibrant"


def test_export_and_import_json_round_trip(tmp_path: Path, manager: ThemeManager) -> None:
    destination = manager.export_theme("abanoub", tmp_path / "out" / "abanoub.json")

    payload = json.loads(destination.read_text(encoding="utf-8"))
    assert payload["name"] == "abanoub"
    assert payload["groups"]["CursorColumn"] == {"link": "CursorLine"}

    fresh = ThemeManager(themes=[])
    imported = fresh.import_theme(destination)
    original = manager.get_theme("abanoub")
    assert imported.groups == original.groups
    assert imported.links == original.links
    assert imported.version == original.version


def test_export_and_import_yaml_round_trip(tmp_path: Path, manager: ThemeManager) -> None:
    destination = manager.export_theme("matte", tmp_path / "matte.yml")

    fresh = ThemeManager(themes=[])
    imported = fresh.import_theme(destination)

    assert imported.groups == manager.get_theme("matte").groups
    assert fresh.list_themes() == {"matte"}


def test_import_hand_written_yaml_with_palette_roles(tmp_path: Path, manager: ThemeManager) -> None:
    source = tmp_path / "dusk.yaml"
    source.write_text(
        "\n".join(
            [
                "name: Dusk",
                "palette:",
                "  background: '#101018'",
                "  accent: '#FFA500'",
                "groups:",
                "  Normal:",
                "    fg: '#E0E0E0'",
                "    bg: background",
                "  Keyword:",
                "    fg: accent",
                "    bold: true",
                "  Statement:",
                "    link: Keyword",
                "",
            ]
        ),
        encoding="utf-8",
    )

    theme = manager.import_theme(source, activate=True)

    assert theme.name == "dusk"
    assert theme.style("Normal").background == "#101018"
    assert theme.style("Statement") == theme.style("Keyword")
    assert theme.style("Keyword").has("bold")
    assert manager.default() is theme


def test_export_format_is_inferred_or_explicit(tmp_path: Path, manager: ThemeManager) -> None:
    lua_path = manager.export_theme("matte", tmp_path / "colors" / "matte.lua")
    assert lua_path.read_text(encoding="utf-8").startswith("-- File: colors/matte.lua")

    explicit = manager.export_theme("matte", tmp_path / "matte.txt", fmt="json")
    assert json.loads(explicit.read_text(encoding="utf-8"))["name"] == "matte"

    with pytest.raises(ValueError):
        manager.export_theme("matte", tmp_path / "matte.txt")
    with pytest.raises(ValueError):
        manager.export_theme("matte", tmp_path / "matte.json", fmt="toml")


def test_lua_files_cannot_be_imported(tmp_path: Path, manager: ThemeManager) -> None:
    path = manager.export_theme("matte", tmp_path / "matte.lua")

    with pytest.raises(ValueError):
        manager.import_theme(path)


def test_import_rejects_non_object_payload(tmp_path: Path, manager: ThemeManager) -> None:
    source = tmp_path / "list.json"
    source.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(ValueError):
        manager.import_theme(source)


def test_render_theme_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        render_theme(build_matte_theme(), "xml")


def test_import_reports_malformed_yaml_as_value_error(tmp_path: Path, manager: ThemeManager) -> None:
    source = tmp_path / "broken.yaml"
    source.write_text("name: broken\ngroups: [Normal\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid YAML"):
        manager.import_theme(source)
    assert "broken" not in manager.list_themes()


def test_import_names_group_with_unquoted_numeric_color(tmp_path: Path, manager: ThemeManager) -> None:
    source = tmp_path / "numeric.yaml"
    source.write_text("name: numeric\ngroups:\n  Normal:\n    fg: 000000\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Group 'Normal'"):
        manager.import_theme(source)
