"""Tests for the Qt text format host."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6.QtGui")

from matte_themes.hosts import QtFormatHost  # noqa: E402
from matte_themes.theme import Attribute, apply_theme, get_theme, style  # noqa: E402


def test_theme_groups_become_text_formats() -> None:
    host = QtFormatHost()
    assert host.is_available()

    report = apply_theme(get_theme("matte"), host)

    assert report.ok
    normal = host.format_for("Normal")
    assert normal is not None
    assert normal.foreground().color().name() == "#f0f0f0"
    assert normal.background().color().name() == "#1a1a1a"
    assert host.active_theme_name == "matte"
    assert host.true_color is True


def test_links_resolve_to_target_formats() -> None:
    host = QtFormatHost()
    apply_theme(get_theme("abanoub"), host, use_links=True)

    assert host.style_for("CursorColumn") == host.style_for("CursorLine")
    assert host.format_for("CursorColumn") is host.format_for("CursorLine")
    assert "CursorColumn" in host.formats()


def test_attributes_map_onto_format_flags() -> None:
    host = QtFormatHost()
    host.set_highlight("Comment", style("#777777", None, Attribute.ITALIC, Attribute.STRIKETHROUGH))
    host.set_highlight("Visual", style("#101010", "#EEEEEE", Attribute.REVERSE))

    comment = host.format_for("Comment")
    assert comment.fontItalic()
    assert comment.fontStrikeOut()

    visual = host.format_for("Visual")
    assert visual.foreground().color().name() == "#eeeeee"
    assert visual.background().color().name() == "#101010"


def test_clear_drops_previous_formats() -> None:
    host = QtFormatHost()
    apply_theme(get_theme("abanoub"), host)
    apply_theme(get_theme("matte"), host)

    assert host.format_for("@namespace.go") is None
