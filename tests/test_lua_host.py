"""Tests for the Neovim colorscheme writer."""

from __future__ import annotations

from matte_themes.hosts import LuaScriptHost, render_lua
from matte_themes.theme import Attribute, apply_theme, get_theme, style


def test_rendered_module_has_setup_sequence() -> None:
    text = render_lua(get_theme("matte"))
    lines = text.splitlines()

    setup = lines.index("function M.setup()")
    assert lines[setup + 1] == '\tvim.cmd("hi clear")'
    assert lines[setup + 2] == '\tif vim.fn.exists("syntax_on") == 1 then'
    assert lines[setup + 3] == '\t\tvim.cmd("syntax reset")'
    assert lines[setup + 4] == "\tend"
    assert lines[setup + 5] == "\tvim.o.termguicolors = true"
    assert lines[setup + 6] == '\tvim.g.colors_name = "matte"'
    assert text.endswith("M.setup()\n\nreturn M\n")


def test_rendered_module_header_and_groups() -> None:
    text = render_lua(get_theme("matte_vibrant"))

    assert text.startswith("-- File: colors/matte_vibrant.lua\n")
    assert "-- Neovim Colorscheme: Matte Vibrant" in text
    assert "-- Version: 1.0.2" in text
    assert '\tvim.api.nvim_set_hl(0, "Keyword", { fg = "#FFB800", bold = true })' in text


def test_links_are_written_as_link_tables() -> None:
    text = render_lua(get_theme("matte"))

    assert '\tvim.api.nvim_set_hl(0, "Normal", { fg = "#F0F0F0", bg = "#1A1A1A" })' in text
    assert '\tvim.api.nvim_set_hl(0, "CursorColumn", { link = "CursorLine" })' in text


def test_resolved_rendering_copies_link_targets() -> None:
    theme = get_theme("matte")
    text = render_lua(theme, use_links=False)

    assert "link =" not in text
    assert text.count("vim.api.nvim_set_hl(") == len(theme.groups)


def test_special_color_and_undercurl_are_emitted() -> None:
    text = render_lua(get_theme("abanoub"))

    assert (
        '\tvim.api.nvim_set_hl(0, "DiagnosticUnderlineError", { sp = "#FF0000", undercurl = true })'
        in text
    )


def test_host_statements_and_empty_styles() -> None:
    host = LuaScriptHost()
    host.clear_all_highlights()
    host.set_highlight("Conceal", style())
    host.set_highlight("Title", style("#FFFFFF", None, Attribute.BOLD, Attribute.ITALIC))

    assert host.statements == [
        'vim.cmd("hi clear")',
        'vim.api.nvim_set_hl(0, "Conceal", {})',
        'vim.api.nvim_set_hl(0, "Title", { fg = "#FFFFFF", bold = true, italic = true })',
    ]
    assert host.render().startswith("local M = {}\n")


def test_clear_discards_earlier_statements() -> None:
    host = LuaScriptHost()
    apply_theme(get_theme("abanoub"), host)
    apply_theme(get_theme("matte"), host)

    assert host.statements[0] == 'vim.cmd("hi clear")'
    assert 'vim.g.colors_name = "matte"' in host.statements
    assert not any("abanoub" in statement for statement in host.statements)
