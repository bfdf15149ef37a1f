"""Host surface that writes a Neovim ``colors/<name>.lua`` colorscheme module."""

from __future__ import annotations

from typing import List, Sequence

from ..theme.models import Attribute, StyleRecord, Theme
from .base import HighlightHost

__all__ = ["LuaScriptHost", "render_lua"]

_INDENT = "\t"


def _lua_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _lua_table(style: StyleRecord) -> str:
    fields: List[str] = []
    for key, value in (("fg", style.foreground), ("bg", style.background), ("sp", style.special)):
        if value is not None:
            fields.append(f"{key} = {_lua_string(value)}")
    for attribute in Attribute:
        if attribute in style.attributes:
            fields.append(f"{attribute.value} = true")
    if not fields:
        return "{}"
    return "{ " + ", ".join(fields) + " }"


class LuaScriptHost(HighlightHost):
    """Turns apply calls into the statements of a ``M.setup()`` function.

    The legacy syntax check cannot be answered while generating a file, so the
    host reports it active and emits a runtime guard around ``syntax reset``.
    """

    name = "lua"

    def __init__(self, *, header: Sequence[str] = ()) -> None:
        self._header = list(header)
        self._statements: List[str] = []

    def clear_all_highlights(self) -> None:
        self._statements = ['vim.cmd("hi clear")']

    def set_highlight(self, group: str, style: StyleRecord) -> None:
        self._statements.append(f"vim.api.nvim_set_hl(0, {_lua_string(group)}, {_lua_table(style)})")

    def link_highlight(self, group: str, target: str) -> None:
        self._statements.append(
            f"vim.api.nvim_set_hl(0, {_lua_string(group)}, {{ link = {_lua_string(target)} }})"
        )

    def enable_true_color(self) -> None:
        self._statements.append("vim.o.termguicolors = true")

    def is_legacy_syntax_active(self) -> bool:
        return True

    def reset_legacy_syntax(self) -> None:
        self._statements.append(
            'if vim.fn.exists("syntax_on") == 1 then\n'
            f'{_INDENT}{_INDENT}vim.cmd("syntax reset")\n'
            f"{_INDENT}end"
        )

    def set_active_theme_name(self, name: str) -> None:
        self._statements.append(f"vim.g.colors_name = {_lua_string(name)}")

    @property
    def statements(self) -> List[str]:
        return list(self._statements)

    def render(self) -> str:
        lines = [f"-- {line}" if line else "--" for line in self._header]
        if lines:
            lines.append("")
        lines.append("local M = {}")
        lines.append("")
        lines.append("function M.setup()")
        lines.extend(f"{_INDENT}{statement}" for statement in self._statements)
        lines.append("end")
        lines.append("")
        lines.append("M.setup()")
        lines.append("")
        lines.append("return M")
        return "\n".join(lines) + "\n"


def render_lua(theme: Theme, *, use_links: bool = True) -> str:
    """Render ``theme`` as a colorscheme module loadable with ``:colorscheme``."""

    from ..theme.activation import ThemeActivator

    header = [
        f"File: colors/{theme.name}.lua",
        f"Neovim Colorscheme: {theme.title}",
        f"Version: {theme.version}",
    ]
    if theme.description:
        header.append(f"Description: {theme.description}")
    header.append("Generated by matte-themes.")
    host = LuaScriptHost(header=header)
    ThemeActivator(host, use_links=use_links).activate(theme, strict=True)
    return host.render()
