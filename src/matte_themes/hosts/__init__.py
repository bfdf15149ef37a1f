"""Styling surfaces a theme can be applied to."""

from .base import HighlightHost
from .lua import LuaScriptHost, render_lua
from .memory import InMemoryHost
from .qt import QtFormatHost

__all__ = ["HighlightHost", "InMemoryHost", "LuaScriptHost", "QtFormatHost", "render_lua"]
