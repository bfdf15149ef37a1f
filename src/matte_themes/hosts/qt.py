"""Host surface that turns highlight groups into Qt text formats."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..theme.models import Attribute, StyleRecord
from .base import HighlightHost

try:  # pragma: no cover - PySide6 optional in CI
    from PySide6.QtGui import QColor, QFont, QPalette, QTextCharFormat  # type: ignore[import-not-found]
except Exception:  # pragma: no cover - headless environments without Qt
    QColor = QFont = QPalette = QTextCharFormat = None  # type: ignore[assignment]

__all__ = ["QtFormatHost"]

LOGGER = logging.getLogger(__name__)


class QtFormatHost(HighlightHost):
    """Keeps one ``QTextCharFormat`` per group for syntax highlighters to consume.

    Qt always renders 24-bit colors and has no legacy syntax engine, so those
    steps only update bookkeeping.
    """

    name = "qt"

    def __init__(self) -> None:
        self._formats: Dict[str, Any] = {}
        self._styles: Dict[str, StyleRecord] = {}
        self._links: Dict[str, str] = {}
        self.true_color = False
        self.active_theme_name: str | None = None

    def is_available(self) -> bool:
        return QTextCharFormat is not None

    def clear_all_highlights(self) -> None:
        self._formats.clear()
        self._styles.clear()
        self._links.clear()

    def set_highlight(self, group: str, style: StyleRecord) -> None:
        self._links.pop(group, None)
        self._styles[group] = style
        self._formats[group] = self._build_format(style)

    def link_highlight(self, group: str, target: str) -> None:
        self._formats.pop(group, None)
        self._styles.pop(group, None)
        self._links[group] = target

    def enable_true_color(self) -> None:
        self.true_color = True

    def is_legacy_syntax_active(self) -> bool:
        return False

    def reset_legacy_syntax(self) -> None:
        LOGGER.debug("Qt host has no legacy syntax state to reset")

    def set_active_theme_name(self, name: str) -> None:
        self.active_theme_name = name

    def style_for(self, group: str) -> StyleRecord | None:
        return self._styles.get(self._follow(group))

    def format_for(self, group: str) -> Any | None:
        """Return the ``QTextCharFormat`` for ``group`` after following links."""

        return self._formats.get(self._follow(group))

    def formats(self) -> Dict[str, Any]:
        resolved: Dict[str, Any] = dict(self._formats)
        for group in self._links:
            fmt = self.format_for(group)
            if fmt is not None:
                resolved[group] = fmt
        return resolved

    def apply_palette(self, app: Any | None = None) -> bool:
        """Push ``Normal``, ``Visual`` and ``Pmenu`` colors into the application palette."""

        if QPalette is None:
            return False
        try:  # pragma: no cover - Qt optional in CI
            from PySide6.QtWidgets import QApplication  # type: ignore[import-not-found]
        except Exception:  # pragma: no cover - headless fallback
            return False
        qt_app: Any = app if app is not None else QApplication.instance()
        if qt_app is None:
            return False

        palette = QPalette()

        def _set(role: Any, group: str, attribute: str) -> None:
            record = self.style_for(group)
            value = getattr(record, attribute, None) if record is not None else None
            if value is not None:
                palette.setColor(role, QColor(value))

        roles = QPalette.ColorRole
        _set(roles.Window, "Normal", "background")
        _set(roles.WindowText, "Normal", "foreground")
        _set(roles.Base, "Normal", "background")
        _set(roles.Text, "Normal", "foreground")
        _set(roles.AlternateBase, "CursorLine", "background")
        _set(roles.Button, "Pmenu", "background")
        _set(roles.ButtonText, "Pmenu", "foreground")
        _set(roles.Highlight, "Visual", "background")
        _set(roles.Link, "Function", "foreground")
        qt_app.setPalette(palette)
        return True

    def _follow(self, group: str) -> str:
        seen: set[str] = set()
        current = group
        while current in self._links and current not in seen:
            seen.add(current)
            current = self._links[current]
        return current

    @staticmethod
    def _build_format(style: StyleRecord) -> Any:
        fmt = QTextCharFormat()
        foreground, background = style.foreground, style.background
        if style.has(Attribute.REVERSE):
            foreground, background = background, foreground
        if foreground is not None:
            fmt.setForeground(QColor(foreground))
        if background is not None:
            fmt.setBackground(QColor(background))
        if style.has(Attribute.BOLD):
            fmt.setFontWeight(QFont.Weight.Bold)
        if style.has(Attribute.ITALIC):
            fmt.setFontItalic(True)
        if style.has(Attribute.UNDERLINE):
            fmt.setFontUnderline(True)
        if style.has(Attribute.UNDERCURL):
            fmt.setUnderlineStyle(QTextCharFormat.UnderlineStyle.WaveUnderline)
        if style.has(Attribute.STRIKETHROUGH):
            fmt.setFontStrikeOut(True)
        if style.special is not None:
            fmt.setUnderlineColor(QColor(style.special))
        return fmt
