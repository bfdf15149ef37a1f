"""Interface every styling surface implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..theme.models import StyleRecord

__all__ = ["HighlightHost"]


class HighlightHost(ABC):
    """Editor-side surface that receives highlight definitions.

    Implementations may raise :class:`~matte_themes.theme.errors.GroupRejectedError`
    from :meth:`set_highlight` or :meth:`link_highlight` to refuse a single group.
    """

    name: str = "unknown"

    def is_available(self) -> bool:
        """Return ``False`` when the surface cannot currently accept highlights."""

        return True

    @abstractmethod
    def clear_all_highlights(self) -> None:
        """Drop every highlight definition the host currently holds."""

    @abstractmethod
    def set_highlight(self, group: str, style: StyleRecord) -> None:
        """Define ``group`` with ``style``, replacing any previous definition."""

    @abstractmethod
    def link_highlight(self, group: str, target: str) -> None:
        """Make ``group`` follow ``target``."""

    @abstractmethod
    def enable_true_color(self) -> None:
        """Switch the host into 24-bit color rendering."""

    @abstractmethod
    def is_legacy_syntax_active(self) -> bool:
        """Return ``True`` when regex-based syntax highlighting state is loaded."""

    @abstractmethod
    def reset_legacy_syntax(self) -> None:
        """Reset regex-based syntax highlighting to its defaults."""

    @abstractmethod
    def set_active_theme_name(self, name: str) -> None:
        """Record ``name`` in the host's active colorscheme register."""
