"""Host surface that keeps highlight state in plain dictionaries."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from ..theme.errors import GroupRejectedError
from ..theme.models import StyleRecord
from .base import HighlightHost

__all__ = ["InMemoryHost"]


class InMemoryHost(HighlightHost):
    """Records highlights the way an editor session would hold them.

    ``rejected_groups`` lists names the host refuses, which is how an editor with a
    restricted group namespace behaves. ``calls`` keeps the ordered method log.
    """

    name = "memory"

    def __init__(
        self,
        *,
        rejected_groups: Iterable[str] = (),
        legacy_syntax_active: bool = False,
        available: bool = True,
    ) -> None:
        self.highlights: Dict[str, StyleRecord] = {}
        self.links: Dict[str, str] = {}
        self.true_color = False
        self.legacy_syntax_active = legacy_syntax_active
        self.active_theme_name: str | None = None
        self.rejected_groups = set(rejected_groups)
        self.available = available
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def is_available(self) -> bool:
        return self.available

    def clear_all_highlights(self) -> None:
        self.calls.append(("clear_all_highlights", ()))
        self.highlights.clear()
        self.links.clear()

    def set_highlight(self, group: str, style: StyleRecord) -> None:
        self.calls.append(("set_highlight", (group, style)))
        if group in self.rejected_groups:
            raise GroupRejectedError(group, "group name not accepted")
        self.links.pop(group, None)
        self.highlights[group] = style

    def link_highlight(self, group: str, target: str) -> None:
        self.calls.append(("link_highlight", (group, target)))
        if group in self.rejected_groups:
            raise GroupRejectedError(group, "group name not accepted")
        self.highlights.pop(group, None)
        self.links[group] = target

    def enable_true_color(self) -> None:
        self.calls.append(("enable_true_color", ()))
        self.true_color = True

    def is_legacy_syntax_active(self) -> bool:
        return self.legacy_syntax_active

    def reset_legacy_syntax(self) -> None:
        self.calls.append(("reset_legacy_syntax", ()))
        self.legacy_syntax_active = False

    def set_active_theme_name(self, name: str) -> None:
        self.calls.append(("set_active_theme_name", (name,)))
        self.active_theme_name = name

    def resolve(self, group: str) -> StyleRecord | None:
        """Return the effective style of ``group``, following links like an editor does."""

        seen: set[str] = set()
        current = group
        while current in self.links:
            if current in seen:
                return None
            seen.add(current)
            current = self.links[current]
        return self.highlights.get(current)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "highlights": dict(self.highlights),
            "links": dict(self.links),
            "true_color": self.true_color,
            "legacy_syntax_active": self.legacy_syntax_active,
            "active_theme_name": self.active_theme_name,
        }
