"""Pushes a resolved theme onto a host styling surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from .errors import GroupRejectedError, HostUnavailableError, PartialApplyError
from .models import Theme

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..hosts.base import HighlightHost
    from .manager import ThemeManager

__all__ = ["ActivationState", "ApplyReport", "ThemeActivator", "apply_theme"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ActivationState:
    """Active theme name shared with introspection code.

    Set on every activation and overwritten by the next one; never cleared.
    """

    active_theme: str | None = None
    activations: int = 0

    def record(self, name: str) -> None:
        self.active_theme = name
        self.activations += 1


@dataclass(slots=True)
class ApplyReport:
    """Outcome of a single activation pass."""

    theme_name: str
    host_name: str
    applied: List[str] = field(default_factory=list)
    linked: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    legacy_syntax_reset: bool = False

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        if self.failed:
            raise PartialApplyError(self.theme_name, sorted(self.failed))


class ThemeActivator:
    """Clears a host and applies a theme in one linear pass.

    With ``use_links`` the theme's declared aliases are sent as links instead of
    copies of the resolved style, for hosts that keep links live.
    """

    def __init__(
        self,
        host: HighlightHost | None,
        *,
        state: ActivationState | None = None,
        use_links: bool = False,
    ) -> None:
        self._host = host
        self._state = state if state is not None else ActivationState()
        self._use_links = use_links

    @property
    def state(self) -> ActivationState:
        return self._state

    def activate(self, theme: Theme, *, strict: bool = False) -> ApplyReport:
        host = self._require_host()
        host_name = getattr(host, "name", type(host).__name__)
        LOGGER.debug("Activating theme '%s' on %s host", theme.name, host_name)

        report = ApplyReport(theme_name=theme.name, host_name=host_name)
        host.clear_all_highlights()
        if host.is_legacy_syntax_active():
            host.reset_legacy_syntax()
            report.legacy_syntax_reset = True
        host.enable_true_color()
        self._state.record(theme.name)
        host.set_active_theme_name(theme.name)

        for group, record in theme.groups.items():
            target = theme.links.get(group) if self._use_links else None
            try:
                if target is not None:
                    host.link_highlight(group, target)
                    report.linked.append(group)
                else:
                    host.set_highlight(group, record)
                    report.applied.append(group)
            except GroupRejectedError as exc:
                report.failed[group] = exc.reason

        if report.failed:
            LOGGER.warning(
                "Theme '%s' applied with %d rejected group(s): %s",
                theme.name,
                len(report.failed),
                ", ".join(sorted(report.failed)),
            )
        else:
            LOGGER.info(
                "Theme '%s' applied to %s host (%d groups)",
                theme.name,
                host_name,
                len(report.applied) + len(report.linked),
            )
        if strict:
            report.raise_for_failures()
        return report

    def activate_by_name(self, name: str, manager: ThemeManager, *, strict: bool = False) -> ApplyReport:
        """Resolve ``name`` through ``manager`` before touching the host."""

        theme = manager.get_theme(name)
        return self.activate(theme, strict=strict)

    def _require_host(self) -> HighlightHost:
        host = self._host
        if host is None:
            raise HostUnavailableError("No styling surface handle was provided")
        if not host.is_available():
            raise HostUnavailableError(f"Styling surface '{getattr(host, 'name', host)}' is unavailable")
        return host


def apply_theme(
    theme: Theme,
    host: HighlightHost | None,
    *,
    state: ActivationState | None = None,
    use_links: bool = False,
    strict: bool = False,
) -> ApplyReport:
    """Convenience wrapper around :class:`ThemeActivator`."""

    return ThemeActivator(host, state=state, use_links=use_links).activate(theme, strict=strict)
