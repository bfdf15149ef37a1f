"""Exception hierarchy shared by the theme registry, resolver, and hosts."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = [
    "AliasCycleError",
    "DanglingAliasError",
    "GroupRejectedError",
    "HostUnavailableError",
    "NotFoundError",
    "PartialApplyError",
    "ThemeDefinitionError",
    "ThemeError",
]


class ThemeError(Exception):
    """Base class for every error raised by :mod:`matte_themes`."""


class NotFoundError(ThemeError, KeyError):
    """Raised when a theme name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        choices = ", ".join(self.available) or "none"
        return f"Unknown theme '{self.name}' (available: {choices})"


class HostUnavailableError(ThemeError):
    """Raised when the styling surface handle cannot accept highlights."""


class GroupRejectedError(ThemeError):
    """Raised by a host when it refuses a single highlight group."""

    def __init__(self, group: str, reason: str = "rejected by host") -> None:
        self.group = group
        self.reason = reason
        super().__init__(f"{group}: {reason}")


class PartialApplyError(ThemeError):
    """One or more groups were rejected while the rest of the theme applied."""

    def __init__(self, theme_name: str, failed_groups: Sequence[str]) -> None:
        self.theme_name = theme_name
        self.failed_groups = list(failed_groups)
        super().__init__(
            f"Theme '{theme_name}' applied with {len(self.failed_groups)} rejected group(s): "
            + ", ".join(self.failed_groups)
        )


class ThemeDefinitionError(ThemeError, ValueError):
    """A group table is internally inconsistent."""


class DanglingAliasError(ThemeDefinitionError):
    def __init__(self, group: str, target: str) -> None:
        self.group = group
        self.target = target
        super().__init__(f"Group '{group}' links to undefined group '{target}'")


class AliasCycleError(ThemeDefinitionError):
    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = list(chain)
        super().__init__("Link cycle detected: " + " -> ".join(self.chain))
