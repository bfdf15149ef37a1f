"""Link resolution and consistency checks for highlight-group tables."""

from __future__ import annotations

from typing import Dict, List, Mapping

from .errors import AliasCycleError, DanglingAliasError, ThemeDefinitionError
from .models import GroupSpec, Link, StyleRecord, Theme, is_valid_color

__all__ = ["follow_link", "resolve_groups", "validate_theme"]


def follow_link(group: str, definitions: Mapping[str, GroupSpec]) -> StyleRecord:
    """Return the style ``group`` ends up with after following every link."""

    if group not in definitions:
        raise KeyError(group)
    chain = [group]
    current = definitions[group]
    while isinstance(current, Link):
        target = current.target
        if target not in definitions:
            raise DanglingAliasError(chain[-1], target)
        if target in chain:
            raise AliasCycleError([*chain, target])
        chain.append(target)
        current = definitions[target]
    if not isinstance(current, StyleRecord):
        raise ThemeDefinitionError(f"Group '{chain[-1]}' has unsupported definition {current!r}")
    return current


def resolve_groups(definitions: Mapping[str, GroupSpec]) -> Dict[str, StyleRecord]:
    """Copy link targets into their aliases, preserving declaration order."""

    return {group: follow_link(group, definitions) for group in definitions}


def validate_theme(theme: Theme) -> List[str]:
    """Return human readable problems found in ``theme`` (empty when consistent)."""

    problems: List[str] = []
    for role, value in theme.palette.items():
        if not is_valid_color(value):
            problems.append(f"palette role '{role}' has malformed color {value!r}")
    for group, record in theme.groups.items():
        for label, value in (
            ("foreground", record.foreground),
            ("background", record.background),
            ("special", record.special),
        ):
            if not is_valid_color(value):
                problems.append(f"group '{group}' has malformed {label} {value!r}")
    try:
        definitions = theme.definitions()
        for group in theme.links:
            resolved = follow_link(group, definitions)
            if resolved != theme.groups[group]:
                problems.append(f"group '{group}' is out of sync with its link target")
    except ThemeDefinitionError as exc:
        problems.append(str(exc))
    return problems
