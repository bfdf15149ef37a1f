"""Tests for link resolution and theme validation."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from matte_themes.theme import (
    AliasCycleError,
    DanglingAliasError,
    Link,
    Palette,
    Theme,
    ThemeDefinitionError,
    resolve_groups,
    style,
    validate_theme,
)


def test_resolve_groups_copies_targets_through_chains() -> None:
    base = style("#101010", "#202020")
    definitions = {
        "C": Link("B"),
        "B": Link("A"),
        "A": base,
    }

    resolved = resolve_groups(definitions)

    assert list(resolved) == ["C", "B", "A"]
    assert resolved["A"] is base
    assert resolved["B"] == base
    assert resolved["C"] == base


def test_resolve_groups_rejects_dangling_links() -> None:
    with pytest.raises(DanglingAliasError) as excinfo:
        resolve_groups({"Directory": Link("Function")})

    assert excinfo.value.group == "Directory"
    assert excinfo.value.target == "Function"


def test_resolve_groups_detects_cycles() -> None:
    with pytest.raises(AliasCycleError) as excinfo:
        resolve_groups({"A": Link("B"), "B": Link("C"), "C": Link("A")})

    assert excinfo.value.chain == ["A", "B", "C", "A"]
    assert isinstance(excinfo.value, ThemeDefinitionError)


def test_resolve_groups_detects_self_link() -> None:
    with pytest.raises(AliasCycleError):
        resolve_groups({"A": Link("A")})


def test_validate_theme_reports_out_of_sync_and_malformed_entries() -> None:
    good = style("#FFFFFF")
    broken = Theme(
        name="broken",
        title="Broken",
        palette=Palette("broken", {}),
        groups=MappingProxyType({"Normal": good, "NormalNC": style("#000000")}),
        links=MappingProxyType({"NormalNC": "Normal"}),
    )

    problems = validate_theme(broken)

    assert problems == ["group 'NormalNC' is out of sync with its link target"]


def test_validate_theme_reports_dangling_link() -> None:
    broken = Theme(
        name="broken",
        title="Broken",
        palette=Palette("broken", {}),
        groups=MappingProxyType({"NormalNC": style("#000000")}),
        links=MappingProxyType({"NormalNC": "Normal"}),
    )

    problems = validate_theme(broken)

    assert len(problems) == 1
    assert "undefined group 'Normal'" in problems[0]
