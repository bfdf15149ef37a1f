"""Factories for the themes bundled with the package."""

from __future__ import annotations

from typing import List

from .groups import abanoub_groups, matte_groups
from .models import Theme
from .palettes import ABANOUB_PALETTE, MATTE_PALETTE, MATTE_VIBRANT_PALETTE

__all__ = [
    "build_abanoub_theme",
    "build_builtin_themes",
    "build_matte_theme",
    "build_matte_vibrant_theme",
]


def build_matte_theme() -> Theme:
    return Theme.from_definitions(
        name="matte",
        title="Matte",
        description=(
            "Dark, high-contrast scheme with matte olive greens, earthy browns, "
            "and warm orange accents."
        ),
        version="1.0.1",
        palette=MATTE_PALETTE,
        definitions=matte_groups(MATTE_PALETTE),
        metadata={"appearance": "dark"},
    )


def build_matte_vibrant_theme() -> Theme:
    return Theme.from_definitions(
        name="matte_vibrant",
        title="Matte Vibrant",
        description="Matte with brighter accents and deeper backgrounds for extra contrast.",
        version="1.0.2",
        palette=MATTE_VIBRANT_PALETTE,
        definitions=matte_groups(MATTE_VIBRANT_PALETTE),
        metadata={"appearance": "dark"},
    )


def build_abanoub_theme() -> Theme:
    return Theme.from_definitions(
        name="abanoub",
        title="Abanoub",
        description=(
            "Saturated colors on a deep black background, with extra Tree-sitter "
            "captures for Go, PHP, Lua, shell, JSON and YAML."
        ),
        version="1.0.0",
        palette=ABANOUB_PALETTE,
        definitions=abanoub_groups(ABANOUB_PALETTE),
        metadata={"appearance": "dark"},
    )


def build_builtin_themes() -> List[Theme]:
    return [build_matte_theme(), build_matte_vibrant_theme(), build_abanoub_theme()]
