"""Theme module consolidating palette data, group tables, and the registry."""

from .activation import ActivationState, ApplyReport, ThemeActivator, apply_theme
from .builtin import build_abanoub_theme, build_builtin_themes, build_matte_theme, build_matte_vibrant_theme
from .errors import (
    AliasCycleError,
    DanglingAliasError,
    GroupRejectedError,
    HostUnavailableError,
    NotFoundError,
    PartialApplyError,
    ThemeDefinitionError,
    ThemeError,
)
from .manager import ThemeManager, available_themes, get_theme, list_themes, load_theme, theme_manager
from .models import Attribute, Link, Palette, StyleRecord, Theme, normalize_color, style
from .resolver import resolve_groups, validate_theme

__all__ = [
    "ActivationState",
    "AliasCycleError",
    "ApplyReport",
    "Attribute",
    "DanglingAliasError",
    "GroupRejectedError",
    "HostUnavailableError",
    "Link",
    "NotFoundError",
    "Palette",
    "PartialApplyError",
    "StyleRecord",
    "Theme",
    "ThemeActivator",
    "ThemeDefinitionError",
    "ThemeError",
    "ThemeManager",
    "apply_theme",
    "available_themes",
    "build_abanoub_theme",
    "build_builtin_themes",
    "build_matte_theme",
    "build_matte_vibrant_theme",
    "get_theme",
    "list_themes",
    "load_theme",
    "normalize_color",
    "resolve_groups",
    "style",
    "theme_manager",
    "validate_theme",
]
