"""Theme registry and file import/export helpers."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Set

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .builtin import build_builtin_themes
from .errors import NotFoundError
from .models import Theme

LOGGER = logging.getLogger(__name__)

EXPORT_FORMATS: tuple[str, ...] = ("json", "yaml", "lua")
_SUFFIX_FORMATS: Mapping[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".lua": "lua",
}


def _normalize_name(name: str) -> str:
    return (name or "").strip().lower()


def _format_for_path(path: Path, explicit: str | None) -> str:
    if explicit:
        fmt = explicit.strip().lower()
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported theme format '{explicit}'")
        return fmt
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise ValueError(f"Cannot infer theme format from '{path.name}'")
    return fmt


def render_theme(theme: Theme, fmt: str, *, use_links: bool = True) -> str:
    """Serialize ``theme`` as ``json``, ``yaml`` or a Lua colorscheme."""

    fmt = fmt.strip().lower()
    if fmt == "json":
        return theme.to_json() + "\n"
    if fmt == "yaml":
        yaml = YAML(typ="safe")
        yaml.default_flow_style = False
        buffer = io.StringIO()
        yaml.dump(theme.to_dict(), buffer)
        return buffer.getvalue()
    if fmt == "lua":
        from ..hosts.lua import render_lua

        return render_lua(theme, use_links=use_links)
    raise ValueError(f"Unsupported theme format '{fmt}'")


class ThemeManager:
    """Registry that resolves and serializes themes by name."""

    def __init__(self, themes: Iterable[Theme] | None = None, *, default_name: str = "matte") -> None:
        self._themes: Dict[str, Theme] = {}
        self._default_name = _normalize_name(default_name)
        for theme in themes if themes is not None else build_builtin_themes():
            self.register(theme)
        if self._themes and self._default_name not in self._themes:
            self._default_name = next(iter(self._themes))

    def register(self, theme: Theme, *, overwrite: bool = True) -> None:
        key = _normalize_name(theme.name)
        if not overwrite and key in self._themes:
            raise ValueError(f"Theme '{theme.name}' already registered")
        if key in self._themes:
            LOGGER.debug("Replacing registered theme '%s'", key)
        self._themes[key] = theme

    def list_themes(self) -> Set[str]:
        return set(self._themes)

    def get_theme(self, name: str) -> Theme:
        key = _normalize_name(name)
        try:
            return self._themes[key]
        except KeyError:
            raise NotFoundError(name, self._themes) from None

    def available(self) -> List[Theme]:
        return [self._themes[name] for name in sorted(self._themes)]

    def available_names(self) -> List[str]:
        return [theme.name for theme in self.available()]

    def resolve(self, theme: Theme | str | None = None) -> Theme:
        if isinstance(theme, Theme):
            return theme
        return self.get_theme(theme or self._default_name)

    def default(self) -> Theme:
        return self.get_theme(self._default_name)

    def set_default(self, theme_name: str) -> None:
        key = _normalize_name(theme_name)
        if key not in self._themes:
            raise NotFoundError(theme_name, self._themes)
        self._default_name = key

    def export_theme(
        self,
        theme: Theme | str | None,
        destination: str | Path,
        *,
        fmt: str | None = None,
        use_links: bool = True,
    ) -> Path:
        resolved = self.resolve(theme)
        path = Path(destination)
        body = render_theme(resolved, _format_for_path(path, fmt), use_links=use_links)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        LOGGER.info("Exported theme '%s' to %s", resolved.name, path)
        return path

    def import_theme(self, source: str | Path, *, activate: bool = False) -> Theme:
        path = Path(source)
        fmt = _format_for_path(path, None)
        text = path.read_text(encoding="utf-8")
        payload: Any
        if fmt == "json":
            payload = json.loads(text)
        elif fmt == "yaml":
            try:
                payload = YAML(typ="safe").load(text)
            except YAMLError as exc:
                raise ValueError(f"Theme file {path.name} is not valid YAML: {exc}") from exc
        else:
            raise ValueError("Lua colorschemes cannot be imported")
        if not isinstance(payload, Mapping):
            raise ValueError("Theme file must contain an object at its root")
        theme = Theme.from_dict(payload)
        self.register(theme)
        if activate:
            self.set_default(theme.name)
        LOGGER.info("Imported theme '%s' from %s", theme.name, path)
        return theme


theme_manager = ThemeManager()


def list_themes() -> Set[str]:
    return theme_manager.list_themes()


def get_theme(name: str) -> Theme:
    return theme_manager.get_theme(name)


def load_theme(theme: Theme | str | None = None) -> Theme:
    return theme_manager.resolve(theme)


def available_themes() -> List[str]:
    return theme_manager.available_names()


__all__ = [
    "EXPORT_FORMATS",
    "ThemeManager",
    "available_themes",
    "get_theme",
    "list_themes",
    "load_theme",
    "render_theme",
    "theme_manager",
]
