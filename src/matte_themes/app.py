"""Command line entry point for inspecting, validating, and exporting themes."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, TextIO, get_args, get_origin, get_type_hints

from .services.settings import Settings, SettingsStore
from .theme.errors import NotFoundError, ThemeError
from .theme.manager import EXPORT_FORMATS, ThemeManager, render_theme
from .theme.resolver import validate_theme
from .utils import logging as logging_utils

_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}
_LOGGER = logging.getLogger(__name__)


def configure_logging(debug: bool = False, *, log_file: bool = True) -> None:
    """Configure logging; the console only shows warnings unless debugging."""

    level = logging.DEBUG if debug else logging.INFO
    console_level = logging.DEBUG if debug else logging.WARNING
    logging_utils.setup_logging(level, console_level=console_level, log_file=log_file)
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(level))


def load_settings(
    path: Optional[Path] = None,
    *,
    store: SettingsStore | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load persisted settings or fall back to defaults."""

    active_store = store or SettingsStore(path)
    try:
        settings = active_store.load(overrides=overrides)
    except OSError as exc:
        _LOGGER.warning("Failed to load settings from %s: %s", active_store.path, exc)
        settings = Settings()
    return settings


def build_manager(settings: Settings) -> ThemeManager:
    """Return a registry holding the bundled themes plus any user theme files."""

    manager = ThemeManager()
    for entry in settings.theme_paths:
        path = Path(entry).expanduser()
        try:
            manager.import_theme(path)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Skipping theme file %s: %s", path, exc)
    return manager


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point invoked by the `matte-themes` console script."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    debug = args.debug or _env_flag("MATTE_THEMES_DEBUG", default=False)
    configure_logging(debug, log_file=not args.no_log_file)

    settings_path = args.settings_path or os.environ.get("MATTE_THEMES_SETTINGS_PATH")
    resolved_path = Path(settings_path).expanduser() if settings_path else None
    settings_store = SettingsStore(resolved_path)
    try:
        cli_overrides = _coerce_cli_overrides(args.overrides or [])
    except ValueError as exc:
        print(f"Invalid --set override: {exc}", file=sys.stderr)
        return 2

    settings = load_settings(resolved_path, store=settings_store, overrides=cli_overrides or None)
    if settings.debug_logging and not debug:
        configure_logging(True, log_file=not args.no_log_file)

    if args.dump_settings:
        _dump_settings(settings, settings_store, overrides=cli_overrides)
        return 0

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    manager = build_manager(settings)
    handler = _COMMANDS[args.command]
    try:
        return handler(args, settings, manager)
    except NotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ThemeError as exc:
        _LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _cmd_list(args: argparse.Namespace, settings: Settings, manager: ThemeManager) -> int:
    selected = settings.theme.strip().lower()
    for theme in manager.available():
        marker = "*" if theme.name == selected else " "
        print(f"{marker} {theme.name:<16} {theme.title} ({len(theme.groups)} groups)")
    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings, manager: ThemeManager) -> int:
    theme = manager.get_theme(args.name or settings.theme)
    if args.group:
        try:
            record = theme.style(args.group)
        except KeyError as exc:
            print(exc.args[0], file=sys.stderr)
            return 1
        payload: Dict[str, Any] = {"group": args.group, **record.to_dict()}
        if args.group in theme.links:
            payload["link"] = theme.links[args.group]
    else:
        payload = theme.to_dict()
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _cmd_export(args: argparse.Namespace, settings: Settings, manager: ThemeManager) -> int:
    theme = manager.get_theme(args.name or settings.theme)
    fmt = args.format
    output: Path | None = args.output
    use_links = settings.use_links and not args.resolve_links
    if output is None and settings.export_dir and fmt == "lua":
        output = Path(settings.export_dir).expanduser() / "colors" / f"{theme.name}.lua"
    if output is None:
        sys.stdout.write(render_theme(theme, fmt, use_links=use_links))
        return 0
    manager.export_theme(theme, output, fmt=fmt, use_links=use_links)
    print(str(output))
    return 0


def _cmd_check(args: argparse.Namespace, settings: Settings, manager: ThemeManager) -> int:
    failures = 0
    for theme in manager.available():
        problems = validate_theme(theme)
        if problems:
            failures += 1
            for problem in problems:
                print(f"{theme.name}: {problem}", file=sys.stderr)
        else:
            print(f"{theme.name}: ok ({len(theme.groups)} groups, {len(theme.links)} links)")
    if failures:
        _LOGGER.warning("%d theme(s) failed validation", failures)
        return 1
    return 0


_COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "export": _cmd_export,
    "check": _cmd_check,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matte-themes",
        description="Inspect, validate, and export the matte editor color themes.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on the console.")
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write ~/.matte_themes/logs/matte-themes.log for this run.",
    )
    parser.add_argument(
        "--dump-settings",
        action="store_true",
        help="Print the effective settings payload and exit.",
    )
    parser.add_argument(
        "--settings-path",
        metavar="PATH",
        help="Override the default ~/.matte_themes/settings.json path.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Override persisted settings for this invocation (repeatable).",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List registered themes.")

    show = subparsers.add_parser("show", help="Print a theme or a single group as JSON.")
    show.add_argument("name", nargs="?", help="Theme name (defaults to the configured theme).")
    show.add_argument("--group", help="Only print this highlight group.")

    export = subparsers.add_parser("export", help="Write a theme as Lua, JSON or YAML.")
    export.add_argument("name", nargs="?", help="Theme name (defaults to the configured theme).")
    export.add_argument("--format", choices=EXPORT_FORMATS, default="lua", help="Output format")
    export.add_argument("--output", type=Path, default=None, help="Output file (defaults to stdout)")
    export.add_argument(
        "--resolve-links",
        action="store_true",
        help="Write linked groups as copies of their target's style.",
    )

    subparsers.add_parser("check", help="Validate every registered theme.")
    return parser


def _env_flag(name: str, *, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _coerce_cli_overrides(items: Sequence[str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if not items:
        return overrides

    fields = Settings.__dataclass_fields__  # type: ignore[attr-defined]
    type_hints = get_type_hints(Settings)
    for entry in items:
        if "=" not in entry:
            raise ValueError(f"Override '{entry}' must use KEY=VALUE syntax.")
        key, raw_value = entry.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Override is missing a field name.")
        if key not in fields:
            raise ValueError(f"Unknown setting '{key}'.")
        annotation = type_hints.get(key, fields[key].type)
        overrides[key] = _coerce_value(annotation, raw_value.strip())
    return overrides


def _coerce_value(annotation: Any, raw_value: str) -> Any:
    target = _resolve_annotation(annotation)
    normalized = raw_value.strip()

    if target is str or target is Any:
        return normalized
    if target is bool:
        return _parse_bool(normalized)
    if target is list:
        try:
            return json.loads(normalized or "[]")
        except json.JSONDecodeError as exc:
            raise ValueError("List overrides must be valid JSON arrays") from exc
    return normalized


def _resolve_annotation(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is None:
        return annotation
    if origin is list:
        return origin
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    if not args:
        return origin
    return args[0]


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot coerce '{value}' to a boolean.")


def _dump_settings(
    settings: Settings,
    store: SettingsStore,
    *,
    overrides: Mapping[str, Any],
    stream: TextIO | None = None,
) -> None:
    destination = stream or sys.stdout
    metadata = {
        "path": str(store.path),
        "cli_overrides": sorted(overrides.keys()),
        "environment_variables": _active_env_overrides(),
    }
    output = {"settings": asdict(settings), "meta": metadata}
    json.dump(output, destination, indent=2)
    destination.write("\n")


def _active_env_overrides() -> list[str]:
    return sorted(name for name in os.environ if name.startswith("MATTE_"))


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
