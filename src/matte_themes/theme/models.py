"""Data structures describing palettes, highlight styles, and themes."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Sequence, Union

Color = Union[str, None]
PaletteLike = Mapping[str, Any] | Sequence[tuple[str, Any]]

_HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")
_NONE_NAMES = {"", "none"}


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def _rgb_to_hex(channels: Sequence[int]) -> str:
    return "#" + "".join(f"{component:02X}" for component in channels)


def normalize_color(value: Any) -> Color:
    """Convert ``value`` into ``#RRGGBB`` or ``None`` (inherit the host default)."""

    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        if text.lower() in _NONE_NAMES:
            return None
        if text.startswith("#"):
            text = text[1:]
        if "," in text:
            parts = [part.strip() for part in text.split(",") if part.strip()]
            if len(parts) != 3:
                raise ValueError(f"Color '{value}' must have exactly 3 components")
            return _rgb_to_hex([_clamp_channel(int(part, 0)) for part in parts])
        if len(text) in (3, 6):
            if len(text) == 3:
                text = "".join(ch * 2 for ch in text)
            try:
                channels = [int(text[i : i + 2], 16) for i in range(0, 6, 2)]
            except ValueError:
                raise ValueError(f"Unsupported color format: {value!r}") from None
            return _rgb_to_hex(channels)
        raise ValueError(f"Unsupported color format: {value!r}")

    if isinstance(value, Sequence):
        items = list(value)
        if len(items) != 3:
            raise ValueError(f"RGB sequences must contain 3 values, received {value!r}")
        return _rgb_to_hex([_clamp_channel(component) for component in items])

    raise TypeError(f"Cannot convert {type(value)!r} to a color")


def is_valid_color(value: Any) -> bool:
    """Return ``True`` when ``value`` is already ``None`` or a normalized ``#RRGGBB``."""

    return value is None or (isinstance(value, str) and bool(_HEX_PATTERN.match(value)))


class Attribute(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    REVERSE = "reverse"
    UNDERCURL = "undercurl"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True, slots=True)
class StyleRecord:
    """Colors and text attributes for one highlight group.

    ``None`` colors leave the host default in place. ``special`` is the color of
    underlines and undercurls.
    """

    foreground: Color = None
    background: Color = None
    special: Color = None
    attributes: frozenset[Attribute] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "foreground", normalize_color(self.foreground))
        object.__setattr__(self, "background", normalize_color(self.background))
        object.__setattr__(self, "special", normalize_color(self.special))
        object.__setattr__(self, "attributes", frozenset(Attribute(attr) for attr in self.attributes))

    def has(self, attribute: Attribute | str) -> bool:
        return Attribute(attribute) in self.attributes

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``nvim_set_hl`` shaped payload (absent keys inherit)."""

        payload: Dict[str, Any] = {}
        if self.foreground is not None:
            payload["fg"] = self.foreground
        if self.background is not None:
            payload["bg"] = self.background
        if self.special is not None:
            payload["sp"] = self.special
        for attribute in Attribute:
            if attribute in self.attributes:
                payload[attribute.value] = True
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], palette: Palette | None = None) -> "StyleRecord":
        def _color(key: str) -> Color:
            raw = payload.get(key)
            if palette is not None and isinstance(raw, str) and raw in palette:
                return palette[raw]
            return normalize_color(raw)

        unknown = set(payload) - {"fg", "bg", "sp"} - {attr.value for attr in Attribute}
        if unknown:
            raise ValueError(f"Unsupported style keys: {', '.join(sorted(unknown))}")
        attributes = frozenset(attr for attr in Attribute if payload.get(attr.value))
        return cls(
            foreground=_color("fg"),
            background=_color("bg"),
            special=_color("sp"),
            attributes=attributes,
        )


@dataclass(frozen=True, slots=True)
class Link:
    """Alias definition: the group inherits ``target``'s resolved style."""

    target: str


GroupSpec = Union[StyleRecord, Link]


def style(
    foreground: Any = None,
    background: Any = None,
    *attributes: Attribute,
    special: Any = None,
) -> StyleRecord:
    """Shorthand used by the group tables."""

    return StyleRecord(foreground, background, special, frozenset(attributes))


class Palette(Mapping[str, Color]):
    """Immutable role → color mapping with attribute access (``palette.bg_dark``)."""

    __slots__ = ("name", "_colors")

    def __init__(self, name: str, colors: PaletteLike) -> None:
        items = list(colors.items()) if isinstance(colors, Mapping) else list(colors)
        normalized: Dict[str, Color] = {}
        for key, value in items:
            if key is None:
                continue
            normalized[str(key).strip().lower()] = normalize_color(value)
        self.name = name
        self._colors = MappingProxyType(normalized)

    def __getitem__(self, role: str) -> Color:
        return self._colors[role.strip().lower()]

    def __contains__(self, role: object) -> bool:
        return isinstance(role, str) and role.strip().lower() in self._colors

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getattr__(self, role: str) -> Color:
        if role.startswith("_"):
            raise AttributeError(role)
        try:
            return self._colors[role]
        except KeyError:
            raise AttributeError(f"Palette '{self.name}' has no role '{role}'") from None

    def __repr__(self) -> str:
        return f"Palette({self.name!r}, {len(self)} roles)"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Palette):
            return self.name == other.name and dict(self._colors) == dict(other._colors)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Color]:
        return dict(self._colors)


@dataclass(frozen=True, slots=True)
class Theme:
    """A named palette plus its fully resolved highlight-group map."""

    name: str
    title: str
    palette: Palette
    groups: Mapping[str, StyleRecord]
    links: Mapping[str, str] = field(default_factory=dict)
    description: str | None = None
    version: str = "1.0.0"
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __hash__(self) -> int:
        # mapping fields are unhashable; equal themes share name and version
        return hash((self.name, self.version))

    def style(self, group: str) -> StyleRecord:
        try:
            return self.groups[group]
        except KeyError:
            raise KeyError(f"Theme '{self.name}' does not define group '{group}'") from None

    def group_names(self) -> list[str]:
        return list(self.groups)

    def definitions(self) -> Dict[str, GroupSpec]:
        """Return the group table with links restored (inverse of resolution)."""

        return {
            name: Link(self.links[name]) if name in self.links else record
            for name, record in self.groups.items()
        }

    def to_dict(self) -> Dict[str, Any]:
        groups: Dict[str, Any] = {}
        for name, spec in self.definitions().items():
            groups[name] = {"link": spec.target} if isinstance(spec, Link) else spec.to_dict()
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "version": self.version,
            "metadata": dict(self.metadata),
            "palette": self.palette.to_dict(),
            "groups": groups,
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_definitions(
        cls,
        *,
        name: str,
        title: str | None = None,
        palette: Palette,
        definitions: Mapping[str, GroupSpec],
        description: str | None = None,
        version: str = "1.0.0",
        metadata: Mapping[str, Any] | None = None,
    ) -> "Theme":
        from .resolver import resolve_groups

        key = (name or "").strip().lower()
        if not key:
            raise ValueError("Theme name cannot be empty")
        resolved = resolve_groups(definitions)
        links = {group: spec.target for group, spec in definitions.items() if isinstance(spec, Link)}
        return cls(
            name=key,
            title=(title or key.replace("_", " ").title()).strip(),
            palette=palette,
            groups=MappingProxyType(resolved),
            links=MappingProxyType(links),
            description=description,
            version=version,
            metadata=MappingProxyType(dict(metadata or {})),
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Theme":
        if "name" not in payload:
            raise ValueError("Theme payload missing 'name'")
        name = str(payload["name"])
        raw_palette = payload.get("palette") or {}
        if not isinstance(raw_palette, Mapping):
            raise ValueError("Theme 'palette' must be an object")
        try:
            palette = Palette(name, raw_palette)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Theme '{name}' palette: {exc}") from exc
        raw_groups = payload.get("groups") or {}
        if not isinstance(raw_groups, Mapping):
            raise ValueError("Theme 'groups' must be an object")
        definitions: Dict[str, GroupSpec] = {}
        for group, entry in raw_groups.items():
            if not isinstance(entry, Mapping):
                raise ValueError(f"Group '{group}' must be an object")
            if "link" in entry:
                definitions[str(group)] = Link(str(entry["link"]))
                continue
            try:
                definitions[str(group)] = StyleRecord.from_dict(entry, palette)
            except (TypeError, ValueError) as exc:
                # unquoted YAML colors such as 000000 arrive as ints
                raise ValueError(f"Group '{group}': {exc}") from exc
        description = payload.get("description")
        return cls.from_definitions(
            name=name,
            title=str(payload.get("title") or name),
            palette=palette,
            definitions=definitions,
            description=str(description) if description is not None else None,
            version=str(payload.get("version") or "1.0.0"),
            metadata=dict(payload.get("metadata") or {}),
        )

    @classmethod
    def from_json(cls, text: str) -> "Theme":
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise ValueError("Theme JSON root must be an object")
        return cls.from_dict(data)


__all__ = [
    "Attribute",
    "Color",
    "GroupSpec",
    "Link",
    "Palette",
    "StyleRecord",
    "Theme",
    "is_valid_color",
    "normalize_color",
    "style",
]
