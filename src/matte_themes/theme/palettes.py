"""Base colors for the bundled themes."""

from __future__ import annotations

from .models import Palette

__all__ = ["ABANOUB_PALETTE", "MATTE_PALETTE", "MATTE_VIBRANT_PALETTE"]

# Matte: olive greens, earthy browns and warm orange accents on a near-black base.
MATTE_PALETTE = Palette(
    "matte",
    {
        "bg_dark": "#1A1A1A",
        "bg_medium": "#252525",
        "bg_light": "#333333",
        "fg_light": "#F0F0F0",
        "fg_medium": "#D0D0D0",
        "brown_dark": "#5C4033",
        "brown_medium": "#8B6F4F",
        "brown_light": "#B88E6D",
        "olive_dark": "#4F5D3D",
        "olive_medium": "#7B8C6C",
        "olive_light": "#A9B49C",
        "orange_vibrant": "#FFA500",
        "orange_muted": "#C28B00",
        "orange_light": "#FFD700",
        "red_error": "#DC143C",
        "purple_muted": "#8A2BE2",
        "cyan_muted": "#008B8B",
        "blue_muted": "#4682B4",
        "comment_color": "#6A737D",
        "selection_bg": "#3A4045",
        "line_nr_fg": "#6A737D",
        "line_nr_bg": "NONE",
        "cursor_line_bg": "#2A2A2A",
        "match_highlight": "#4F5D3D",
        "error_sign": "#DC143C",
        "warning_sign": "#FFD700",
        "info_sign": "#4682B4",
        "hint_sign": "#8B6F4F",
    },
)

# Same roles as matte, pushed toward roughly 80% more contrast.
MATTE_VIBRANT_PALETTE = Palette(
    "matte_vibrant",
    {
        "bg_dark": "#111111",
        "bg_medium": "#1E1E1E",
        "bg_light": "#2A2A2A",
        "fg_light": "#FFFFFF",
        "fg_medium": "#E0E0E0",
        "brown_dark": "#7A5A4A",
        "brown_medium": "#A58565",
        "brown_light": "#D0A07A",
        "olive_dark": "#6F8A5F",
        "olive_medium": "#9BC28A",
        "olive_light": "#C8E0BB",
        "orange_vibrant": "#FFB800",
        "orange_muted": "#E6A200",
        "orange_light": "#FFFF00",
        "red_error": "#FF3333",
        "purple_muted": "#A055FF",
        "cyan_muted": "#00B8B8",
        "blue_muted": "#6495ED",
        "comment_color": "#808080",
        "selection_bg": "#4A4A4A",
        "line_nr_fg": "#A0A0A0",
        "line_nr_bg": "NONE",
        "cursor_line_bg": "#2E2E2E",
        "match_highlight": "#6F8A5F",
        "error_sign": "#FF3333",
        "warning_sign": "#FFFF00",
        "info_sign": "#6495ED",
        "hint_sign": "#D0A07A",
    },
)

# Saturated accents on absolute black, aiming for a 10:1 luminance ratio or better.
ABANOUB_PALETTE = Palette(
    "abanoub",
    {
        "bg_deep_black": "#000000",
        "bg_darker_ui": "#0A0A0A",
        "bg_medium_ui": "#1C1C1C",
        "fg_white": "#FFFFFF",
        "fg_light_gray": "#E6E6E6",
        "vibrant_red": "#FF6666",
        "vibrant_orange": "#FFB366",
        "vibrant_yellow": "#FFFF66",
        "vibrant_green": "#66FF66",
        "vibrant_cyan": "#66FFFF",
        "vibrant_blue": "#66B3FF",
        "vibrant_magenta": "#FF66FF",
        "vibrant_purple": "#CC99FF",
        "comment_gray": "#7A7A7A",
        "dim_gray": "#505050",
        "selection_bg": "#2F2F2F",
        "diag_error": "#FF0000",
        "diag_warning": "#FFD700",
        "diag_info": "#00BFFF",
        "diag_hint": "#9ACD32",
    },
)
