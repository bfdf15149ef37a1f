"""Highlight-group tables derived from a palette.

Each function returns an ordered ``{group: StyleRecord | Link}`` mapping. Group
names follow the Neovim taxonomy: built-in UI groups, legacy Vim syntax groups,
Tree-sitter captures (``@...``), and the groups of common plugins.
"""

from __future__ import annotations

from typing import Dict

from .models import Attribute, GroupSpec, Link, Palette, style

__all__ = ["LINKED_GROUPS", "abanoub_groups", "matte_groups"]

BOLD = Attribute.BOLD
ITALIC = Attribute.ITALIC
UNDERLINE = Attribute.UNDERLINE
REVERSE = Attribute.REVERSE
UNDERCURL = Attribute.UNDERCURL

# Shared by every theme; appended after the styled groups.
LINKED_GROUPS: Dict[str, str] = {
    "CursorColumn": "CursorLine",
    "QuickFixLine": "Visual",
    "Directory": "Function",
    "DiffAdd": "GitSignsAdd",
    "DiffChange": "GitSignsChange",
    "DiffDelete": "GitSignsDelete",
    "DiagnosticVirtualText": "Comment",
    # Current sign names share the legacy LSP sign styles.
    "DiagnosticSignError": "LspDiagnosticsSignError",
    "DiagnosticSignWarn": "LspDiagnosticsSignWarning",
    "DiagnosticSignInfo": "LspDiagnosticsSignInformation",
    "DiagnosticSignHint": "LspDiagnosticsSignHint",
}


def _with_links(groups: Dict[str, GroupSpec]) -> Dict[str, GroupSpec]:
    for group, target in LINKED_GROUPS.items():
        groups[group] = Link(target)
    return groups


def matte_groups(p: Palette) -> Dict[str, GroupSpec]:
    """Group table used by ``matte`` and ``matte_vibrant``."""

    return _with_links(
        {
            # Core UI
            "Normal": style(p.fg_light, p.bg_dark),
            "NormalNC": style(p.fg_light, p.bg_dark),
            "NormalFloat": style(p.fg_light, p.bg_medium),
            "FloatBorder": style(p.brown_medium, p.bg_medium),
            "Folded": style(p.comment_color, p.bg_medium, ITALIC),
            "SignColumn": style(p.fg_light, p.bg_dark),
            "VertSplit": style(p.brown_dark, p.bg_dark),
            "LineNr": style(p.line_nr_fg, p.line_nr_bg),
            "CursorLineNr": style(p.brown_medium, p.cursor_line_bg, BOLD),
            "CursorLine": style(None, p.cursor_line_bg),
            "MatchParen": style(p.orange_light, p.bg_medium, BOLD),
            # Selection and search
            "Visual": style(None, p.selection_bg, REVERSE),
            "IncSearch": style(p.bg_dark, p.orange_light),
            "Search": style(p.bg_dark, p.orange_muted),
            # Status line
            "StatusLine": style(p.fg_light, p.bg_medium, BOLD),
            "StatusLineNC": style(p.comment_color, p.bg_medium),
            # Command line and popup menu
            "Pmenu": style(p.fg_light, p.bg_medium),
            "PmenuSel": style(p.bg_dark, p.orange_muted),
            "PmenuThumb": style(p.fg_light, p.brown_dark),
            "PmenuSbar": style(p.fg_light, p.bg_medium),
            "ModeMsg": style(p.orange_vibrant, None, BOLD),
            "CmdLine": style(p.fg_light, p.bg_dark),
            # Diagnostics
            "DiagnosticError": style(p.red_error, None, BOLD),
            "DiagnosticWarn": style(p.orange_muted, None, BOLD),
            "DiagnosticInfo": style(p.blue_muted, None, BOLD),
            "DiagnosticHint": style(p.brown_medium, None, BOLD),
            "DiagnosticUnderlineError": style(None, None, UNDERCURL),
            "DiagnosticUnderlineWarn": style(None, None, UNDERCURL),
            "DiagnosticUnderlineInfo": style(None, None, UNDERCURL),
            "DiagnosticUnderlineHint": style(None, None, UNDERCURL),
            "LspDiagnosticsSignError": style(p.error_sign, None, BOLD),
            "LspDiagnosticsSignWarning": style(p.warning_sign, None, BOLD),
            "LspDiagnosticsSignInformation": style(p.info_sign, None, BOLD),
            "LspDiagnosticsSignHint": style(p.hint_sign, None, BOLD),
            # LSP references and code lens
            "LspReferenceText": style(p.orange_light, p.bg_medium),
            "LspReferenceRead": style(p.orange_light, p.bg_medium),
            "LspReferenceWrite": style(p.orange_vibrant, p.bg_medium, BOLD),
            "LspCodeLens": style(p.comment_color, None, ITALIC),
            # Vim syntax
            "Comment": style(p.comment_color, None, ITALIC),
            "Constant": style(p.brown_light),
            "String": style(p.cyan_muted),
            "Character": style(p.cyan_muted),
            "Number": style(p.brown_light),
            "Boolean": style(p.brown_light),
            "Float": style(p.brown_light),
            "Identifier": style(p.olive_medium),
            "Function": style(p.blue_muted),
            "Statement": style(p.orange_vibrant, None, BOLD),
            "Conditional": style(p.orange_vibrant, None, BOLD),
            "Repeat": style(p.orange_vibrant, None, BOLD),
            "Operator": style(p.orange_muted),
            "Keyword": style(p.orange_vibrant, None, BOLD),
            "PreProc": style(p.purple_muted),
            "Type": style(p.olive_light, None, BOLD),
            "StorageClass": style(p.olive_light, None, BOLD),
            "Structure": style(p.olive_light),
            "Special": style(p.red_error),
            "Underlined": style(p.fg_light, None, UNDERLINE),
            "Error": style(p.red_error, p.bg_medium),
            "Todo": style(p.orange_light, p.bg_medium, BOLD),
            # Tree-sitter
            "@comment": style(p.comment_color, None, ITALIC),
            "@constant": style(p.brown_light),
            "@constant.builtin": style(p.orange_muted, None, BOLD),
            "@constant.macro": style(p.purple_muted, None, BOLD),
            "@string": style(p.cyan_muted),
            "@character": style(p.cyan_muted),
            "@boolean": style(p.brown_light),
            "@number": style(p.brown_light),
            "@float": style(p.brown_light),
            "@variable": style(p.olive_medium),
            "@variable.builtin": style(p.blue_muted),
            "@property": style(p.olive_medium),
            "@function": style(p.blue_muted),
            "@function.builtin": style(p.blue_muted, None, BOLD),
            "@function.call": style(p.blue_muted),
            "@method": style(p.blue_muted),
            "@method.call": style(p.blue_muted),
            "@parameter": style(p.olive_light, None, ITALIC),
            "@keyword": style(p.orange_vibrant, None, BOLD),
            "@keyword.function": style(p.orange_vibrant, None, BOLD),
            "@keyword.operator": style(p.orange_muted),
            "@operator": style(p.orange_muted),
            "@type": style(p.olive_light, None, BOLD),
            "@type.builtin": style(p.olive_light, None, BOLD),
            "@type.definition": style(p.olive_light, None, BOLD),
            "@field": style(p.brown_medium),
            "@label": style(p.orange_muted),
            "@tag": style(p.brown_light, None, BOLD),
            "@attribute": style(p.orange_muted),
            "@string.regexp": style(p.orange_muted),
            "@string.escape": style(p.red_error),
            "@punctuation.delimiter": style(p.fg_medium),
            "@punctuation.bracket": style(p.fg_medium),
            "@punctuation.special": style(p.orange_muted),
            # Markup
            "@markup.heading": style(p.orange_vibrant, None, BOLD),
            "@markup.italic": style(p.fg_light, None, ITALIC),
            "@markup.bold": style(p.fg_light, None, BOLD),
            "@markup.link": style(p.blue_muted, None, UNDERLINE),
            "@markup.raw": style(p.comment_color),
            # Telescope
            "TelescopeBorder": style(p.brown_medium, p.bg_medium),
            "TelescopeNormal": style(p.fg_light, p.bg_medium),
            "TelescopePromptNormal": style(p.fg_light, p.bg_dark),
            "TelescopePromptBorder": style(p.orange_vibrant, p.bg_dark),
            "TelescopePromptPrefix": style(p.orange_vibrant, p.bg_dark, BOLD),
            "TelescopePromptCounter": style(p.olive_medium, p.bg_dark),
            "TelescopeResultsNormal": style(p.fg_light, p.bg_medium),
            "TelescopeResultsBorder": style(p.brown_medium, p.bg_medium),
            "TelescopeResultsFile": style(p.olive_medium),
            "TelescopeResultsLine": style(p.fg_light),
            "TelescopeMatching": style(p.orange_light, None, BOLD),
            "TelescopeSelection": style(None, p.selection_bg, BOLD),
            "TelescopePreviewNormal": style(p.fg_light, p.bg_dark),
            "TelescopePreviewBorder": style(p.brown_medium, p.bg_dark),
            "TelescopePreviewTitle": style(p.orange_vibrant, p.bg_dark, BOLD),
            "TelescopePreviewLine": style(p.fg_light),
            "TelescopePreviewMatch": style(p.orange_light, p.bg_medium, BOLD),
            # NvimTree
            "NvimTreeRootFolder": style(p.orange_light, None, BOLD),
            "NvimTreeFolderIcon": style(p.brown_medium),
            "NvimTreeFileIcon": style(p.fg_medium),
            "NvimTreeSpecialFile": style(p.orange_muted, None, ITALIC),
            "NvimTreeIndentMarker": style(p.comment_color),
            # GitSigns
            "GitSignsAdd": style(p.olive_medium),
            "GitSignsChange": style(p.blue_muted),
            "GitSignsDelete": style(p.red_error),
            # BufferLine
            "BufferLineFill": style(p.bg_dark, p.bg_dark),
            "BufferLineBuffer": style(p.fg_medium, p.bg_medium),
            "BufferLineBufferSelected": style(p.orange_vibrant, p.bg_dark, BOLD),
            "BufferLineBufferInactive": style(p.comment_color, p.bg_medium),
            "BufferLineTab": style(p.fg_medium, p.bg_medium),
            "BufferLineTabSelected": style(p.orange_vibrant, p.bg_dark, BOLD),
            # LSP Saga
            "LspSagaBorderFg": style(p.brown_medium),
            "LspSagaNormal": style(p.fg_light, p.bg_medium),
            "LspSagaDocText": style(p.fg_light),
            "LspSagaType": style(p.olive_light),
            "LspSagaSignatureHelpBorder": style(p.brown_medium, p.bg_medium),
            "LspSagaHoverBorder": style(p.brown_medium, p.bg_medium),
        }
    )


def abanoub_groups(p: Palette) -> Dict[str, GroupSpec]:
    """Group table for ``abanoub``, with extra language-specific captures."""

    return _with_links(
        {
            # Core UI
            "Normal": style(p.fg_white, p.bg_deep_black),
            "NormalNC": style(p.fg_white, p.bg_deep_black),
            "NormalFloat": style(p.fg_white, p.bg_darker_ui),
            "FloatBorder": style(p.comment_gray, p.bg_darker_ui),
            "Folded": style(p.comment_gray, p.bg_darker_ui, ITALIC),
            "SignColumn": style(p.fg_white, p.bg_deep_black),
            "VertSplit": style(p.dim_gray, p.bg_deep_black),
            "LineNr": style(p.comment_gray),
            "CursorLineNr": style(p.vibrant_blue, p.bg_medium_ui, BOLD),
            "CursorLine": style(None, p.bg_medium_ui),
            "MatchParen": style(p.vibrant_yellow, p.bg_darker_ui, BOLD),
            # Selection and search
            "Visual": style(None, p.selection_bg, REVERSE),
            "IncSearch": style(p.bg_deep_black, p.vibrant_orange),
            "Search": style(p.bg_deep_black, p.vibrant_yellow),
            # Status line
            "StatusLine": style(p.fg_white, p.bg_darker_ui, BOLD),
            "StatusLineNC": style(p.comment_gray, p.bg_darker_ui),
            # Command line and popup menu
            "Pmenu": style(p.fg_white, p.bg_darker_ui),
            "PmenuSel": style(p.bg_deep_black, p.vibrant_blue),
            "PmenuThumb": style(p.vibrant_red, p.bg_darker_ui),
            "PmenuSbar": style(p.comment_gray, p.bg_darker_ui),
            "ModeMsg": style(p.vibrant_orange, None, BOLD),
            "CmdLine": style(p.fg_white, p.bg_deep_black),
            # Diagnostics
            "DiagnosticError": style(p.diag_error, None, BOLD),
            "DiagnosticWarn": style(p.diag_warning, None, BOLD),
            "DiagnosticInfo": style(p.diag_info, None, BOLD),
            "DiagnosticHint": style(p.diag_hint, None, BOLD),
            "DiagnosticUnderlineError": style(None, None, UNDERCURL, special=p.diag_error),
            "DiagnosticUnderlineWarn": style(None, None, UNDERCURL, special=p.diag_warning),
            "DiagnosticUnderlineInfo": style(None, None, UNDERCURL, special=p.diag_info),
            "DiagnosticUnderlineHint": style(None, None, UNDERCURL, special=p.diag_hint),
            "LspDiagnosticsSignError": style(p.diag_error, None, BOLD),
            "LspDiagnosticsSignWarning": style(p.diag_warning, None, BOLD),
            "LspDiagnosticsSignInformation": style(p.diag_info, None, BOLD),
            "LspDiagnosticsSignHint": style(p.diag_hint, None, BOLD),
            # LSP references and code lens
            "LspReferenceText": style(p.vibrant_blue, p.bg_darker_ui),
            "LspReferenceRead": style(p.vibrant_blue, p.bg_darker_ui),
            "LspReferenceWrite": style(p.vibrant_red, p.bg_darker_ui, BOLD),
            "LspCodeLens": style(p.comment_gray, None, ITALIC),
            # Vim syntax
            "Comment": style(p.comment_gray, None, ITALIC),
            "Constant": style(p.vibrant_yellow),
            "String": style(p.vibrant_green),
            "Character": style(p.vibrant_green),
            "Number": style(p.vibrant_orange),
            "Boolean": style(p.vibrant_magenta, None, BOLD),
            "Float": style(p.vibrant_orange),
            "Identifier": style(p.vibrant_cyan),
            "Function": style(p.vibrant_blue),
            "Statement": style(p.vibrant_red, None, BOLD),
            "Conditional": style(p.vibrant_red, None, BOLD),
            "Repeat": style(p.vibrant_red, None, BOLD),
            "Operator": style(p.vibrant_orange),
            "Keyword": style(p.vibrant_red, None, BOLD),
            "PreProc": style(p.vibrant_magenta, None, BOLD),
            "Type": style(p.vibrant_cyan, None, BOLD),
            "StorageClass": style(p.vibrant_purple, None, BOLD),
            "Structure": style(p.vibrant_cyan),
            "Special": style(p.vibrant_red),
            "Underlined": style(p.fg_white, None, UNDERLINE),
            "Error": style(p.diag_error, p.bg_darker_ui),
            "Todo": style(p.vibrant_yellow, p.bg_darker_ui, BOLD),
            # Tree-sitter
            "@comment": style(p.comment_gray, None, ITALIC),
            "@constant": style(p.vibrant_yellow),
            "@constant.builtin": style(p.vibrant_orange, None, BOLD),
            "@constant.macro": style(p.vibrant_magenta, None, BOLD),
            "@string": style(p.vibrant_green),
            "@character": style(p.vibrant_green),
            "@boolean": style(p.vibrant_magenta, None, BOLD),
            "@number": style(p.vibrant_orange),
            "@float": style(p.vibrant_orange),
            "@variable": style(p.vibrant_cyan),
            "@variable.builtin": style(p.vibrant_blue),
            "@property": style(p.vibrant_cyan),
            "@function": style(p.vibrant_blue),
            "@function.builtin": style(p.vibrant_blue, None, BOLD),
            "@function.call": style(p.vibrant_blue),
            "@method": style(p.vibrant_blue),
            "@method.call": style(p.vibrant_blue),
            "@parameter": style(p.vibrant_blue, None, ITALIC),
            "@keyword": style(p.vibrant_red, None, BOLD),
            "@keyword.function": style(p.vibrant_red, None, BOLD),
            "@keyword.operator": style(p.vibrant_orange),
            "@operator": style(p.vibrant_orange),
            "@type": style(p.vibrant_cyan, None, BOLD),
            "@type.builtin": style(p.vibrant_cyan, None, BOLD),
            "@type.definition": style(p.vibrant_cyan, None, BOLD),
            "@field": style(p.vibrant_yellow),
            "@label": style(p.vibrant_orange),
            "@tag": style(p.vibrant_red, None, BOLD),
            "@attribute": style(p.vibrant_orange),
            "@string.regexp": style(p.vibrant_orange),
            "@string.escape": style(p.vibrant_magenta),
            "@punctuation.delimiter": style(p.fg_light_gray),
            "@punctuation.bracket": style(p.fg_white),
            "@punctuation.special": style(p.vibrant_orange),
            # Markup
            "@markup.heading": style(p.vibrant_red, None, BOLD),
            "@markup.italic": style(p.fg_light_gray, None, ITALIC),
            "@markup.bold": style(p.fg_white, None, BOLD),
            "@markup.link": style(p.vibrant_blue, None, UNDERLINE),
            "@markup.raw": style(p.comment_gray),
            "@markup.list": style(p.vibrant_cyan),
            "@markup.quote": style(p.vibrant_green, None, ITALIC),
            # Go
            "@type.qualifier.go": style(p.vibrant_magenta),
            "@namespace.go": style(p.vibrant_purple),
            # PHP
            "@variable.member.php": style(p.vibrant_cyan, None, ITALIC),
            "@variable.field.php": style(p.vibrant_yellow),
            "@keyword.function.php": style(p.vibrant_red, None, BOLD),
            "@keyword.operator.php": style(p.vibrant_orange),
            "@type.php": style(p.vibrant_cyan, None, BOLD),
            "@attribute.php": style(p.vibrant_purple),
            # Lua
            "@keyword.lua": style(p.vibrant_red, None, BOLD),
            "@variable.builtin.lua": style(p.vibrant_blue),
            "@constant.builtin.lua": style(p.vibrant_yellow),
            "@field.lua": style(p.vibrant_cyan),
            # Fish / Bash
            "@keyword.shell": style(p.vibrant_red, None, BOLD),
            "@variable.shell": style(p.vibrant_yellow),
            "@function.builtin.shell": style(p.vibrant_blue, None, BOLD),
            "@string.shell": style(p.vibrant_green),
            # JSON / YAML
            "@property.json": style(p.vibrant_yellow),
            "@property.yaml": style(p.vibrant_yellow),
            "@string.json": style(p.vibrant_green),
            "@string.yaml": style(p.vibrant_green),
            "@boolean.json": style(p.vibrant_magenta),
            "@number.json": style(p.vibrant_orange),
            # Telescope
            "TelescopeBorder": style(p.comment_gray, p.bg_darker_ui),
            "TelescopeNormal": style(p.fg_white, p.bg_darker_ui),
            "TelescopePromptNormal": style(p.fg_white, p.bg_deep_black),
            "TelescopePromptBorder": style(p.vibrant_red, p.bg_deep_black),
            "TelescopePromptPrefix": style(p.vibrant_red, p.bg_deep_black, BOLD),
            "TelescopePromptCounter": style(p.vibrant_orange, p.bg_deep_black),
            "TelescopeResultsNormal": style(p.fg_light_gray, p.bg_darker_ui),
            "TelescopeResultsBorder": style(p.comment_gray, p.bg_darker_ui),
            "TelescopeResultsFile": style(p.vibrant_cyan),
            "TelescopeResultsLine": style(p.fg_light_gray),
            "TelescopeMatching": style(p.vibrant_yellow, None, BOLD),
            "TelescopeSelection": style(None, p.selection_bg, BOLD),
            "TelescopePreviewNormal": style(p.fg_light_gray, p.bg_deep_black),
            "TelescopePreviewBorder": style(p.comment_gray, p.bg_deep_black),
            "TelescopePreviewTitle": style(p.vibrant_red, p.bg_deep_black, BOLD),
            "TelescopePreviewLine": style(p.fg_light_gray),
            "TelescopePreviewMatch": style(p.vibrant_yellow, p.bg_darker_ui, BOLD),
            # NvimTree
            "NvimTreeRootFolder": style(p.vibrant_orange, None, BOLD),
            "NvimTreeFolderIcon": style(p.comment_gray),
            "NvimTreeFileIcon": style(p.fg_light_gray),
            "NvimTreeSpecialFile": style(p.vibrant_yellow, None, ITALIC),
            "NvimTreeIndentMarker": style(p.dim_gray),
            # GitSigns
            "GitSignsAdd": style(p.vibrant_green),
            "GitSignsChange": style(p.vibrant_blue),
            "GitSignsDelete": style(p.vibrant_red),
            # BufferLine
            "BufferLineFill": style(p.bg_deep_black, p.bg_deep_black),
            "BufferLineBuffer": style(p.fg_light_gray, p.bg_darker_ui),
            "BufferLineBufferSelected": style(p.vibrant_red, p.bg_deep_black, BOLD),
            "BufferLineBufferInactive": style(p.comment_gray, p.bg_darker_ui),
            "BufferLineTab": style(p.fg_light_gray, p.bg_darker_ui),
            "BufferLineTabSelected": style(p.vibrant_red, p.bg_deep_black, BOLD),
            # LSP Saga
            "LspSagaBorderFg": style(p.comment_gray),
            "LspSagaNormal": style(p.fg_white, p.bg_darker_ui),
            "LspSagaDocText": style(p.fg_light_gray),
            "LspSagaType": style(p.vibrant_cyan),
            "LspSagaSignatureHelpBorder": style(p.comment_gray, p.bg_darker_ui),
            "LspSagaHoverBorder": style(p.comment_gray, p.bg_darker_ui),
        }
    )
