"""Terminal colours and text styles, and the escape sequences that apply them."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    """Colour numbers; ``DEFAULT`` leaves the terminal colour unchanged."""

    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    LIGHT_GRAY = 8
    DARK_GRAY = 9
    LIGHT_RED = 10
    LIGHT_GREEN = 11
    LIGHT_YELLOW = 12
    LIGHT_BLUE = 13
    LIGHT_MAGENTA = 14
    LIGHT_CYAN = 15
    LIGHT_WHITE = 16


class TextStyle(IntFlag):
    """Text style flags; several may be combined."""

    DEFAULT = 1 << 0
    BOLD = 1 << 1
    DIM = 1 << 2
    ITALIC = 1 << 3
    UNDERLINED = 1 << 4
    BLINK = 1 << 5
    INVERTED = 1 << 6
    HIDDEN = 1 << 7


_FG_COLORS = (
    "",
    "\033[30m", "\033[31m", "\033[32m", "\033[33m",
    "\033[34m", "\033[35m", "\033[36m", "\033[37m",
    "\033[90m", "\033[91m", "\033[92m", "\033[93m",
    "\033[94m", "\033[95m", "\033[96m", "\033[97m",
)

_BG_COLORS = (
    "",
    "\033[40m", "\033[41m", "\033[42m", "\033[43m",
    "\033[44m", "\033[45m", "\033[46m", "\033[47m",
    "\033[100m", "\033[101m", "\033[102m", "\033[103m",
    "\033[104m", "\033[105m", "\033[106m", "\033[107m",
)

_TEXT_STYLES = (
    "",
    "\033[1m",
    "\033[2m",
    "\033[3m",
    "\033[4m",
    "\033[5m",
    "\033[7m",
    "\033[8m",
)

RESET_TAG = "\033[0m"


def _check_style(text_style: int) -> int:
    value = int(text_style)
    if not 0 <= value < (1 << len(_TEXT_STYLES)):
        raise ValueError(f"invalid text style: {text_style!r}")
    return value


def _check_color(color: int) -> int:
    value = int(color)
    if not 0 <= value < len(_FG_COLORS):
        raise ValueError(f"invalid color: {color!r}")
    return value


def _style_sequences(text_style: int) -> str:
    return "".join(seq for bit, seq in enumerate(_TEXT_STYLES) if text_style & (1 << bit))


def _needs_reset(text_style: int) -> bool:
    # Only the DEFAULT bit may be set without requiring a reset.
    return bool(text_style & ~int(TextStyle.DEFAULT))


def cell_style_tag(text_style: int, bg_color: int) -> str:
    """Escape sequence that starts a cell with the given style and background."""
    style = _check_style(text_style)
    bg = _check_color(bg_color)
    return _style_sequences(style) + _BG_COLORS[bg]


def cell_reset_tag(text_style: int, bg_color: int) -> str:
    """Escape sequence that ends a styled cell, or an empty string."""
    style = _check_style(text_style)
    bg = _check_color(bg_color)
    if _needs_reset(style) or bg:
        return RESET_TAG
    return ""


def content_style_tag(text_style: int, fg_color: int, bg_color: int) -> str:
    """Escape sequence that starts the content of a cell."""
    style = _check_style(text_style)
    fg = _check_color(fg_color)
    bg = _check_color(bg_color)
    return _style_sequences(style) + _FG_COLORS[fg] + _BG_COLORS[bg]


def content_reset_tag(text_style: int, fg_color: int, bg_color: int, cell_tag: str) -> str:
    """Escape sequence that ends styled content and restores the cell style.

    ``cell_tag`` is the cell's own style tag, re-applied after the reset.
    """
    style = _check_style(text_style)
    fg = _check_color(fg_color)
    bg = _check_color(bg_color)
    if _needs_reset(style) or fg or bg:
        return RESET_TAG + cell_tag
    return ""