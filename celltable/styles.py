"""Border styles: the characters used to draw table frames and separators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class BorderItem(IntEnum):
    """Positions of border elements around and inside a table.

    ::

        TL TT TT TT TV TT TT TT TT TT TT TT TR
        LL          IV                      RR
        LH IH IH IH II IH IH IH TI IH IH IH RH
        LL          IV          IV          RR
        LL          LI IH IH IH RI          RH
        LL          IV          IV          RR
        LH IH IH IH BI IH IH IH II IH IH IH RH
        LL                      IV          RR
        BL BB BB BB BV BB BB BB BV BB BB BB BR
    """

    TL = 0
    TT = 1
    TV = 2
    TR = 3
    LL = 4
    IV = 5
    RR = 6
    LH = 7
    IH = 8
    II = 9
    RH = 10
    BL = 11
    BB = 12
    BV = 13
    BR = 14
    LI = 15
    TI = 16
    RI = 17
    BI = 18


class SeparatorItem(IntEnum):
    """Positions of elements in an explicit horizontal separator line."""

    LH = 0
    IH = 1
    II = 2
    RH = 3
    TI = 4
    BI = 5


_BORDER_SIZE = len(BorderItem)
_SEPARATOR_SIZE = len(SeparatorItem)


@dataclass
class BorderStyle:
    """Characters for ordinary rows, header rows and explicit separators."""

    border_chars: list[str] = field(default_factory=lambda: [""] * _BORDER_SIZE)
    header_border_chars: list[str] = field(default_factory=lambda: [""] * _BORDER_SIZE)
    separator_chars: list[str] = field(default_factory=lambda: [""] * _SEPARATOR_SIZE)

    def __post_init__(self) -> None:
        self.border_chars = list(self.border_chars)
        self.header_border_chars = list(self.header_border_chars)
        self.separator_chars = list(self.separator_chars)
        if len(self.border_chars) != _BORDER_SIZE:
            raise ValueError(f"border_chars must have {_BORDER_SIZE} elements")
        if len(self.header_border_chars) != _BORDER_SIZE:
            raise ValueError(f"header_border_chars must have {_BORDER_SIZE} elements")
        if len(self.separator_chars) != _SEPARATOR_SIZE:
            raise ValueError(f"separator_chars must have {_SEPARATOR_SIZE} elements")

    def copy(self) -> BorderStyle:
        """Return an independent copy of this style."""
        return BorderStyle(
            list(self.border_chars),
            list(self.header_border_chars),
            list(self.separator_chars),
        )

    def max_elem_len(self) -> int:
        """Length of the longest element, never less than 1."""
        elements = (*self.border_chars, *self.header_border_chars, *self.separator_chars)
        return max(1, *(len(e) for e in elements))


_E = ""

_BUILTIN: dict[str, tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]] = {
    "basic": (
        ("+", "-", "+", "+", "|", "|", "|", _E, _E, _E, _E,
         "+", "-", "+", "+", "+", "+", "+", "+"),
        ("+", "-", "+", "+", "|", "|", "|", "+", "-", "+", "+",
         "+", "-", "+", "+", "+", "+", "+", "+"),
        ("+", "-", "+", "+", "+", "+"),
    ),
    "basic2": (
        ("+", "-", "+", "+", "|", "|", "|", "+", "-", "+", "+",
         "+", "-", "+", "+", "+", "+", "+", "+"),
        ("+", "-", "+", "+", "|", "|", "|", "+", "-", "+", "+",
         "+", "-", "+", "+", "+", "+", "+", "+"),
        ("+", "-", "+", "+", "+", "+"),
    ),
    "simple": (
        (_E, _E, _E, _E, _E, " ", _E, _E, _E, _E, _E,
         _E, _E, _E, _E, _E, _E, _E, _E),
        (_E, _E, _E, _E, _E, " ", _E, _E, "-", " ", _E,
         _E, " ", " ", _E, " ", "-", " ", "-"),
        (_E, "-", " ", _E, " ", " "),
    ),
    "plain": (
        (_E, _E, _E, _E, _E, " ", _E, _E, _E, _E, _E,
         _E, _E, _E, _E, _E, _E, _E, _E),
        (_E, "-", "-", _E, _E, " ", _E, _E, "-", "-", _E,
         _E, "-", "-", _E, " ", "-", " ", "-"),
        (_E, "-", "-", _E, "-", "-"),
    ),
    "dot": (
        (".", ".", ".", ".", ":", ":", ":", _E, _E, _E, _E,
         ":", ".", ":", ":", "+", ":", "+", ":"),
        (".", ".", ".", ".", ":", ":", ":", ":", ".", ":", ":",
         ":", ".", ":", ":", "+", ".", "+", "."),
        (":", ".", ":", ":", ":", ":"),
    ),
    "empty": (
        (_E,) * _BORDER_SIZE,
        (_E,) * _BORDER_SIZE,
        (_E, " ", _E, _E, _E, _E),
    ),
    "empty2": (
        (" ", " ", " ", " ", " ", " ", " ", _E, _E, _E, _E,
         " ", " ", " ", " ", " ", " ", " ", " "),
        (" ", " ", " ", " ", " ", " ", " ", _E, _E, _E, _E,
         " ", " ", " ", " ", " ", " ", " ", " "),
        (" ", " ", " ", " ", " ", " "),
    ),
    "solid": (
        ("┌", "─", "┬", "┐", "│", "│", "│", _E, _E, _E, _E,
         "└", "─", "┴", "╯", "│", "─", "│", "─"),
        ("┌", "─", "┬", "┐", "│", "│", "│", "├", "─", "┼", "┤",
         "└", "─", "┴", "┘", "┼", "┬", "┼", "┴"),
        ("├", "─", "┼", "┤", "┬", "┴"),
    ),
    "solid_round": (
        ("╭", "─", "┬", "╮", "│", "│", "│", _E, _E, _E, _E,
         "╰", "─", "┴", "╯", "│", "─", "│", "─"),
        ("╭", "─", "┬", "╮", "│", "│", "│", "├", "─", "┼", "┤",
         "╰", "─", "┴", "╯", "┼", "┬", "┼", "┴"),
        ("├", "─", "┼", "┤", "┬", "┴"),
    ),
    "nice": (
        ("╔", "═", "╦", "╗", "║", "║", "║", _E, _E, _E, _E,
         "╚", "═", "╩", "╝", "┣", "┻", "┣", "┳"),
        ("╔", "═", "╦", "╗", "║", "║", "║", "╠", "═", "╬", "╣",
         "╚", "═", "╩", "╝", "┣", "╦", "┣", "╩"),
        ("╟", "─", "╫", "╢", "╥", "╨"),
    ),
    "double": (
        ("╔", "═", "╦", "╗", "║", "║", "║", _E, _E, _E, _E,
         "╚", "═", "╩", "╝", "┣", "┻", "┣", "┳"),
        ("╔", "═", "╦", "╗", "║", "║", "║", "╠", "═", "╬", "╣",
         "╚", "═", "╩", "╝", "┣", "╦", "┣", "╩"),
        ("╠", "═", "╬", "╣", "╦", "╩"),
    ),
    "double2": (
        ("╔", "═", "╤", "╗", "║", "│", "║", "╟", "─", "┼", "╢",
         "╚", "═", "╧", "╝", "├", "┬", "┤", "┴"),
        ("╔", "═", "╤", "╗", "║", "│", "║", "╠", "═", "╪", "╣",
         "╚", "═", "╧", "╝", "├", "╤", "┤", "╧"),
        ("╠", "═", "╪", "╣", "╤", "╧"),
    ),
    "bold": (
        ("┏", "━", "┳", "┓", "┃", "┃", "┃", _E, _E, _E, _E,
         "┗", "━", "┻", "┛", "┣", "┻", "┣", "┳"),
        ("┏", "━", "┳", "┓", "┃", "┃", "┃", "┣", "━", "╋", "┫",
         "┗", "━", "┻", "┛", "┣", "┳", "┣", "┻"),
        ("┣", "━", "╋", "┫", "┳", "┻"),
    ),
    "bold2": (
        ("┏", "━", "┯", "┓", "┃", "│", "┃", "┠", "─", "┼", "┨",
         "┗", "━", "┷", "┛", "┣", "┬", "┣", "┴"),
        ("┏", "━", "┯", "┓", "┃", "│", "┃", "┣", "━", "┿", "┫",
         "┗", "━", "┷", "┛", "┣", "┯", "┣", "┷"),
        ("┣", "━", "┿", "┫", "┯", "┷"),
    ),
    "frame": (
        ("▛", "▀", "▀", "▜", "▌", "┃", "▐", _E, _E, _E, _E,
         "▙", "▄", "▄", "▟", "┣", "━", "┣", "━"),
        ("▛", "▀", "▀", "▜", "▌", "┃", "▐", "▌", "━", "╋", "▐",
         "▙", "▄", "▄", "▟", "┣", "━", "┣", "━"),
        ("▌", "━", "╋", "▐", "╋", "╋"),
    ),
}


def style_names() -> list[str]:
    """Names of the built-in styles, in their canonical order."""
    return list(_BUILTIN)


def builtin_style(name: str) -> BorderStyle:
    """Return a fresh copy of the built-in style called ``name``."""
    try:
        border, header, separator = _BUILTIN[name.lower()]
    except KeyError:
        raise ValueError(f"unknown border style: {name!r}") from None
    return BorderStyle(list(border), list(header), list(separator))