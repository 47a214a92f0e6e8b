"""Custom border styles built from a few characters, and style resolution."""

from __future__ import annotations

from dataclasses import dataclass

from .styles import BorderItem as B
from .styles import BorderStyle, SeparatorItem as S, builtin_style


@dataclass(frozen=True)
class BorderChars:
    """The six characters that describe a simple custom border."""

    top_border_ch: str = ""
    separator_ch: str = ""
    bottom_border_ch: str = ""
    side_border_ch: str = ""
    out_intersect_ch: str = ""
    in_intersect_ch: str = ""


def _fill(chars: list[str], spec: BorderChars) -> None:
    chars[B.TT] = spec.top_border_ch
    chars[B.IH] = spec.separator_ch
    chars[B.BB] = spec.bottom_border_ch
    for item in (B.LL, B.IV, B.RR):
        chars[item] = spec.side_border_ch
    for item in (B.TL, B.TV, B.TR, B.LH, B.RH, B.BL, B.BV, B.BR):
        chars[item] = spec.out_intersect_ch
    for item in (B.II, B.LI, B.TI, B.RI, B.BI):
        chars[item] = spec.in_intersect_ch


def _no_inner_lines(spec: BorderChars) -> bool:
    return not spec.separator_ch and not spec.in_intersect_ch


def border_style_from_chars(
    border_chars: BorderChars,
    header_border_chars: BorderChars,
    hor_separator_char: str,
) -> BorderStyle:
    """Expand simple border descriptions into a full border style."""
    style = BorderStyle()
    _fill(style.border_chars, border_chars)
    if _no_inner_lines(border_chars):
        style.border_chars[B.LH] = style.border_chars[B.RH] = ""

    _fill(style.header_border_chars, header_border_chars)
    # A header without inner lines also drops the side ends of ordinary inner lines.
    if _no_inner_lines(header_border_chars):
        style.border_chars[B.LH] = style.border_chars[B.RH] = ""

    out = header_border_chars.out_intersect_ch
    for item in (S.LH, S.RH, S.II, S.TI, S.BI):
        style.separator_chars[item] = out
    style.separator_chars[S.IH] = hor_separator_char
    return style


def resolve_style(style: str | BorderStyle) -> BorderStyle:
    """Return an independent border style for a built-in name or a style object."""
    if isinstance(style, str):
        return builtin_style(style)
    if isinstance(style, BorderStyle):
        return style.copy()
    raise TypeError(f"expected a style name or BorderStyle, got {type(style).__name__}")