"""Text measurement and the column separator used by format strings."""

from __future__ import annotations

from typing import Callable, Optional

from wcwidth import wcswidth, wcwidth

WidthFunction = Callable[[str], Optional[int]]

DEFAULT_COLUMN_SEPARATOR = "|"

_column_separator = DEFAULT_COLUMN_SEPARATOR
_width_function: WidthFunction | None = None


def _char_width(ch: str) -> int:
    if _width_function is not None:
        custom = _width_function(ch)
        if custom is not None:
            if custom < 0:
                raise ValueError(f"width function returned a negative width for {ch!r}")
            return custom
    return max(wcwidth(ch), 0)


def text_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies on one line.

    A custom width function, if set, is asked about each character first;
    when it returns None the standard terminal width is used.
    """
    if _width_function is None:
        width = wcswidth(text)
        if width >= 0:
            return width
    return sum(_char_width(ch) for ch in text)


def set_width_function(func: WidthFunction | None) -> None:
    """Install a function giving the width of a single character.

    The function returns a width, or None to fall back to the default.
    Passing None removes any custom function.
    """
    global _width_function
    if func is not None and not callable(func):
        raise TypeError("width function must be callable or None")
    _width_function = func


def get_column_separator() -> str:
    """The character that splits format strings into cells."""
    return _column_separator


def set_column_separator(separator: str) -> None:
    """Change the character that splits format strings into cells."""
    global _column_separator
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"column separator must be a single character, got {separator!r}")
    _column_separator = separator


def count_columns(fmt: str) -> int:
    """Number of cells a format string describes: separators plus one."""
    return fmt.count(_column_separator) + 1