"""Building rows from delimited strings and printf-style format strings."""

from __future__ import annotations

from typing import Any

from .cell import Cell
from .properties import TableError
from .row import Row
from .text import count_columns, get_column_separator


def row_from_string(text: str | None) -> Row:
    """Split ``text`` on the column separator, one cell per piece.

    An empty string gives one empty cell; None gives a row with no cells.
    """
    if text is None:
        return Row()
    return Row([Cell(part) for part in text.split(get_column_separator())])


def row_from_format(fmt: str, *args: Any) -> Row:
    """Format ``fmt`` with ``args`` printf-style and split the result into cells.

    If the arguments bring extra separators into a single-cell format, the
    whole result becomes one cell. Any other change in the number of cells
    is an error.
    """
    try:
        text = fmt % args
    except (TypeError, ValueError) as exc:
        raise TableError(f"cannot format {fmt!r}: {exc}") from exc

    expected = count_columns(fmt)
    if count_columns(text) == expected:
        return row_from_string(text)
    if expected == 1:
        return Row([Cell(text)])
    raise TableError(
        f"formatted text {text!r} does not have the {expected} cells of format {fmt!r}"
    )