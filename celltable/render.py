"""Drawing rows, horizontal separators and whole tables as text."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .cell import CellType, Geometry
from .properties import ANY_COLUMN, CellProperty, RowType, TableError, TableProperties
from .row import Row, Separator
from .styles import BorderItem as B
from .styles import SeparatorItem as S

_COLUMN_SEPARATOR_LENGTH = 1


class SeparatorPosition(Enum):
    """Where a horizontal line is drawn relative to the rows."""

    TOP = "top"
    INSIDE = "inside"
    BOTTOM = "bottom"


def _is_blank(chars: str) -> bool:
    return chars == "" or (len(chars) == 1 and not chars.isprintable())


def _row_type(properties: TableProperties, row_index: int) -> int:
    return properties.cell_property(row_index, ANY_COLUMN, CellProperty.ROW_TYPE)


def render_separator(
    properties: TableProperties,
    row_index: int,
    col_widths: Sequence[int],
    upper: Row | None,
    lower: Row | None,
    position: SeparatorPosition,
    separator: Separator | None = None,
) -> str:
    """Draw the horizontal line between ``upper`` and ``lower``.

    ``row_index`` is the index of the lower row. Returns an empty string
    when every element of the line would be invisible.
    """
    cols = len(col_widths)
    top_types = upper.cell_types(cols) if upper is not None else [CellType.GROUP_SLAVE] * cols
    bottom_types = lower.cell_types(cols) if lower is not None else [CellType.GROUP_SLAVE] * cols

    lower_type = _row_type(properties, row_index) if lower is not None else RowType.COMMON
    upper_type = _row_type(properties, row_index - 1) if upper is not None else RowType.COMMON

    style = properties.border_style
    if upper_type == RowType.HEADER or lower_type == RowType.HEADER:
        chars = style.header_border_chars
    else:
        chars = style.border_chars

    if separator is not None and separator.enabled:
        sc = style.separator_chars
        left, inner, cross, right = sc[S.LH], sc[S.IH], sc[S.II], sc[S.RH]
        top_cross, bottom_cross, straight = sc[S.TI], sc[S.BI], sc[S.IH]
        if lower is None:
            left, right = chars[B.BL], chars[B.BR]
        elif upper is None:
            left, right = chars[B.TL], chars[B.TR]
    elif position is SeparatorPosition.TOP:
        left, inner, cross, right = chars[B.TL], chars[B.TT], chars[B.TV], chars[B.TR]
        top_cross, bottom_cross, straight = chars[B.TV], chars[B.TV], chars[B.TT]
    elif position is SeparatorPosition.INSIDE:
        left, inner, cross, right = chars[B.LH], chars[B.IH], chars[B.II], chars[B.RH]
        top_cross, bottom_cross, straight = chars[B.TI], chars[B.BI], chars[B.IH]
    elif position is SeparatorPosition.BOTTOM:
        left, inner, cross, right = chars[B.BL], chars[B.BB], chars[B.BV], chars[B.BR]
        top_cross, bottom_cross, straight = chars[B.BV], chars[B.BV], chars[B.BB]
    else:
        raise TableError(f"unknown separator position: {position!r}")

    if all(_is_blank(c) for c in (left, inner, cross, right)):
        return ""

    visible = (CellType.COMMON, CellType.GROUP_MASTER)
    parts = [" " * properties.margins.left]
    for col, width in enumerate(col_widths):
        if col == 0:
            parts.append(left)
        else:
            top, bottom = top_types[col], bottom_types[col]
            if top in visible and bottom in visible:
                parts.append(cross)
            elif top is CellType.GROUP_SLAVE and bottom is CellType.GROUP_SLAVE:
                parts.append(straight)
            elif top is CellType.GROUP_SLAVE:
                parts.append(top_cross)
            else:
                parts.append(bottom_cross)
        parts.append(inner * width)
    parts.append(right)
    parts.append(" " * properties.margins.right)
    parts.append("\n")
    return "".join(parts)


def render_row(
    row: Row,
    properties: TableProperties,
    row_index: int,
    col_widths: Sequence[int],
    height: int,
) -> str:
    """Draw ``height`` lines of ``row`` using the given column widths."""
    if row is None:
        raise TableError("no row to render")
    if len(row) > len(col_widths):
        raise TableError(
            f"row has {len(row)} cells but only {len(col_widths)} column widths were given"
        )

    style = properties.border_style
    if _row_type(properties, row_index) == RowType.HEADER:
        chars = style.header_border_chars
    else:
        chars = style.border_chars
    left, inner, right = chars[B.LL], chars[B.IV], chars[B.RR]
    margins = properties.margins
    total = len(col_widths)

    lines = []
    for line in range(height):
        parts = [" " * margins.left, left]
        col = 0
        while col < total:
            if col < len(row):
                master = col
                span = row.group_size(master)
                width = col_widths[master]
                for slave in range(master + 1, master + span):
                    width += col_widths[slave] + _COLUMN_SEPARATOR_LENGTH
                    col += 1
                parts.append(row.cells[master].render_line(line, properties, row_index, master, width))
            else:
                parts.append(" " * col_widths[col])
            if col < total - 1:
                parts.append(inner)
            col += 1
        parts.extend((right, " " * margins.right, "\n"))
        lines.append("".join(parts))
    return "".join(lines)


def table_geometry(
    rows: Sequence[Row],
    properties: TableProperties,
) -> tuple[list[int], list[int]]:
    """Visible width of every column and height of every row.

    A spanning cell that is wider than the columns it covers widens
    them evenly, the first columns taking any remainder.
    """
    cols = max((len(row) for row in rows), default=0)
    widths = [0] * cols
    heights = [0] * len(rows)
    masters: list[tuple[int, int, int]] = []

    for row_index, row in enumerate(rows):
        for col, cell in enumerate(row.cells):
            heights[row_index] = max(heights[row_index], cell.hint_height(properties, row_index, col))
            if cell.cell_type is CellType.COMMON:
                widths[col] = max(widths[col], cell.hint_width(properties, row_index, col, Geometry.VISIBLE))
            elif cell.cell_type is CellType.GROUP_MASTER:
                masters.append((row_index, col, row.group_size(col)))

    for row_index, col, span in masters:
        cell = rows[row_index].cells[col]
        needed = cell.hint_width(properties, row_index, col, Geometry.VISIBLE)
        combined = sum(widths[col:col + span]) + (span - 1) * _COLUMN_SEPARATOR_LENGTH
        if combined < needed:
            extra, remainder = divmod(needed - combined, span)
            for offset in range(span):
                widths[col + offset] += extra + (1 if offset < remainder else 0)

    return widths, heights


def render_table(
    rows: Sequence[Row],
    separators: Sequence[Separator | None],
    properties: TableProperties,
) -> str:
    """Draw the whole table, margins included; an empty table gives ''."""
    if not rows:
        return ""
    widths, heights = table_geometry(rows, properties)
    margins = properties.margins
    line_width = margins.left + margins.right + sum(widths) + len(widths) + 1
    blank = " " * line_width + "\n"

    def separator_at(index: int) -> Separator | None:
        return separators[index] if index < len(separators) else None

    parts = [blank * margins.top]
    previous: Row | None = None
    for index, row in enumerate(rows):
        position = SeparatorPosition.TOP if index == 0 else SeparatorPosition.INSIDE
        parts.append(
            render_separator(properties, index, widths, previous, row, position, separator_at(index))
        )
        parts.append(render_row(row, properties, index, widths, heights[index]))
        previous = row
    parts.append(
        render_separator(
            properties, len(rows), widths, previous, None,
            SeparatorPosition.BOTTOM, separator_at(len(rows)),
        )
    )
    parts.append(blank * margins.bottom)
    return "".join(parts)