"""The table: filling it with text, setting its properties and drawing it."""

from __future__ import annotations

from typing import Any, Iterable

from .borders import resolve_style
from .parse import row_from_format
from .properties import (
    CellProperty,
    TableError,
    TableProperties,
    TableProperty,
    default_table_properties,
    set_default_cell_property,
    set_default_table_property,
)
from .render import render_table
from .row import Row, Separator
from .styles import BorderStyle
from .text import set_column_separator


class _Cursor:
    """Marker meaning 'the current row' or 'the current column'."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


CUR_ROW = _Cursor("CUR_ROW")
CUR_COLUMN = _Cursor("CUR_COLUMN")


def _check_index(value: Any, what: str) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise TableError(f"{what} must be a non-negative integer or None, got {value!r}")


class Table:
    """A text table filled cell by cell from a current position."""

    def __init__(self) -> None:
        self.rows: list[Row] = []
        self.separators: list[Separator] = []
        self.properties: TableProperties | None = None
        self.cur_row = 0
        self.cur_col = 0

    def __str__(self) -> str:
        return self.to_string()

    def copy(self) -> Table:
        """Return an independent copy of the table."""
        result = Table()
        result.rows = [row.copy() for row in self.rows]
        result.separators = [sep.copy() for sep in self.separators]
        result.properties = self.properties.copy() if self.properties is not None else None
        result.cur_row = self.cur_row
        result.cur_col = self.cur_col
        return result

    def ln(self) -> None:
        """Move to the first column of the next row."""
        self.cur_col = 0
        self.cur_row += 1

    def set_cur_cell(self, row: int, col: int) -> None:
        """Move the current position to ``row`` and ``col``."""
        _check_index(row, "row")
        _check_index(col, "column")
        self.cur_row = row
        self.cur_col = col

    def _row_or_create(self, index: int) -> Row:
        while len(self.rows) <= index:
            self.rows.append(Row())
        return self.rows[index]

    def _own_properties(self) -> TableProperties:
        if self.properties is None:
            self.properties = TableProperties()
        return self.properties

    def _write_cell(self, text: str) -> None:
        cell = self._row_or_create(self.cur_row).cell_or_create(self.cur_col)
        cell.set_text(text)
        self.cur_col += 1

    def printf(self, fmt: str, *args: Any) -> int:
        """Write cells from a printf-style format; returns the number of cells."""
        new_row = row_from_format(fmt, *args)
        count = len(new_row)
        self._row_or_create(self.cur_row).insert_cells(new_row, self.cur_col)
        self.cur_col += count
        return count

    def printf_ln(self, fmt: str, *args: Any) -> int:
        """Like :meth:`printf`, then move to the next row."""
        count = self.printf(fmt, *args)
        self.ln()
        return count

    def write(self, *args: str) -> None:
        """Write each argument into consecutive cells."""
        if not args:
            raise TableError("write needs at least one cell")
        for text in args:
            self._write_cell(text)

    def write_ln(self, *args: str) -> None:
        """Like :meth:`write`, then move to the next row."""
        self.write(*args)
        self.ln()

    def row_write(self, cells: Iterable[str]) -> None:
        """Write every item of ``cells`` into consecutive cells."""
        for text in cells:
            self._write_cell(text)

    def row_write_ln(self, cells: Iterable[str]) -> None:
        """Like :meth:`row_write`, then move to the next row."""
        self.row_write(cells)
        self.ln()

    def table_write(self, rows: Iterable[Iterable[str]]) -> None:
        """Write several rows; the position stays on the last one written."""
        first = True
        for cells in rows:
            if not first:
                self.ln()
            self.row_write(cells)
            first = False

    def table_write_ln(self, rows: Iterable[Iterable[str]]) -> None:
        """Like :meth:`table_write`, then move to the next row."""
        self.table_write(rows)
        self.ln()

    def add_separator(self) -> None:
        """Draw a separator line above the current row."""
        while len(self.separators) <= self.cur_row:
            self.separators.append(Separator(False))
        self.separators[self.cur_row].enabled = True

    def set_border_style(self, style: str | BorderStyle) -> None:
        """Use a built-in style by name, or a custom style, for this table."""
        self._own_properties().border_style = resolve_style(style)

    def set_cell_prop(
        self,
        row: int | None | _Cursor,
        col: int | None | _Cursor,
        prop: CellProperty,
        value: int,
    ) -> None:
        """Set a property of a cell, a row, a column (None for 'any') or the table."""
        if row is CUR_ROW:
            row = self.cur_row
        if col is CUR_COLUMN:
            col = self.cur_col
        _check_index(row, "row")
        _check_index(col, "column")
        self._own_properties().cell_properties.set(row, col, prop, value)

    def set_tbl_prop(self, prop: TableProperty, value: int) -> None:
        """Set a margin of this table."""
        self._own_properties().set_table_property(prop, value)

    def set_cell_span(self, row: int | _Cursor, col: int | _Cursor, span: int) -> None:
        """Make the cell at ``row``, ``col`` span ``span`` columns (at least 2)."""
        if span < 2:
            raise TableError(f"span must be at least 2, got {span}")
        if row is CUR_ROW:
            row = self.cur_row
        if col is CUR_COLUMN:
            col = self.cur_col
        if row is None or col is None:
            raise TableError("a cell span needs a concrete row and column")
        _check_index(row, "row")
        _check_index(col, "column")
        self._row_or_create(row).set_cell_span(col, span)

    def to_string(self) -> str:
        """Draw the table as text; an empty table gives ''."""
        properties = self.properties if self.properties is not None else default_table_properties()
        return render_table(self.rows, self.separators, properties)


def set_default_border_style(style: str | BorderStyle) -> None:
    """Border style for tables without their own, and for new table properties."""
    default_table_properties().border_style = resolve_style(style)


def set_default_cell_prop(prop: CellProperty, value: int) -> None:
    """Change the global default of a cell property."""
    set_default_cell_property(prop, value)


def set_default_tbl_prop(prop: TableProperty, value: int) -> None:
    """Change the margins that new table properties start with."""
    set_default_table_property(prop, value)


def set_default_printf_field_separator(separator: str) -> None:
    """Change the character that splits format strings into cells."""
    set_column_separator(separator)