# celltable

Build plain-text tables for the terminal: borders in many styles, header
rows, horizontal separators, cells spanning several columns, per-cell
alignment and padding, margins around the table, and ANSI colours and text
styles. Cell text may hold several lines, and its width is measured in
terminal columns (with `wcwidth`), so wide characters line up.

This is a library only; it has no command-line program.

## Installing

```
pip install celltable
```

## A first table

```python
from celltable.properties import CellProperty, RowType
from celltable.table import Table

table = Table()
table.set_cell_prop(0, None, CellProperty.ROW_TYPE, RowType.HEADER)
table.write_ln("N", "Driver", "Time", "Avg Speed")
table.write_ln("1", "Ricciardo", "1:25.945", "222.128")
table.write_ln("2", "Hamilton", "1:26.373", "221.027")
table.add_separator()
table.write_ln("3", "Verstappen", "1:26.469", "220.782")

print(table.to_string())
```

`str(table)` gives the same text. A table with no rows draws as an empty
string.

## Filling a table

A table keeps a current position, `cur_row` and `cur_col`. Every written
cell moves the position one column to the right; the `_ln` variants and
`Table.ln()` move it to the start of the next row. `Table.set_cur_cell(row, col)`
jumps anywhere, and rows and cells that do not exist yet are created as
needed.

- `write(*cells)` / `write_ln(*cells)` write cells one after another; at
  least one cell is required.
- `row_write(cells)` / `row_write_ln(cells)` write an iterable of cells.
- `table_write(rows)` / `table_write_ln(rows)` write an iterable of rows.
- `printf(fmt, *args)` / `printf_ln(fmt, *args)` format a string with the
  `%` operator and split the result into cells at the column separator,
  `|` by default. They return the number of cells written:

```python
table = Table()
table.printf_ln("N|Planet|Speed, km/s")
table.printf_ln("%d|%s|%5.2f", 1, "Mercury", 47.362)
table.printf_ln("%d|%s|%5.2f", 2, "Venus", 35.02)
print(table.to_string())
```

If the arguments bring extra separators into a one-cell format, the whole
result is kept as one cell; any other change in the number of cells raises
`TableError`. The separator for all tables is changed with
`celltable.table.set_default_printf_field_separator`.

## Styling

- `Table.set_border_style(style)` picks the border characters, either by
  the name of a built-in style or with a `celltable.styles.BorderStyle`.
  The built-in names (`basic`, `basic2`, `simple`, `plain`, `dot`, `empty`,
  `empty2`, `solid`, `solid_round`, `nice`, `double`, `double2`, `bold`,
  `bold2`, `frame`) are listed by `celltable.styles.style_names()` and
  fetched with `celltable.styles.builtin_style(name)`. A simple custom
  border is described with `celltable.borders.BorderChars` and expanded into
  a style by `celltable.borders.border_style_from_chars`.
- `Table.set_cell_prop(row, col, prop, value)` sets a
  `celltable.properties.CellProperty` for one cell; `None` as the row or
  the column means any row or any column, so a property can be set for a
  whole row, a whole column or the whole table. `celltable.table.CUR_ROW`
  and `CUR_COLUMN` stand for the current position. The properties are text
  alignment (`TextAlign`), row type (`RowType`, to mark header rows),
  padding on each side, minimum width, height of an empty cell, foreground
  and background colours (`celltable.colors.Color`) and text styles
  (`celltable.colors.TextStyle`). Text styles accumulate until reset with
  `TextStyle.DEFAULT`. A value is looked up for the cell, then its column,
  then its row, then the whole table, then the global default.
- `Table.set_tbl_prop(prop, value)` sets a `TableProperty`: the margins
  around the whole table.
- `Table.set_cell_span(row, col, span)` merges a cell with the cells to its
  right; the span must be at least 2.

Global defaults are changed with `set_default_border_style`,
`set_default_cell_prop` and `set_default_tbl_prop` in `celltable.table`.
The border style applies to tables that have no properties of their own
and to those created afterwards; the margins apply to tables whose
properties are created afterwards.

The width of characters can be overridden with
`celltable.text.set_width_function(func)`: `func` receives one character
and returns its width, or `None` to use the standard terminal width.

Invalid values, such as negative padding, an unknown table property or a
span shorter than 2, raise `celltable.properties.TableError`.

`Table.copy()` returns an independent copy of a table with its contents,
separators, properties and current position.