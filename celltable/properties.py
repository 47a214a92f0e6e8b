"""Cell and table properties, with hierarchical lookup of cell settings."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from .colors import (
    Color,
    TextStyle,
    cell_reset_tag,
    cell_style_tag,
    content_reset_tag,
    content_style_tag,
)
from .styles import BorderStyle, builtin_style

ANY_ROW = None
ANY_COLUMN = None


class TableError(ValueError):
    """Raised when a property or argument is invalid."""


class TextAlign(IntEnum):
    """Horizontal alignment of cell text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class RowType(IntEnum):
    """Kind of row; header rows use the header border characters."""

    COMMON = 0
    HEADER = 1


class CellProperty(IntFlag):
    """Properties that may be set on cells, rows and columns."""

    MIN_WIDTH = 1 << 0
    TEXT_ALIGN = 1 << 1
    TOP_PADDING = 1 << 2
    BOTTOM_PADDING = 1 << 3
    LEFT_PADDING = 1 << 4
    RIGHT_PADDING = 1 << 5
    EMPTY_STR_HEIGHT = 1 << 6
    ROW_TYPE = 1 << 7
    CONT_FG_COLOR = 1 << 8
    CELL_BG_COLOR = 1 << 9
    CONT_BG_COLOR = 1 << 10
    CELL_TEXT_STYLE = 1 << 11
    CONT_TEXT_STYLE = 1 << 12


class TableProperty(IntFlag):
    """Properties of the table as a whole."""

    LEFT_MARGIN = 1 << 0
    TOP_MARGIN = 1 << 1
    RIGHT_MARGIN = 1 << 2
    BOTTOM_MARGIN = 1 << 3


# Order matters: when several bits are given, the first match receives the value.
_CELL_FIELDS: dict[CellProperty, str] = {
    CellProperty.MIN_WIDTH: "min_width",
    CellProperty.TEXT_ALIGN: "align",
    CellProperty.TOP_PADDING: "padding_top",
    CellProperty.BOTTOM_PADDING: "padding_bottom",
    CellProperty.LEFT_PADDING: "padding_left",
    CellProperty.RIGHT_PADDING: "padding_right",
    CellProperty.EMPTY_STR_HEIGHT: "empty_string_height",
    CellProperty.ROW_TYPE: "row_type",
    CellProperty.CONT_FG_COLOR: "content_fg_color",
    CellProperty.CONT_BG_COLOR: "content_bg_color",
    CellProperty.CELL_BG_COLOR: "cell_bg_color",
    CellProperty.CELL_TEXT_STYLE: "cell_text_style",
    CellProperty.CONT_TEXT_STYLE: "content_text_style",
}

_NON_NEGATIVE = (
    CellProperty.MIN_WIDTH
    | CellProperty.TOP_PADDING
    | CellProperty.BOTTOM_PADDING
    | CellProperty.LEFT_PADDING
    | CellProperty.RIGHT_PADDING
    | CellProperty.EMPTY_STR_HEIGHT
)

_TEXT_STYLE_PROPS = CellProperty.CELL_TEXT_STYLE | CellProperty.CONT_TEXT_STYLE


def _first_matching(prop: int) -> CellProperty:
    for candidate in _CELL_FIELDS:
        if prop & candidate:
            return candidate
    raise TableError(f"unknown cell property: {prop!r}")


@dataclass
class CellProps:
    """Property values set for one cell position (row and column may be 'any')."""

    row: int | None = ANY_ROW
    col: int | None = ANY_COLUMN
    flags: CellProperty = CellProperty(0)
    min_width: int = 0
    align: int = TextAlign.LEFT
    padding_top: int = 0
    padding_bottom: int = 0
    padding_left: int = 0
    padding_right: int = 0
    empty_string_height: int = 0
    row_type: int = RowType.COMMON
    content_fg_color: int = Color.DEFAULT
    content_bg_color: int = Color.DEFAULT
    cell_bg_color: int = Color.DEFAULT
    cell_text_style: int = 0
    content_text_style: int = 0

    def get(self, prop: CellProperty) -> int:
        """Value of ``prop`` here, or the global default if it is not set."""
        key = _first_matching(prop)
        source = self if self.flags & key else _default_cell_props
        return getattr(source, _CELL_FIELDS[key])

    def set(self, prop: CellProperty, value: int) -> None:
        """Set ``prop``; text styles accumulate unless reset with DEFAULT."""
        key = _first_matching(prop)
        value = int(value)
        if key & _NON_NEGATIVE and value < 0:
            raise TableError(f"{key.name} must not be negative, got {value}")
        self.flags = CellProperty(self.flags | prop)
        name = _CELL_FIELDS[key]
        if key & _TEXT_STYLE_PROPS and value != TextStyle.DEFAULT:
            value = getattr(self, name) | value
        setattr(self, name, value)


_default_cell_props = CellProps(
    flags=CellProperty(
        CellProperty.MIN_WIDTH
        | CellProperty.TEXT_ALIGN
        | CellProperty.TOP_PADDING
        | CellProperty.BOTTOM_PADDING
        | CellProperty.LEFT_PADDING
        | CellProperty.RIGHT_PADDING
        | CellProperty.EMPTY_STR_HEIGHT
        | CellProperty.CONT_FG_COLOR
        | CellProperty.CELL_BG_COLOR
        | CellProperty.CONT_BG_COLOR
        | CellProperty.CELL_TEXT_STYLE
        | CellProperty.CONT_TEXT_STYLE
    ),
    min_width=0,
    align=TextAlign.LEFT,
    padding_top=0,
    padding_bottom=0,
    padding_left=1,
    padding_right=1,
    empty_string_height=1,
    row_type=RowType.COMMON,
    content_fg_color=Color.DEFAULT,
    content_bg_color=Color.DEFAULT,
    cell_bg_color=Color.DEFAULT,
    cell_text_style=TextStyle.DEFAULT,
    content_text_style=TextStyle.DEFAULT,
)


@dataclass
class CellPropContainer:
    """Collection of property sets keyed by (row, column)."""

    items: list[CellProps] = field(default_factory=list)

    def get(self, row: int | None, col: int | None) -> CellProps | None:
        """Properties stored for exactly this position, or None."""
        return next((p for p in self.items if p.row == row and p.col == col), None)

    def get_or_create(self, row: int | None, col: int | None) -> CellProps:
        """Properties for this position, created if absent.

        A new entry for any row and any column starts as a copy of the
        global defaults; any other new entry starts empty.
        """
        found = self.get(row, col)
        if found is not None:
            return found
        if row is ANY_ROW and col is ANY_COLUMN:
            props = _copy.copy(_default_cell_props)
        else:
            props = CellProps()
        props.row = row
        props.col = col
        self.items.append(props)
        return props

    def set(self, row: int | None, col: int | None, prop: CellProperty, value: int) -> None:
        """Set ``prop`` for this position."""
        self.get_or_create(row, col).set(prop, value)

    def copy(self) -> CellPropContainer:
        """Return an independent copy."""
        return CellPropContainer([_copy.copy(p) for p in self.items])

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class TableMargins:
    """Blank space around the whole table."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def set(self, prop: TableProperty, value: int) -> None:
        """Set one margin; values must not be negative."""
        value = int(value)
        if value < 0:
            raise TableError(f"margin must not be negative, got {value}")
        if prop & TableProperty.LEFT_MARGIN:
            self.left = value
        elif prop & TableProperty.TOP_MARGIN:
            self.top = value
        elif prop & TableProperty.RIGHT_MARGIN:
            self.right = value
        elif prop & TableProperty.BOTTOM_MARGIN:
            self.bottom = value
        else:
            raise TableError(f"unknown table property: {prop!r}")


_default_margins = TableMargins()


class TableProperties:
    """Border style, cell properties and margins of one table."""

    def __init__(
        self,
        border_style: BorderStyle | None = None,
        cell_properties: CellPropContainer | None = None,
        margins: TableMargins | None = None,
    ) -> None:
        if border_style is None:
            border_style = _default_table_properties.border_style.copy()
        self.border_style = border_style
        self.cell_properties = cell_properties if cell_properties is not None else CellPropContainer()
        self.margins = margins if margins is not None else _copy.copy(_default_margins)

    def cell_property(self, row: int | None, col: int | None, prop: CellProperty) -> int:
        """Look ``prop`` up for a cell, then its column, its row, the table, the defaults."""
        candidates = [(row, col), (ANY_ROW, col), (row, ANY_COLUMN), (ANY_ROW, ANY_COLUMN)]
        key = _first_matching(prop)
        seen = set()
        for position in candidates:
            if position in seen:
                continue
            seen.add(position)
            props = self.cell_properties.get(*position)
            if props is not None and props.flags & key:
                return props.get(key)
        return _default_cell_props.get(key)

    def set_table_property(self, prop: TableProperty, value: int) -> None:
        """Set a margin of this table."""
        self.margins.set(prop, value)

    def copy(self) -> TableProperties:
        """Return an independent copy."""
        return TableProperties(
            self.border_style.copy(),
            self.cell_properties.copy(),
            _copy.copy(self.margins),
        )

    def style_tag_for_cell(self, row: int | None, col: int | None) -> str:
        """Escape sequence that opens the cell."""
        return cell_style_tag(
            self.cell_property(row, col, CellProperty.CELL_TEXT_STYLE),
            self.cell_property(row, col, CellProperty.CELL_BG_COLOR),
        )

    def reset_style_tag_for_cell(self, row: int | None, col: int | None) -> str:
        """Escape sequence that closes the cell."""
        return cell_reset_tag(
            self.cell_property(row, col, CellProperty.CELL_TEXT_STYLE),
            self.cell_property(row, col, CellProperty.CELL_BG_COLOR),
        )

    def style_tag_for_content(self, row: int | None, col: int | None) -> str:
        """Escape sequence that opens the cell content."""
        return content_style_tag(
            self.cell_property(row, col, CellProperty.CONT_TEXT_STYLE),
            self.cell_property(row, col, CellProperty.CONT_FG_COLOR),
            self.cell_property(row, col, CellProperty.CONT_BG_COLOR),
        )

    def reset_style_tag_for_content(self, row: int | None, col: int | None) -> str:
        """Escape sequence that closes the content and restores the cell style."""
        return content_reset_tag(
            self.cell_property(row, col, CellProperty.CONT_TEXT_STYLE),
            self.cell_property(row, col, CellProperty.CONT_FG_COLOR),
            self.cell_property(row, col, CellProperty.CONT_BG_COLOR),
            self.style_tag_for_cell(row, col),
        )


_default_table_properties = TableProperties(
    builtin_style("basic"), CellPropContainer(), TableMargins()
)


def default_table_properties() -> TableProperties:
    """The shared properties used by tables that have none of their own."""
    return _default_table_properties


def set_default_cell_property(prop: CellProperty, value: int) -> None:
    """Change the global default of a cell property."""
    _default_cell_props.set(prop, value)


def set_default_table_property(prop: TableProperty, value: int) -> None:
    """Change the margins given to newly created table properties."""
    _default_margins.set(prop, value)