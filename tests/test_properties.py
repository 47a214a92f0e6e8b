import pytest

from celltable.colors import Color, TextStyle
from celltable.properties import (
    ANY_COLUMN,
    ANY_ROW,
    CellPropContainer,
    CellProperty,
    CellProps,
    RowType,
    TableError,
    TableMargins,
    TableProperties,
    TableProperty,
    TextAlign,
    default_table_properties,
    set_default_cell_property,
    set_default_table_property,
)


def test_defaults():
    props = TableProperties()
    assert props.cell_property(0, 0, CellProperty.LEFT_PADDING) == 1
    assert props.cell_property(0, 0, CellProperty.RIGHT_PADDING) == 1
    assert props.cell_property(0, 0, CellProperty.TOP_PADDING) == 0
    assert props.cell_property(0, 0, CellProperty.EMPTY_STR_HEIGHT) == 1
    assert props.cell_property(0, 0, CellProperty.TEXT_ALIGN) == TextAlign.LEFT
    assert props.cell_property(0, 0, CellProperty.ROW_TYPE) == RowType.COMMON


def test_hierarchy_order():
    props = TableProperties()
    props.cell_properties.set(ANY_ROW, 0, CellProperty.TEXT_ALIGN, TextAlign.CENTER)
    props.cell_properties.set(0, ANY_COLUMN, CellProperty.TEXT_ALIGN, TextAlign.RIGHT)
    assert props.cell_property(0, 0, CellProperty.TEXT_ALIGN) == TextAlign.CENTER
    assert props.cell_property(1, 0, CellProperty.TEXT_ALIGN) == TextAlign.CENTER
    assert props.cell_property(0, 1, CellProperty.TEXT_ALIGN) == TextAlign.RIGHT
    assert props.cell_property(1, 1, CellProperty.TEXT_ALIGN) == TextAlign.LEFT
    props.cell_properties.set(0, 0, CellProperty.TEXT_ALIGN, TextAlign.LEFT)
    assert props.cell_property(0, 0, CellProperty.TEXT_ALIGN) == TextAlign.LEFT


def test_unset_flag_falls_back():
    props = TableProperties()
    props.cell_properties.set(2, 3, CellProperty.MIN_WIDTH, 7)
    assert props.cell_property(2, 3, CellProperty.MIN_WIDTH) == 7
    assert props.cell_property(2, 3, CellProperty.LEFT_PADDING) == 1


def test_any_any_created_from_defaults():
    cont = CellPropContainer()
    anyany = cont.get_or_create(ANY_ROW, ANY_COLUMN)
    assert anyany.flags & CellProperty.LEFT_PADDING
    assert anyany.padding_left == 1
    specific = cont.get_or_create(1, 1)
    assert specific.flags == CellProperty(0)
    assert cont.get_or_create(1, 1) is specific
    assert len(cont) == 2
    assert cont.get(5, 5) is None


def test_negative_values_rejected():
    props = CellProps()
    with pytest.raises(TableError):
        props.set(CellProperty.LEFT_PADDING, -1)
    with pytest.raises(TableError):
        props.set(CellProperty.MIN_WIDTH, -3)


def test_text_style_accumulates_and_resets():
    props = CellProps()
    props.set(CellProperty.CONT_TEXT_STYLE, TextStyle.BOLD)
    props.set(CellProperty.CONT_TEXT_STYLE, TextStyle.ITALIC)
    assert props.get(CellProperty.CONT_TEXT_STYLE) == TextStyle.BOLD | TextStyle.ITALIC
    props.set(CellProperty.CONT_TEXT_STYLE, TextStyle.DEFAULT)
    assert props.get(CellProperty.CONT_TEXT_STYLE) == TextStyle.DEFAULT


def test_style_tags_empty_by_default():
    props = TableProperties()
    assert props.style_tag_for_cell(0, 0) == ""
    assert props.reset_style_tag_for_cell(0, 0) == ""
    assert props.style_tag_for_content(0, 0) == ""
    assert props.reset_style_tag_for_content(0, 0) == ""


def test_style_tags_with_colors():
    props = TableProperties()
    props.cell_properties.set(0, 0, CellProperty.CELL_BG_COLOR, Color.RED)
    props.cell_properties.set(0, 0, CellProperty.CONT_FG_COLOR, Color.GREEN)
    assert props.style_tag_for_cell(0, 0) == "\033[41m"
    assert props.reset_style_tag_for_cell(0, 0) == "\033[0m"
    assert props.style_tag_for_content(0, 0) == "\033[32m"
    assert props.reset_style_tag_for_content(0, 0) == "\033[0m" + props.style_tag_for_cell(0, 0)


def test_copy_is_independent():
    props = TableProperties()
    props.cell_properties.set(0, 0, CellProperty.MIN_WIDTH, 4)
    props.set_table_property(TableProperty.LEFT_MARGIN, 2)
    clone = props.copy()
    clone.cell_properties.set(0, 0, CellProperty.MIN_WIDTH, 9)
    clone.set_table_property(TableProperty.LEFT_MARGIN, 5)
    clone.border_style.border_chars[0] = "#"
    assert props.cell_property(0, 0, CellProperty.MIN_WIDTH) == 4
    assert props.margins.left == 2
    assert props.border_style.border_chars[0] == "+"
    assert clone.cell_property(0, 0, CellProperty.MIN_WIDTH) == 9


def test_margins():
    margins = TableMargins()
    margins.set(TableProperty.TOP_MARGIN, 3)
    margins.set(TableProperty.BOTTOM_MARGIN, 4)
    assert (margins.top, margins.bottom, margins.left, margins.right) == (3, 4, 0, 0)
    with pytest.raises(TableError):
        margins.set(TableProperty.LEFT_MARGIN, -1)
    with pytest.raises(TableError):
        margins.set(TableProperty(0), 1)


def test_default_table_property_affects_new_properties_only():
    try:
        set_default_table_property(TableProperty.LEFT_MARGIN, 6)
        assert TableProperties().margins.left == 6
        assert default_table_properties().margins.left == 0
    finally:
        set_default_table_property(TableProperty.LEFT_MARGIN, 0)
    assert TableProperties().margins.left == 0


def test_default_cell_property():
    try:
        set_default_cell_property(CellProperty.LEFT_PADDING, 3)
        assert TableProperties().cell_property(4, 4, CellProperty.LEFT_PADDING) == 3
    finally:
        set_default_cell_property(CellProperty.LEFT_PADDING, 1)
    assert TableProperties().cell_property(4, 4, CellProperty.LEFT_PADDING) == 1


def test_default_style_is_basic():
    props = default_table_properties()
    assert props.border_style.border_chars[0] == "+"
    assert props.border_style.header_border_chars[4] == "|"
    assert TableProperties().border_style == props.border_style
    assert TableProperties().border_style is not props.border_style