import pytest

from celltable.cell import Cell, CellType, Geometry
from celltable.colors import Color
from celltable.properties import CellProperty, TableError, TableProperties, TextAlign


@pytest.fixture
def props():
    return TableProperties()


def test_default_cell_is_common_and_empty():
    cell = Cell()
    assert cell.text == ""
    assert cell.cell_type is CellType.COMMON
    assert cell.lines == []


def test_set_text_rejects_non_string():
    cell = Cell()
    with pytest.raises(TypeError):
        cell.set_text(42)


def test_copy_is_independent():
    cell = Cell("abc", CellType.GROUP_MASTER)
    dup = cell.copy()
    dup.set_text("xyz")
    dup.cell_type = CellType.COMMON
    assert cell.text == "abc"
    assert cell.cell_type is CellType.GROUP_MASTER


def test_hint_width_grows_with_text(props):
    short = Cell("ab").hint_width(props, 0, 0, Geometry.VISIBLE)
    long = Cell("abcd").hint_width(props, 0, 0, Geometry.VISIBLE)
    assert long - short == len("abcd") - len("ab")


def test_hint_width_uses_widest_line(props):
    multi = Cell("a\nabcdef").hint_width(props, 0, 0)
    single = Cell("abcdef").hint_width(props, 0, 0)
    assert multi == single


def test_hint_width_respects_min_width(props):
    props.cell_properties.set(0, 0, CellProperty.MIN_WIDTH, 20)
    assert Cell("ab").hint_width(props, 0, 0) == 20


def test_hint_height_counts_lines(props):
    text = "a\nb\nc"
    assert Cell(text).hint_height(props, 0, 0) == len(text.split("\n"))


def test_hint_height_of_empty_cell_uses_empty_string_height(props):
    assert Cell("").hint_height(props, 0, 0) == 1


def test_hint_height_includes_paddings(props):
    base = Cell("x").hint_height(props, 0, 0)
    props.cell_properties.set(0, 0, CellProperty.TOP_PADDING, 2)
    props.cell_properties.set(0, 0, CellProperty.BOTTOM_PADDING, 3)
    assert Cell("x").hint_height(props, 0, 0) == base + 2 + 3


def test_render_line_left_aligned(props):
    out = Cell("abc").render_line(0, props, 0, 0, 10)
    assert out.startswith(" abc")
    assert len(out) == 10
    assert out.strip() == "abc"


def test_render_line_right_aligned(props):
    props.cell_properties.set(None, 0, CellProperty.TEXT_ALIGN, TextAlign.RIGHT)
    out = Cell("abc").render_line(0, props, 0, 0, 10)
    assert out.endswith("abc ")
    assert len(out) == 10


def test_render_line_centered(props):
    props.cell_properties.set(None, 0, CellProperty.TEXT_ALIGN, TextAlign.CENTER)
    out = Cell("ab").render_line(0, props, 0, 0, 8)
    before = len(out) - len(out.lstrip(" "))
    after = len(out) - len(out.rstrip(" "))
    assert len(out) == 8
    assert abs(before - after) <= 1


def test_render_line_beyond_content_is_blank(props):
    out = Cell("abc").render_line(5, props, 0, 0, 7)
    assert out == " " * 7


def test_render_line_padding_rows_are_blank(props):
    props.cell_properties.set(0, 0, CellProperty.TOP_PADDING, 1)
    cell = Cell("abc")
    assert cell.render_line(0, props, 0, 0, 6).strip() == ""
    assert cell.render_line(1, props, 0, 0, 6).strip() == "abc"


def test_render_second_line(props):
    cell = Cell("first\nsecond")
    assert cell.render_line(1, props, 0, 0, 10).strip() == "second"


def test_render_line_too_narrow_raises(props):
    cell = Cell("abcdef")
    with pytest.raises(TableError):
        cell.render_line(0, props, 0, 0, 3)


def test_colored_content_has_escape_codes(props):
    props.cell_properties.set(0, 0, CellProperty.CONT_FG_COLOR, Color.RED)
    cell = Cell("abc")
    out = cell.render_line(0, props, 0, 0, 10)
    assert "\033[31m" in out
    assert "\033[0m" in out
    visible = cell.hint_width(props, 0, 0, Geometry.VISIBLE)
    internal = cell.hint_width(props, 0, 0, Geometry.INTERN_REPR)
    assert internal > visible