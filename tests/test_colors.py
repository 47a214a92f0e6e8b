import pytest

from celltable.colors import (
    Color,
    TextStyle,
    cell_reset_tag,
    cell_style_tag,
    content_reset_tag,
    content_style_tag,
)


def test_default_cell_tag_is_empty():
    assert cell_style_tag(TextStyle.DEFAULT, Color.DEFAULT) == ""
    assert cell_reset_tag(TextStyle.DEFAULT, Color.DEFAULT) == ""


def test_cell_tag_bold_red_background():
    assert cell_style_tag(TextStyle.BOLD, Color.RED) == "\033[1m" + "\033[41m"
    assert cell_reset_tag(TextStyle.BOLD, Color.RED) == "\033[0m"


def test_cell_reset_for_background_only():
    assert cell_reset_tag(TextStyle.DEFAULT, Color.LIGHT_WHITE) == "\033[0m"
    assert cell_style_tag(TextStyle.DEFAULT, Color.LIGHT_WHITE) == "\033[107m"


def test_combined_styles_in_bit_order():
    tag = cell_style_tag(TextStyle.ITALIC | TextStyle.BOLD, Color.DEFAULT)
    assert tag == "\033[1m" + "\033[3m"


def test_content_tag_foreground():
    assert content_style_tag(TextStyle.DEFAULT, Color.GREEN, Color.DEFAULT) == "\033[32m"
    assert content_style_tag(TextStyle.DEFAULT, Color.LIGHT_BLUE, Color.DEFAULT) == "\033[94m"


def test_content_tag_all_parts():
    tag = content_style_tag(TextStyle.UNDERLINED, Color.BLACK, Color.LIGHT_RED)
    assert tag == "\033[4m" + "\033[30m" + "\033[101m"


def test_content_reset_reapplies_cell_tag():
    cell_tag = cell_style_tag(TextStyle.BOLD, Color.BLUE)
    reset = content_reset_tag(TextStyle.DEFAULT, Color.RED, Color.DEFAULT, cell_tag)
    assert reset == "\033[0m" + cell_tag


def test_content_reset_empty_when_default():
    assert content_reset_tag(TextStyle.DEFAULT, Color.DEFAULT, Color.DEFAULT, "\033[41m") == ""


def test_zero_text_style_is_accepted():
    assert cell_style_tag(0, Color.DEFAULT) == ""
    assert cell_reset_tag(0, Color.DEFAULT) == ""


@pytest.mark.parametrize("bad", [-1, 1 << 8])
def test_invalid_text_style_rejected(bad):
    with pytest.raises(ValueError):
        cell_style_tag(bad, Color.DEFAULT)
    with pytest.raises(ValueError):
        content_reset_tag(bad, Color.DEFAULT, Color.DEFAULT, "")


@pytest.mark.parametrize("bad", [-1, len(Color)])
def test_invalid_color_rejected(bad):
    with pytest.raises(ValueError):
        cell_style_tag(TextStyle.DEFAULT, bad)
    with pytest.raises(ValueError):
        content_style_tag(TextStyle.DEFAULT, bad, Color.DEFAULT)
    with pytest.raises(ValueError):
        cell_reset_tag(TextStyle.DEFAULT, bad)