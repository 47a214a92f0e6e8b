"""Table cells: their text, their size and how each of their lines is drawn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .properties import CellProperty, TableError, TableProperties, TextAlign
from .text import text_width


class CellType(Enum):
    """Role of a cell in a horizontal span."""

    COMMON = "common"
    GROUP_MASTER = "group_master"
    GROUP_SLAVE = "group_slave"


class Geometry(Enum):
    """What a width measures: visible columns or the string with escape codes."""

    VISIBLE = "visible"
    INTERN_REPR = "intern_repr"


@dataclass
class Cell:
    """One cell of a row."""

    text: str = ""
    cell_type: CellType = CellType.COMMON

    def __post_init__(self) -> None:
        self.set_text(self.text)

    def copy(self) -> Cell:
        """Return an independent copy of this cell."""
        return Cell(self.text, self.cell_type)

    def set_text(self, text: str) -> None:
        """Replace the content of the cell."""
        if not isinstance(text, str):
            raise TypeError(f"cell text must be a string, got {type(text).__name__}")
        self.text = text

    @property
    def lines(self) -> list[str]:
        """Lines of the content; an empty cell has none."""
        return self.text.split("\n") if self.text else []

    @property
    def text_width(self) -> int:
        """Visible width of the widest line of content."""
        return max((text_width(line) for line in self.lines), default=0)

    @property
    def text_height(self) -> int:
        """Number of lines of content."""
        return len(self.lines)

    def _style_tags(self, properties: TableProperties, row: int, col: int) -> tuple[str, str, str, str]:
        return (
            properties.style_tag_for_cell(row, col),
            properties.reset_style_tag_for_cell(row, col),
            properties.style_tag_for_content(row, col),
            properties.reset_style_tag_for_content(row, col),
        )

    def hint_width(
        self,
        properties: TableProperties,
        row: int,
        col: int,
        geometry: Geometry = Geometry.VISIBLE,
    ) -> int:
        """Width the cell needs, paddings included, at least its minimum width."""
        left = properties.cell_property(row, col, CellProperty.LEFT_PADDING)
        right = properties.cell_property(row, col, CellProperty.RIGHT_PADDING)
        result = max(
            left + right + self.text_width,
            properties.cell_property(row, col, CellProperty.MIN_WIDTH),
        )
        if geometry is Geometry.INTERN_REPR:
            result += sum(len(tag) for tag in self._style_tags(properties, row, col))
        return result

    def hint_height(self, properties: TableProperties, row: int, col: int) -> int:
        """Number of lines the cell needs, paddings included."""
        top = properties.cell_property(row, col, CellProperty.TOP_PADDING)
        bottom = properties.cell_property(row, col, CellProperty.BOTTOM_PADDING)
        height = self.text_height
        if height == 0:
            height = properties.cell_property(row, col, CellProperty.EMPTY_STR_HEIGHT)
        return top + bottom + height

    def render_line(
        self,
        line: int,
        properties: TableProperties,
        row: int,
        col: int,
        width: int,
    ) -> str:
        """Draw line ``line`` of the cell, ``width`` visible columns wide."""
        if width < self.hint_width(properties, row, col, Geometry.VISIBLE):
            raise TableError(f"width {width} is too small for cell at ({row}, {col})")

        top = properties.cell_property(row, col, CellProperty.TOP_PADDING)
        left = properties.cell_property(row, col, CellProperty.LEFT_PADDING)
        right = properties.cell_property(row, col, CellProperty.RIGHT_PADDING)
        cell_tag, cell_reset, content_tag, content_reset = self._style_tags(properties, row, col)

        if (
            line >= self.hint_height(properties, row, col)
            or line < top
            or line >= top + self.text_height
        ):
            return cell_tag + content_tag + content_reset + " " * width + cell_reset

        text_line = self.lines[line - top]
        gap = width - left - right - text_width(text_line)
        align = properties.cell_property(row, col, CellProperty.TEXT_ALIGN)
        if align == TextAlign.CENTER:
            before, after = gap // 2, gap - gap // 2
        elif align == TextAlign.RIGHT:
            before, after = gap, 0
        else:
            before, after = 0, gap

        return "".join((
            cell_tag,
            " " * left,
            " " * before,
            content_tag,
            text_line,
            content_reset,
            " " * after,
            " " * right,
            cell_reset,
        ))