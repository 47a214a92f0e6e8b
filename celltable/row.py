"""Rows of cells, horizontal separators and cell spans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .cell import Cell, CellType
from .properties import TableError


@dataclass
class Separator:
    """A horizontal separator line drawn above a row."""

    enabled: bool = False

    def copy(self) -> Separator:
        """Return an independent copy."""
        return Separator(self.enabled)


@dataclass
class Row:
    """An ordered list of cells."""

    cells: list[Cell] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def copy(self) -> Row:
        """Return an independent copy of the row and its cells."""
        return Row([cell.copy() for cell in self.cells])

    def cell(self, col: int) -> Cell | None:
        """The cell in column ``col``, or None if the row is shorter."""
        if 0 <= col < len(self.cells):
            return self.cells[col]
        return None

    def cell_or_create(self, col: int) -> Cell:
        """The cell in column ``col``, adding empty cells as needed."""
        if col < 0:
            raise TableError(f"column must not be negative, got {col}")
        while len(self.cells) <= col:
            self.cells.append(Cell())
        return self.cells[col]

    def insert_cells(self, other: Row, pos: int) -> None:
        """Put the cells of ``other`` at ``pos``, overwriting cells already there.

        The overwritten cells are moved into ``other``.
        """
        if pos < 0:
            raise TableError(f"position must not be negative, got {pos}")
        if not other.cells:
            return
        while len(self.cells) < pos:
            self.cells.append(Cell())
        end = pos + len(other.cells)
        displaced = self.cells[pos:end]
        self.cells[pos:end] = other.cells
        other.cells = displaced

    def group_size(self, col: int) -> int:
        """Number of columns the cell at ``col`` covers; 0 if there is none."""
        master = self.cell(col)
        if master is None:
            return 0
        if master.cell_type is not CellType.GROUP_MASTER:
            return 1
        size = 1
        for cell in self.cells[col + 1:]:
            if cell.cell_type is not CellType.GROUP_SLAVE:
                break
            size += 1
        return size

    def cell_types(self, count: int) -> list[CellType]:
        """Types of the first ``count`` cells; missing cells count as common."""
        return [
            cell.cell_type if (cell := self.cell(col)) is not None else CellType.COMMON
            for col in range(count)
        ]

    def set_cell_span(self, col: int, span: int) -> None:
        """Make the cell at ``col`` span ``span`` columns (at least 2)."""
        if span < 2:
            raise TableError(f"span must be at least 2, got {span}")
        self.cell_or_create(col).cell_type = CellType.GROUP_MASTER
        for slave_col in range(col + 1, col + span):
            self.cell_or_create(slave_col).cell_type = CellType.GROUP_SLAVE