from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from minestake.components.cell import Cell, CellKind

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable rows x cols grid of cells.

    Cell kinds never change after generation; revealing a cell yields a new
    Board sharing every untouched row with the old one.
    """

    rows: int
    cols: int
    cells: Tuple[Tuple[Cell, ...], ...]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def count(self, kind: CellKind) -> int:
        return sum(1 for row in self.cells for cell in row if cell.kind is kind)

    @property
    def penalty_count(self) -> int:
        return self.count(CellKind.PENALTY)

    @property
    def reward_count(self) -> int:
        return self.rows * self.cols - self.penalty_count

    def with_revealed(self, row: int, col: int) -> Board:
        target = self.cells[row]
        new_row = target[:col] + (target[col].reveal(),) + target[col + 1:]
        cells = self.cells[:row] + (new_row,) + self.cells[row + 1:]
        return Board(rows=self.rows, cols=self.cols, cells=cells)
