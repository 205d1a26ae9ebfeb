from __future__ import annotations

from dataclasses import dataclass

from minestake.constants import (
    BOARD_MAX_WIDTH_PCT,
    CELL_GAP,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    MIN_CELL_SIZE,
)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    rows: int
    cols: int
    cell_size: int
    left: float
    bottom: float
    gap: int = CELL_GAP

    @property
    def width(self) -> float:
        return self.cols * self.cell_size

    @property
    def height(self) -> float:
        return self.rows * self.cell_size

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        # Row 0 is drawn at the top, matching the reading order of the grid.
        x = self.left + col * self.cell_size + self.cell_size / 2
        y = self.bottom + (self.rows - 1 - row) * self.cell_size + self.cell_size / 2
        return x, y

    def cell_at_point(self, x: float, y: float) -> tuple[int, int] | None:
        """Map a window point to (row, col), or None when it misses every cell."""
        if not (self.left <= x < self.left + self.width):
            return None
        if not (self.bottom <= y < self.bottom + self.height):
            return None
        col = int((x - self.left) // self.cell_size)
        row_from_bottom = int((y - self.bottom) // self.cell_size)
        row = self.rows - 1 - row_from_bottom
        # Clicks that land in the gap between cells are ignored.
        cx, cy = self.cell_center(row, col)
        half = (self.cell_size - self.gap) / 2
        if abs(x - cx) > half or abs(y - cy) > half:
            return None
        return row, col


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int) -> BoardGeometry:
    """Fit the board between the header and footer, centred horizontally."""
    usable_h = max(window_height - HEADER_HEIGHT - FOOTER_HEIGHT, 0)
    by_w = window_width * BOARD_MAX_WIDTH_PCT / cols
    by_h = usable_h / rows
    cell_size = max(int(min(by_w, by_h)), MIN_CELL_SIZE)
    width = cols * cell_size
    height = rows * cell_size
    left = (window_width - width) / 2
    bottom = FOOTER_HEIGHT + (usable_h - height) / 2
    return BoardGeometry(rows=rows, cols=cols, cell_size=cell_size, left=left, bottom=bottom)
