from __future__ import annotations

import logging
import random

from minestake.components.board import Board
from minestake.components.cell import Cell, CellKind
from minestake.config import check_board_contract

logger = logging.getLogger(__name__)


def generate_board(
    rows: int,
    cols: int,
    penalty_count: int,
    rng: random.Random | None = None,
) -> Board:
    """Return a fresh board with ``penalty_count`` penalty cells placed uniformly at random.

    Penalty positions are drawn with ``Random.sample`` over the flattened grid,
    a partial shuffle that stays linear in the board size however dense the
    penalties are. Every cell starts unrevealed.
    """
    check_board_contract(rows, cols, penalty_count)
    rng = rng or random.Random()
    penalties = set(rng.sample(range(rows * cols), penalty_count))
    cells = tuple(
        tuple(
            Cell(CellKind.PENALTY if r * cols + c in penalties else CellKind.REWARD)
            for c in range(cols)
        )
        for r in range(rows)
    )
    logger.debug("Generated %dx%d board with %d penalties", rows, cols, penalty_count)
    return Board(rows=rows, cols=cols, cells=cells)
