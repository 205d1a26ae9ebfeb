from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from minestake.constants import (
    GRID_COLS,
    GRID_ROWS,
    HIGH_SCORE_KEY,
    LEADERBOARD_KEY,
    LEADERBOARD_SIZE,
    PENALTY_COUNT,
)
from minestake.errors import InvalidBoardError


def _default_save_path() -> Path:
    return Path(__file__).resolve().parents[2] / "data" / "minestake.json"


@dataclass(frozen=True)
class GameConfig:
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    penalty_count: int = PENALTY_COUNT
    leaderboard_size: int = LEADERBOARD_SIZE
    high_score_key: str = HIGH_SCORE_KEY
    leaderboard_key: str = LEADERBOARD_KEY
    save_path: Path = field(default_factory=_default_save_path)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        env = os.environ if environ is None else environ
        save_path = env.get('MINESTAKE_SAVE_PATH')
        config = cls(
            rows=int(env.get('MINESTAKE_ROWS', GRID_ROWS)),
            cols=int(env.get('MINESTAKE_COLS', GRID_COLS)),
            penalty_count=int(env.get('MINESTAKE_PENALTIES', PENALTY_COUNT)),
            leaderboard_size=int(env.get('MINESTAKE_LEADERBOARD_SIZE', LEADERBOARD_SIZE)),
            save_path=Path(save_path) if save_path else _default_save_path(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        check_board_contract(self.rows, self.cols, self.penalty_count)
        if self.leaderboard_size < 1:
            raise ValueError(f"leaderboard_size must be at least 1, got {self.leaderboard_size}")


def check_board_contract(rows: int, cols: int, penalty_count: int) -> None:
    """Raise InvalidBoardError unless rows, cols > 0 and 0 <= penalty_count < rows*cols."""
    if rows <= 0 or cols <= 0:
        raise InvalidBoardError(f"board dimensions must be positive, got {rows}x{cols}")
    if not 0 <= penalty_count < rows * cols:
        raise InvalidBoardError(
            f"penalty_count must be in [0, {rows * cols}), got {penalty_count}"
        )
