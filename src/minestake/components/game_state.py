"""Per-game state stored on the active game entity."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minestake.components.board import Board


class GameStatus(Enum):
    ACTIVE = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.ACTIVE


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of one game; replaced wholesale on every reveal."""

    board: Board
    status: GameStatus = GameStatus.ACTIVE
    score: int = 0
    revealed_reward_count: int = 0

    @property
    def total_reward(self) -> int:
        return self.board.reward_count

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal


@dataclass(slots=True)
class ActiveGame:
    """Marker tying a game entity to its sequence number."""
    game_id: int
