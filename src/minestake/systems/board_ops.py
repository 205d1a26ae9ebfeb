"""Pure reveal transition for a single game."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from minestake.components.board import Position
from minestake.components.cell import CellKind
from minestake.components.game_state import GameState, GameStatus
from minestake.errors import CellOutOfRangeError


@dataclass(frozen=True, slots=True)
class RevealDelta:
    position: Position
    kind: CellKind
    score_gained: int
    terminal_status: Optional[GameStatus] = None


@dataclass(frozen=True, slots=True)
class RevealResult:
    state: GameState
    delta: Optional[RevealDelta] = None

    @property
    def changed(self) -> bool:
        return self.delta is not None


def reveal_cell(state: GameState, row: int, col: int) -> RevealResult:
    """Apply one reveal to ``state`` and return the resulting state.

    Out-of-range coordinates raise CellOutOfRangeError. Revealing an already
    revealed cell, or any cell once the game is over, returns the same state
    with no delta. A penalty ends the game as lost without scoring; the reward
    that uncovers the last hidden reward cell ends it as won.
    """
    board = state.board
    if not board.in_bounds(row, col):
        raise CellOutOfRangeError(row, col, board.rows, board.cols)
    cell = board.cell_at(row, col)
    if state.is_over or cell.revealed:
        return RevealResult(state)

    board = board.with_revealed(row, col)
    if cell.is_penalty:
        new_state = replace(state, board=board, status=GameStatus.LOST)
        return RevealResult(
            new_state,
            RevealDelta((row, col), cell.kind, 0, GameStatus.LOST),
        )

    revealed_rewards = state.revealed_reward_count + 1
    status = GameStatus.WON if revealed_rewards == board.reward_count else GameStatus.ACTIVE
    new_state = replace(
        state,
        board=board,
        status=status,
        score=state.score + 1,
        revealed_reward_count=revealed_rewards,
    )
    terminal = status if status.is_terminal else None
    return RevealResult(new_state, RevealDelta((row, col), cell.kind, 1, terminal))
