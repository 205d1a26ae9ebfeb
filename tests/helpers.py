from __future__ import annotations

from datetime import date
from typing import Callable, Sequence

from minestake.components.board import Board
from minestake.components.cell import Cell, CellKind
from minestake.components.game_state import GameState
from minestake.persistence.store import InMemoryStore, StoreError


def board_from_rows(rows: Sequence[str]) -> Board:
    """Build a board from strings where 'X' marks a penalty and '.' a reward."""

    cells = tuple(
        tuple(Cell(CellKind.PENALTY if ch == "X" else CellKind.REWARD) for ch in line)
        for line in rows
    )
    return Board(rows=len(rows), cols=len(rows[0]), cells=cells)


def fixed_today(year: int = 2024, month: int = 5, day: int = 17) -> Callable[[], date]:
    return lambda: date(year, month, day)


def reward_positions(state: GameState) -> list[tuple[int, int]]:
    board = state.board
    return [(r, c) for r, c in board.positions() if board.cell_at(r, c).kind is CellKind.REWARD]


def penalty_positions(state: GameState) -> list[tuple[int, int]]:
    board = state.board
    return [(r, c) for r, c in board.positions() if board.cell_at(r, c).kind is CellKind.PENALTY]


def reveal_all_rewards(reveal: Callable[[int, int], object], state: GameState) -> None:
    for row, col in reward_positions(state):
        reveal(row, col)


class FailingStore(InMemoryStore):
    """In-memory store whose reads and/or writes can be made to fail."""

    def __init__(self, initial=None, *, fail_get: bool = False, fail_set: bool = False) -> None:
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_calls: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        if self.fail_get:
            raise StoreError("read failed")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls.append((key, value))
        if self.fail_set:
            raise StoreError("write failed")
        super().set(key, value)
