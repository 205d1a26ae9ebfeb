from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from esper import World

from minestake.components.game_state import ActiveGame, GameState
from minestake.config import GameConfig
from minestake.errors import NoActiveGameError
from minestake.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_CELL_REVEALED,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_NEW_GAME_REQUEST,
    EventBus,
)
from minestake.systems.board_ops import RevealDelta, reveal_cell
from minestake.systems.grid_generator import generate_board

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RevealOutcome:
    state: GameState
    score: int
    total_reward: int
    delta: Optional[RevealDelta] = None


class BoardSystem:
    """Owns the active game entity and routes reveals through the pure transition."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._game_entity: int | None = None
        self._next_game_id = 1
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._on_new_game_request)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self._on_cell_click)

    @property
    def game_id(self) -> int | None:
        if self._game_entity is None:
            return None
        return self.world.component_for_entity(self._game_entity, ActiveGame).game_id

    @property
    def state(self) -> GameState | None:
        if self._game_entity is None:
            return None
        return self.world.component_for_entity(self._game_entity, GameState)

    def new_game(
        self,
        rows: int | None = None,
        cols: int | None = None,
        penalty_count: int | None = None,
    ) -> GameState:
        rows = self.config.rows if rows is None else rows
        cols = self.config.cols if cols is None else cols
        penalty_count = self.config.penalty_count if penalty_count is None else penalty_count
        board = generate_board(rows, cols, penalty_count, self.rng)

        # The previous game is discarded, never reset in place.
        if self._game_entity is not None:
            self.world.delete_entity(self._game_entity, immediate=True)
        game_id = self._next_game_id
        self._next_game_id += 1
        state = GameState(board=board)
        self._game_entity = self.world.create_entity(ActiveGame(game_id=game_id), state)

        logger.debug("Started game %d (%dx%d, %d penalties)", game_id, rows, cols, penalty_count)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            game_id=game_id,
            rows=rows,
            cols=cols,
            penalty_count=penalty_count,
            total_reward=state.total_reward,
        )
        return state

    def reveal(self, row: int, col: int) -> RevealOutcome:
        state = self.state
        if state is None:
            raise NoActiveGameError("no game has been started")
        result = reveal_cell(state, row, col)
        new_state = result.state
        if result.changed:
            self.world.add_component(self._game_entity, new_state)
            self._announce(result.delta, new_state)
        return RevealOutcome(
            state=new_state,
            score=new_state.score,
            total_reward=new_state.total_reward,
            delta=result.delta,
        )

    def _announce(self, delta: RevealDelta, state: GameState) -> None:
        game_id = self.game_id
        row, col = delta.position
        self.event_bus.emit(
            EVENT_CELL_REVEALED,
            game_id=game_id,
            row=row,
            col=col,
            kind=delta.kind,
            score=state.score,
            status=state.status,
        )
        if delta.terminal_status is None:
            return
        logger.info(
            "Game %d ended %s with score %d/%d",
            game_id,
            delta.terminal_status.name.lower(),
            state.score,
            state.total_reward,
        )
        self.event_bus.emit(
            EVENT_GAME_OVER,
            game_id=game_id,
            status=delta.terminal_status,
            score=state.score,
            total_reward=state.total_reward,
        )

    # Event handlers -----------------------------------------------------

    def _on_new_game_request(self, sender, **payload) -> None:
        self.new_game(
            payload.get("rows"),
            payload.get("cols"),
            payload.get("penalty_count"),
        )

    def _on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        if self._game_entity is None:
            return
        self.reveal(row, col)
