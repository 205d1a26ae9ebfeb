"""Wires the world, event bus and game systems behind the operations the UI calls."""
from __future__ import annotations

import random
from datetime import date
from typing import Callable, Tuple

from esper import World

from minestake.components.game_state import GameState
from minestake.components.score_entry import ScoreEntry
from minestake.config import GameConfig
from minestake.events.bus import EventBus
from minestake.persistence.store import InMemoryStore, KeyValueStore
from minestake.persistence.writer import AsyncWriter
from minestake.systems.board_system import BoardSystem, RevealOutcome
from minestake.systems.leaderboard_system import LeaderboardSystem
from minestake.systems.score_tracker import HighScoreView, ScoreTrackerSystem


class GameSession:
    def __init__(
        self,
        config: GameConfig | None = None,
        store: KeyValueStore | None = None,
        *,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        self.event_bus = event_bus or EventBus()
        self.world = World()
        self.store = store if store is not None else InMemoryStore()
        self.writer = AsyncWriter(self.store)

        self.score_tracker = ScoreTrackerSystem(
            self.world,
            self.event_bus,
            self.store,
            self.writer,
            key=self.config.high_score_key,
        )
        self.leaderboard_system = LeaderboardSystem(
            self.world,
            self.event_bus,
            self.store,
            self.writer,
            key=self.config.leaderboard_key,
            max_entries=self.config.leaderboard_size,
            today=today,
        )
        self.board_system = BoardSystem(self.world, self.event_bus, self.config, rng=rng)

    @property
    def state(self) -> GameState | None:
        return self.board_system.state

    def new_game(
        self,
        rows: int | None = None,
        cols: int | None = None,
        penalty_count: int | None = None,
    ) -> GameState:
        return self.board_system.new_game(rows, cols, penalty_count)

    def reveal(self, row: int, col: int) -> RevealOutcome:
        return self.board_system.reveal(row, col)

    def get_high_score(self) -> HighScoreView:
        return self.score_tracker.view()

    def get_leaderboard(self) -> Tuple[ScoreEntry, ...]:
        return self.leaderboard_system.entries

    def flush(self, timeout: float | None = None) -> bool:
        return self.writer.flush(timeout)

    def close(self) -> None:
        self.writer.close()
