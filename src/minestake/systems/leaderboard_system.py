from __future__ import annotations

import json
import logging
from datetime import date
from typing import Callable, Iterable, Tuple

from esper import World

from minestake.components.score_entry import ScoreEntry
from minestake.components.score_records import LeaderboardRecord
from minestake.constants import LEADERBOARD_KEY, LEADERBOARD_SIZE
from minestake.events.bus import EVENT_GAME_OVER, EVENT_LEADERBOARD_CHANGED, EventBus
from minestake.persistence.store import KeyValueStore, StoreError
from minestake.persistence.writer import AsyncWriter

logger = logging.getLogger(__name__)


def rank_entries(entries: Iterable[ScoreEntry], limit: int) -> Tuple[ScoreEntry, ...]:
    """Stable-sort descending by score and keep the first ``limit`` entries."""
    ordered = sorted(entries, key=lambda entry: entry.score, reverse=True)
    return tuple(ordered[:limit])


def encode_entries(entries: Iterable[ScoreEntry]) -> str:
    return json.dumps([entry.to_dict() for entry in entries])


def decode_entries(raw: str) -> list[ScoreEntry]:
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("leaderboard payload is not a list")
    return [ScoreEntry.from_dict(item) for item in payload]


class LeaderboardSystem:
    """Keeps the bounded, score-sorted history of completed games.

    The in-memory ``LeaderboardRecord`` is the only copy that is ever read
    and modified; the store only receives finished sequences, in order,
    through the shared writer.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        store: KeyValueStore,
        writer: AsyncWriter,
        *,
        key: str = LEADERBOARD_KEY,
        max_entries: int = LEADERBOARD_SIZE,
        today: Callable[[], date] | None = None,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.world = world
        self.event_bus = event_bus
        self._store = store
        self._writer = writer
        self._key = key
        self._max_entries = max_entries
        self._today = today or date.today
        self._record_entity = self._ensure_record_entity()

        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

        self.load_leaderboard()

    def _ensure_record_entity(self) -> int:
        existing = list(self.world.get_component(LeaderboardRecord))
        if existing:
            return existing[0][0]
        return self.world.create_entity(LeaderboardRecord())

    def _record(self) -> LeaderboardRecord:
        return self.world.component_for_entity(self._record_entity, LeaderboardRecord)

    @property
    def entries(self) -> Tuple[ScoreEntry, ...]:
        return self._record().entries

    def load_leaderboard(self) -> None:
        record = self._record()
        try:
            raw = self._store.get(self._key)
        except (StoreError, OSError) as exc:
            logger.warning("Failed to load leaderboard: %s", exc)
            record.entries = ()
            return
        if raw is None:
            record.entries = ()
            return
        try:
            loaded = decode_entries(raw)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Discarding corrupt leaderboard data: %s", exc)
            record.entries = ()
            return
        # Score-0 games never belong on the board, even if stored.
        record.entries = rank_entries(
            (entry for entry in loaded if entry.score > 0),
            self._max_entries,
        )

    def add_score(self, score: int) -> bool:
        """Insert a finished game's score; score 0 never makes the board."""
        if score <= 0:
            return False
        record = self._record()
        entry = ScoreEntry(score=score, date=self._today().isoformat())
        updated = rank_entries((*record.entries, entry), self._max_entries)
        record.entries = updated
        self._writer.submit(self._key, encode_entries(updated))
        self.event_bus.emit(EVENT_LEADERBOARD_CHANGED, entries=updated)
        return True

    # Event handlers -----------------------------------------------------

    def _on_game_over(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            return
        self.add_score(int(score))
