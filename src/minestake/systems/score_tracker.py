from __future__ import annotations

import logging
from dataclasses import dataclass

from esper import World

from minestake.components.score_records import HighScoreRecord
from minestake.constants import HIGH_SCORE_KEY
from minestake.events.bus import (
    EVENT_CELL_REVEALED,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_HIGH_SCORE_CHANGED,
    EventBus,
)
from minestake.persistence.store import KeyValueStore, StoreError
from minestake.persistence.writer import AsyncWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HighScoreView:
    value: int
    is_new: bool


class ScoreTrackerSystem:
    """Mirrors the current score and keeps the persisted high score monotone."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        store: KeyValueStore,
        writer: AsyncWriter,
        *,
        key: str = HIGH_SCORE_KEY,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._store = store
        self._writer = writer
        self._key = key
        self._record_entity = self._ensure_record_entity()

        self.event_bus.subscribe(EVENT_GAME_STARTED, self._on_game_started)
        self.event_bus.subscribe(EVENT_CELL_REVEALED, self._on_cell_revealed)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

        self.load_high_score()

    def _ensure_record_entity(self) -> int:
        existing = list(self.world.get_component(HighScoreRecord))
        if existing:
            return existing[0][0]
        return self.world.create_entity(HighScoreRecord())

    def _record(self) -> HighScoreRecord:
        return self.world.component_for_entity(self._record_entity, HighScoreRecord)

    @property
    def high_score(self) -> int:
        return self._record().value

    @property
    def current_score(self) -> int:
        return self._record().current_score

    @property
    def is_new_high_score(self) -> bool:
        return self._record().is_new

    def view(self) -> HighScoreView:
        record = self._record()
        return HighScoreView(value=record.value, is_new=record.is_new)

    def load_high_score(self) -> None:
        record = self._record()
        try:
            raw = self._store.get(self._key)
        except (StoreError, OSError) as exc:
            logger.warning("Failed to load high score: %s", exc)
            return
        if raw is None:
            return
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparsable high score %r", raw)
            return
        if value < 0:
            logger.warning("Ignoring negative high score %d", value)
            return
        # Never lower a value already reached in this process.
        record.value = max(record.value, value)

    def record_final_score(self, score: int) -> bool:
        """Apply a finished game's score; True when it set a new high score.

        An equal score re-submits the stored value when the last write of it
        failed, without flagging a new high score again.
        """
        record = self._record()
        record.current_score = score
        if score == record.value and score > 0 and not record.persisted:
            logger.info("Retrying write of high score %d", score)
            self._persist(record)
            return False
        if score <= record.value:
            return False
        previous = record.value
        record.value = score
        record.is_new = True
        self._persist(record)
        logger.info("New high score %d (was %d)", score, previous)
        self.event_bus.emit(EVENT_HIGH_SCORE_CHANGED, value=score, previous=previous)
        return True

    def _persist(self, record: HighScoreRecord) -> None:
        # Writes complete in submission order, so the last callback wins.
        record.persisted = False

        def on_complete(ok: bool) -> None:
            record.persisted = ok

        self._writer.submit(self._key, str(record.value), on_complete)

    # Event handlers -----------------------------------------------------

    def _on_game_started(self, sender, **payload) -> None:
        record = self._record()
        record.current_score = 0
        record.is_new = False

    def _on_cell_revealed(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            return
        self._record().current_score = int(score)

    def _on_game_over(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            return
        self.record_final_score(int(score))
