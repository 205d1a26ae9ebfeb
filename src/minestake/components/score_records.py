"""Singleton components owned by the score systems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from minestake.components.score_entry import ScoreEntry


@dataclass(slots=True)
class HighScoreRecord:
    """Best final score seen so far plus the current-game mirror."""

    value: int = 0
    current_score: int = 0
    is_new: bool = False
    # False while the stored value may lag behind ``value``.
    persisted: bool = True


@dataclass(slots=True)
class LeaderboardRecord:
    """Authoritative in-memory leaderboard; replaced, never edited in place."""

    entries: Tuple[ScoreEntry, ...] = field(default_factory=tuple)
