from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """One completed game on the leaderboard."""

    score: int
    date: str

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "date": self.date}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ScoreEntry:
        score = payload["score"]
        date = payload["date"]
        # bool is an int subclass; reject it explicitly.
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError(f"score must be an int, got {score!r}")
        if not isinstance(date, str):
            raise ValueError(f"date must be a string, got {date!r}")
        return cls(score=score, date=date)
