from blinker import Signal
from typing import Dict

class EventBus:
    """Synchronous event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"              # payload: x, y, button
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: rows=int|None, cols=int|None, penalty_count=int|None
EVENT_CELL_CLICK = "cell_click"                # payload: row, col


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_STARTED = "game_started"    # payload: game_id=int, rows=int, cols=int, penalty_count=int, total_reward=int
EVENT_CELL_REVEALED = "cell_revealed"  # payload: game_id=int, row, col, kind=CellKind, score=int, status=GameStatus
EVENT_GAME_OVER = "game_over"          # payload: game_id=int, status=GameStatus, score=int, total_reward=int


# ============================================================================
# SCORES
# ============================================================================
EVENT_HIGH_SCORE_CHANGED = "high_score_changed"    # payload: value=int, previous=int
EVENT_LEADERBOARD_CHANGED = "leaderboard_changed"  # payload: entries=tuple[ScoreEntry, ...]
