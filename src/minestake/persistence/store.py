"""Key-value storage used for the persisted high score and leaderboard."""
from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Protocol

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised by a store when a get or set cannot complete."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dictionary-backed store; survives only as long as the process."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value


class JsonFileStore:
    """Stores every key as a string field of one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            try:
                payload = self._read()
            except StoreError as exc:
                logger.warning("Replacing unreadable store: %s", exc)
                payload = {}
            payload[key] = value
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
                with tmp_path.open("w", encoding="utf-8") as handle:
                    json.dump(payload, handle, indent=2)
                tmp_path.replace(self._path)
            except OSError as exc:
                raise StoreError(f"cannot write {self._path}: {exc}") from exc

    def _read(self) -> Dict[str, str]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise StoreError(f"{self._path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise StoreError(f"cannot read {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"{self._path} does not hold a JSON object")
        return payload
