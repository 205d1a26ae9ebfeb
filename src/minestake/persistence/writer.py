from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List

from minestake.persistence.store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class AsyncWriter:
    """Runs store writes off the game thread, one at a time, in submission order.

    A single worker keeps writes to the same key ordered, so the last value
    submitted is the value left in the store. Failures are logged and reported
    through the returned future's result (True on success, False on failure)
    and through the next ``flush``.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="minestake-writer")
        self._pending: List[Future] = []
        self._failed = False
        self._closed = False

    def submit(
        self,
        key: str,
        value: str,
        on_complete: Callable[[bool], None] | None = None,
    ) -> Future:
        """Queue a write; ``on_complete`` runs on the worker before the future resolves."""
        if self._closed:
            raise RuntimeError("writer is closed")
        future = self._executor.submit(self._write, key, value, on_complete)
        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(future)
        return future

    def flush(self, timeout: float | None = None) -> bool:
        """Block until queued writes finish; True if every write since the last flush succeeded."""
        _, not_done = wait(list(self._pending), timeout=timeout)
        self._pending = [f for f in self._pending if not f.done()]
        ok = not not_done and not self._failed
        self._failed = False
        return ok

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        self._executor.shutdown(wait=True)
        self._closed = True

    def _write(self, key: str, value: str, on_complete: Callable[[bool], None] | None) -> bool:
        try:
            self._store.set(key, value)
        except (StoreError, OSError) as exc:
            logger.warning("Failed to persist %s: %s", key, exc)
            ok = False
        except Exception:
            logger.exception("Unexpected error persisting %s", key)
            ok = False
        else:
            logger.debug("Persisted %s", key)
            ok = True
        if not ok:
            self._failed = True
        if on_complete is not None:
            on_complete(ok)
        return ok
