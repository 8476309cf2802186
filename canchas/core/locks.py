"""Per-field write locks shared by every request handled in this process."""

from __future__ import annotations

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class FieldLockRegistry:
    """Hands out one lock per field id.

    Reservation writes for the same field run one at a time inside a worker
    process; the database lock taken by each write transaction covers other
    processes. A lock lives only while some caller references it, so ids
    that never existed do not accumulate.
    """

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[int, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        # Guards the dictionary itself, never held while a field lock is held.
        self._registry_lock = threading.Lock()

    def _lock_for(self, field_id: int) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(field_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[field_id] = lock
            return lock

    @contextmanager
    def hold(self, field_id: int) -> Iterator[None]:
        lock = self._lock_for(field_id)
        lock.acquire()
        logger.debug("Acquired write lock for field %s", field_id)
        try:
            yield
        finally:
            lock.release()
            logger.debug("Released write lock for field %s", field_id)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)


field_locks = FieldLockRegistry()

__all__ = ["FieldLockRegistry", "field_locks"]
