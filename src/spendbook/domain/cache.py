"""In-memory cache for derived monthly aggregates.

Each ExpenseRepository owns its caches; any expense write clears them.
"""

import logging
import threading
from typing import Callable, Generic, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


class AggregateCache(Generic[V]):
    """Thread-safe key/value cache keyed by period (e.g. ``"2024-03"``).

    ``clear()`` bumps a generation counter. A value computed before a clear
    is never stored after it, so a reader racing a writer cannot put stale
    data back.
    """

    def __init__(self, name: str = "aggregate"):
        self.name = name
        self._entries: dict[Hashable, V] = {}
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def get(self, key: Hashable) -> Optional[V]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: Hashable, value: V, generation: Optional[int] = None) -> bool:
        """Store ``value``. Skipped when ``generation`` predates the last clear.

        Returns:
            True if the value was stored
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entries[key] = value
            return True

    def get_or_compute(self, key: Hashable, compute: Callable[[], V]) -> V:
        """Return the cached value, or compute it outside the lock and cache it.

        The computed value is always returned, but it is only cached if no
        clear happened while it was being computed.
        """
        with self._lock:
            if key in self._entries:
                logger.debug(f"{self.name} cache hit for {key}")
                return self._entries[key]
            generation = self._generation

        value = compute()
        if not self.set(key, value, generation=generation):
            logger.debug(f"{self.name} cache cleared while computing {key}, not stored")
        return value

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._generation += 1
        if count:
            logger.debug(f"Cleared {count} entries from {self.name} cache")

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class NullAggregateCache(AggregateCache[V]):
    """Cache that never stores anything. Every read is a miss."""

    def get(self, key: Hashable) -> Optional[V]:
        return None

    def set(self, key: Hashable, value: V, generation: Optional[int] = None) -> bool:
        return False

    def get_or_compute(self, key: Hashable, compute: Callable[[], V]) -> V:
        return compute()

    def clear(self) -> None:
        pass
