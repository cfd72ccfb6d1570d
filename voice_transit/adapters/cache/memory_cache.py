"""Thread-safe in-memory cache with optional TTL.

Backs the device-location lookup: reverse geocoding is slow and
rate-limited, while the device rarely moves within a session.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache implementing CachePort.

    Attributes:
        default_ttl_seconds: Default time-to-live for entries (None = no expiry)
        max_size: Maximum number of entries, oldest evicted first (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[Location](name="location", default_ttl_seconds=600)
        where = cache.get_or_compute("12.97,77.57:kn", lambda: lookup())
    """

    default_ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "cache"

    _store: Dict[str, Tuple[Any, float]] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None

            value, expiry = entry
            if time.monotonic() > expiry:
                del self._store[key]
                self._logger.debug("Cache entry expired", extra={"key": key})
                return None
            return value

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        with self._lock:
            if (
                self.max_size is not None
                and key not in self._store
                and len(self._store) >= self.max_size
            ):
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )

            effective_ttl = ttl if ttl is not None else self.default_ttl_seconds
            expiry = (
                time.monotonic() + effective_ttl
                if effective_ttl is not None
                else float("inf")
            )
            self._store[key] = (value, expiry)

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute, store and return it.

        None results are not stored, so a failed lookup is retried on
        the next call.
        """
        value = self.get(key)
        if value is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return value

        computed = compute_fn()
        if computed is not None:
            self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)
