"""Cache layer for evaluation and draft reads.

The cache is advisory: services read through it and invalidate after
writes, but correctness never depends on an entry being present.
Every service receives a cache instance; nothing here is global.
"""

import copy
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from fnmatch import fnmatchcase
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Cache(ABC):
    """Key/value cache with per-entry TTL and glob-style pattern deletes."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss or expired entry."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """Store a value, optionally overriding the default TTL."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a single key if present."""

    @abstractmethod
    def delete_pattern(self, pattern: str) -> None:
        """Remove every key matching a glob pattern like 'evaluation:player:*'."""


class InMemoryCache(Cache):
    """
    Process-local TTL cache.

    Values are deep-copied on the way in and out so callers can never
    mutate a cached entry in place.
    """

    def __init__(
        self,
        default_ttl_seconds: int = 604800,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Any, datetime]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return copy.deepcopy(value)

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        expires_at = self._clock() + timedelta(seconds=ttl)
        self._entries[key] = (copy.deepcopy(value), expires_at)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def delete_pattern(self, pattern: str) -> None:
        self._entries = {
            k: v for k, v in self._entries.items() if not fnmatchcase(k, pattern)
        }

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def keys(self) -> list[str]:
        """Keys currently held, expired or not. For debugging and tests."""
        return list(self._entries)


class SafeCache(Cache):
    """
    Wraps a cache so backend failures never reach callers.

    A failed read behaves as a miss and a failed write or delete is logged
    and dropped, so services fall back to the source stores.
    """

    def __init__(self, inner: Cache) -> None:
        self.inner = inner

    def get(self, key: str) -> Optional[Any]:
        try:
            return self.inner.get(key)
        except Exception as e:
            logger.warning(f"Cache get failed for {key} (non-fatal): {e}")
            return None

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        try:
            self.inner.set(key, value, ttl_seconds)
        except Exception as e:
            logger.warning(f"Cache set failed for {key} (non-fatal): {e}")

    def delete(self, key: str) -> None:
        try:
            self.inner.delete(key)
        except Exception as e:
            logger.warning(f"Cache delete failed for {key} (non-fatal): {e}")

    def delete_pattern(self, pattern: str) -> None:
        try:
            self.inner.delete_pattern(pattern)
        except Exception as e:
            logger.warning(f"Cache delete_pattern failed for {pattern} (non-fatal): {e}")


def ensure_safe(cache: Optional[Cache], default_ttl_seconds: int = 604800) -> SafeCache:
    """Wrap a cache in SafeCache, creating an in-memory one when none is given."""
    if isinstance(cache, SafeCache):
        return cache
    return SafeCache(cache if cache is not None else InMemoryCache(default_ttl_seconds))
