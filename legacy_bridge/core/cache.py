"""
Bounded in-memory cache with TTL support.

Entries expire lazily (checked on read) and, when the store is full, the
entry inserted earliest is evicted (FIFO by insertion, not LRU).
Process-local only: nothing survives a restart or is shared across instances.
"""
import time
from abc import ABC, abstractmethod
from threading import Lock
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]


def generate_cache_key(namespace: str, *parts: object) -> str:
    """
    Build a namespaced cache key.

    Example:
        generate_cache_key("payments", "id", 123)  # "payments:id:123"
    """
    return ":".join([namespace, *(str(part) for part in parts)])


class CacheInterface(ABC, Generic[T]):
    """Abstract interface for cache implementations."""

    @abstractmethod
    def get(self, key: str) -> Optional[T]:
        """Get value by key, returns None if not found or expired."""
        pass

    @abstractmethod
    def set(self, key: str, value: T) -> None:
        """Store value under key with the cache's TTL."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key, returns True if existed."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all entries."""
        pass

    @abstractmethod
    def stats(self) -> Dict[str, Any]:
        """Return size, capacity, ttl and enabled flag."""
        pass


class CacheEntry(Generic[T]):
    """Single cache entry with expiration tracking."""

    __slots__ = ("value", "expires_at")

    def __init__(self, value: T, expires_at: float) -> None:
        self.value = value
        self.expires_at = expires_at

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired."""
        return now > self.expires_at


class TTLCache(CacheInterface[T]):
    """
    Thread-safe, size-bounded in-memory cache with a single TTL.

    Usage:
        cache: CacheInterface[Customer] = TTLCache(max_size=100, ttl_seconds=300)
        cache.set("customers:id:1", customer)
        cache.get("customers:id:1")

    A disabled cache behaves as permanently empty: ``get`` returns None and
    ``set`` does nothing.
    """

    def __init__(
        self,
        max_size: int,
        ttl_seconds: int,
        enabled: bool = True,
        clock: Clock = time.monotonic,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {ttl_seconds}")

        # dict preserves insertion order; the first key is the oldest entry
        self._store: Dict[str, CacheEntry[T]] = {}
        self._max_size = max_size
        self._ttl_seconds = ttl_seconds
        self._enabled = enabled
        self._clock = clock
        self._lock = Lock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def get(self, key: str) -> Optional[T]:
        """Get value by key, returns None if not found or expired."""
        if not self._enabled:
            return None

        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._store[key]
                return None
            return entry.value

    def set(self, key: str, value: T) -> None:
        """
        Store value with the configured TTL.

        Inserting a new key into a full store evicts the oldest insertion
        first. Overwriting an existing key never evicts.
        """
        if not self._enabled:
            return

        expires_at = self._clock() + self._ttl_seconds
        with self._lock:
            if key not in self._store and len(self._store) >= self._max_size:
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
            self._store[key] = CacheEntry(value, expires_at)

    def delete(self, key: str) -> bool:
        """Delete key, returns True if existed."""
        with self._lock:
            if key in self._store:
                del self._store[key]
                return True
            return False

    def clear(self) -> None:
        """Clear all entries."""
        with self._lock:
            self._store.clear()

    def size(self) -> int:
        """Return number of entries (including possibly expired)."""
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Snapshot for operational visibility. No side effects."""
        return {
            "size": self.size(),
            "max_size": self._max_size,
            "ttl_seconds": self._ttl_seconds,
            "enabled": self._enabled,
        }

    def cleanup_expired(self) -> int:
        """Remove expired entries, return count removed."""
        now = self._clock()
        removed = 0
        with self._lock:
            expired_keys = [
                k for k, v in self._store.items() if v.is_expired(now)
            ]
            for key in expired_keys:
                del self._store[key]
                removed += 1
        return removed
