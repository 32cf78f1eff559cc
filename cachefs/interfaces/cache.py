"""
Cache interface - unified contract for all eviction policies.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional

from ..models.event import CacheEvent, CacheOperation, CacheOutcome, EventHook

logger = logging.getLogger(__name__)


class _Miss:
    """Sentinel returned by ICache.get when a key is not cached"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"


MISS = _Miss()


class ICache(ABC):
    """
    Unified cache interface following Strategy Pattern.

    All cache policies (LRU, LFU) implement this interface, making them
    interchangeable behind CacheAddressedStore.

    None and empty strings are valid cached values, so a miss is signalled
    with the MISS sentinel instead.
    """

    name: str = "cache"

    def __init__(self, capacity: int, on_event: Optional[EventHook] = None):
        """
        Initialize cache.

        Args:
            capacity: Maximum number of entries (0 disables retention)
            on_event: Optional callable receiving a CacheEvent per operation
        """
        if capacity < 0:
            raise ValueError(f"Cache capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._on_event = on_event

    @property
    def capacity(self) -> int:
        return self._capacity

    @abstractmethod
    def get(self, key: Hashable) -> Any:
        """
        Retrieve value from cache, updating the policy bookkeeping.

        Args:
            key: Cache key

        Returns:
            Cached value or MISS if not found
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache, evicting per policy when full.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    def remove(self, key: Hashable) -> None:
        """
        Remove specific key from cache. Absent keys are ignored.

        Args:
            key: Cache key to remove
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all entries from cache."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: Hashable) -> bool:
        """Membership test that does not touch recency or frequency."""
        pass

    def _emit(self, operation: CacheOperation, key: Any, outcome: CacheOutcome) -> None:
        """Log the operation and forward it to the event hook, if any."""
        logger.debug(f"[{self.name}] {operation.value} {key!r} -> {outcome.value}")
        if self._on_event is None:
            return
        try:
            self._on_event(
                CacheEvent(policy=self.name, operation=operation, key=key, outcome=outcome)
            )
        except Exception:
            logger.exception(f"[{self.name}] event hook failed for {operation.value} {key!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self)})"
