"""
LRU (Least Recently Used) Cache implementation.

Entries live in an arena of slots addressed by integer handles. Each slot
carries explicit prev/next handles, forming a cyclic list around a sentinel
at handle 0: sentinel.next is the most recently used slot, sentinel.prev
the least recently used one. Released handles go on a free list and are
reused by later inserts.
"""

from typing import Any, Dict, Hashable, List, Optional

from ..interfaces.cache import ICache, MISS
from ..models.event import CacheOperation, CacheOutcome, EventHook

_SENTINEL = 0


class RecencyCache(ICache):
    """
    LRU cache with O(1) get/put/remove.

    Features:
    - Direct key -> handle lookup
    - Doubly-linked MRU -> LRU ordering over an integer-indexed arena
    - Handle reuse through a free list, so the arena never outgrows capacity
    """

    name = "lru"

    def __init__(self, capacity: int, on_event: Optional[EventHook] = None):
        super().__init__(capacity, on_event)

        self._index: Dict[Hashable, int] = {}

        # Slot arena, handle 0 is the sentinel
        self._keys: List[Any] = [None]
        self._values: List[Any] = [None]
        self._prev: List[int] = [_SENTINEL]
        self._next: List[int] = [_SENTINEL]
        self._free: List[int] = []

    def get(self, key: Hashable) -> Any:
        handle = self._index.get(key)
        if handle is None:
            self._emit(CacheOperation.GET, key, CacheOutcome.MISS)
            return MISS

        # Cache hit - move to front (most recently used)
        self._move_to_front(handle)
        self._emit(CacheOperation.GET, key, CacheOutcome.HIT)
        return self._values[handle]

    def put(self, key: Hashable, value: Any) -> None:
        handle = self._index.get(key)
        if handle is not None:
            self._values[handle] = value
            self._move_to_front(handle)
            self._emit(CacheOperation.PUT, key, CacheOutcome.UPDATE)
            return

        if self._capacity == 0:
            self._emit(CacheOperation.PUT, key, CacheOutcome.NOOP)
            return

        # If at capacity, evict LRU slot
        if len(self._index) >= self._capacity:
            self._evict_lru()

        handle = self._allocate(key, value)
        self._link_front(handle)
        self._index[key] = handle
        self._emit(CacheOperation.PUT, key, CacheOutcome.INSERT)

    def remove(self, key: Hashable) -> None:
        handle = self._index.pop(key, None)
        if handle is None:
            self._emit(CacheOperation.REMOVE, key, CacheOutcome.NOOP)
            return

        self._unlink(handle)
        self._release(handle)
        self._emit(CacheOperation.REMOVE, key, CacheOutcome.REMOVE)

    def clear(self) -> None:
        self._index.clear()
        self._keys = [None]
        self._values = [None]
        self._prev = [_SENTINEL]
        self._next = [_SENTINEL]
        self._free = []
        self._emit(CacheOperation.CLEAR, None, CacheOutcome.REMOVE)

    def keys(self) -> List[Hashable]:
        """
        Get cached keys from most to least recently used.

        Walks the whole list, so it is meant for inspection only.
        """
        result = []
        handle = self._next[_SENTINEL]
        while handle != _SENTINEL:
            result.append(self._keys[handle])
            handle = self._next[handle]
        return result

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def _evict_lru(self) -> None:
        handle = self._prev[_SENTINEL]
        if handle == _SENTINEL:
            return
        key = self._keys[handle]
        self._unlink(handle)
        del self._index[key]
        self._release(handle)
        self._emit(CacheOperation.PUT, key, CacheOutcome.EVICT)

    def _allocate(self, key: Hashable, value: Any) -> int:
        if self._free:
            handle = self._free.pop()
            self._keys[handle] = key
            self._values[handle] = value
            return handle

        self._keys.append(key)
        self._values.append(value)
        self._prev.append(_SENTINEL)
        self._next.append(_SENTINEL)
        return len(self._keys) - 1

    def _release(self, handle: int) -> None:
        # Drop references so evicted payloads can be collected
        self._keys[handle] = None
        self._values[handle] = None
        self._free.append(handle)

    def _link_front(self, handle: int) -> None:
        first = self._next[_SENTINEL]
        self._prev[handle] = _SENTINEL
        self._next[handle] = first
        self._prev[first] = handle
        self._next[_SENTINEL] = handle

    def _unlink(self, handle: int) -> None:
        prev, nxt = self._prev[handle], self._next[handle]
        self._next[prev] = nxt
        self._prev[nxt] = prev
        self._prev[handle] = self._next[handle] = _SENTINEL

    def _move_to_front(self, handle: int) -> None:
        if self._next[_SENTINEL] == handle:
            return
        self._unlink(handle)
        self._link_front(handle)
