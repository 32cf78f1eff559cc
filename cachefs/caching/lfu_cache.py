"""
LFU (Least Frequently Used) Cache implementation.

Keys are grouped into buckets by access frequency. Inside a bucket keys keep
the order in which they reached that frequency, so the front of a bucket is
the eviction candidate among equals. Non-empty buckets are chained in
ascending frequency order through their prev/next frequencies, which keeps
min_freq exact after any removal without scanning for the new minimum.
"""

from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional

from ..interfaces.cache import ICache, MISS
from ..models.event import CacheOperation, CacheOutcome, EventHook


class _Slot:
    __slots__ = ("value", "freq")

    def __init__(self, value: Any, freq: int = 1):
        self.value = value
        self.freq = freq


class _Bucket:
    __slots__ = ("keys", "prev", "next")

    def __init__(self, prev: int = 0, next: int = 0):
        self.keys: "OrderedDict[Hashable, None]" = OrderedDict()
        # Neighbouring frequencies in the chain, 0 means none
        self.prev = prev
        self.next = next


class FrequencyCache(ICache):
    """
    LFU cache with O(1) get/put/remove.

    Ties at the lowest frequency are broken FIFO: the key that reached that
    frequency first is evicted first.
    """

    name = "lfu"

    def __init__(self, capacity: int, on_event: Optional[EventHook] = None):
        super().__init__(capacity, on_event)
        self._slots: Dict[Hashable, _Slot] = {}
        self._buckets: Dict[int, _Bucket] = {}
        self._min_freq = 0  # 0 while empty

    @property
    def min_freq(self) -> int:
        return self._min_freq

    def get(self, key: Hashable) -> Any:
        slot = self._slots.get(key)
        if slot is None:
            self._emit(CacheOperation.GET, key, CacheOutcome.MISS)
            return MISS

        self._bump(key, slot)
        self._emit(CacheOperation.GET, key, CacheOutcome.HIT)
        return slot.value

    def put(self, key: Hashable, value: Any) -> None:
        slot = self._slots.get(key)
        if slot is not None:
            slot.value = value
            self._bump(key, slot)
            self._emit(CacheOperation.PUT, key, CacheOutcome.UPDATE)
            return

        if self._capacity == 0:
            self._emit(CacheOperation.PUT, key, CacheOutcome.NOOP)
            return

        if len(self._slots) >= self._capacity:
            self._evict_lfu()

        self._slots[key] = _Slot(value)
        self._bucket_for(1, after=0).keys[key] = None
        self._min_freq = 1
        self._emit(CacheOperation.PUT, key, CacheOutcome.INSERT)

    def remove(self, key: Hashable) -> None:
        slot = self._slots.pop(key, None)
        if slot is None:
            self._emit(CacheOperation.REMOVE, key, CacheOutcome.NOOP)
            return

        bucket = self._buckets[slot.freq]
        del bucket.keys[key]
        if not bucket.keys:
            self._drop_bucket(slot.freq)
        self._emit(CacheOperation.REMOVE, key, CacheOutcome.REMOVE)

    def clear(self) -> None:
        self._slots.clear()
        self._buckets.clear()
        self._min_freq = 0
        self._emit(CacheOperation.CLEAR, None, CacheOutcome.REMOVE)

    def frequency(self, key: Hashable) -> int:
        """Get the access count of a key without bumping it (0 if absent)."""
        slot = self._slots.get(key)
        return slot.freq if slot is not None else 0

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._slots

    def _bump(self, key: Hashable, slot: _Slot) -> None:
        old = slot.freq
        slot.freq = old + 1

        # Link the new bucket before dropping the old one so it has a neighbour
        self._bucket_for(slot.freq, after=old).keys[key] = None

        bucket = self._buckets[old]
        del bucket.keys[key]
        if not bucket.keys:
            self._drop_bucket(old)

    def _evict_lfu(self) -> None:
        bucket = self._buckets[self._min_freq]
        key, _ = bucket.keys.popitem(last=False)
        del self._slots[key]
        if not bucket.keys:
            self._drop_bucket(self._min_freq)
        self._emit(CacheOperation.PUT, key, CacheOutcome.EVICT)

    def _bucket_for(self, freq: int, after: int) -> _Bucket:
        """
        Get the bucket for freq, creating it right after the bucket `after`.

        `after` must be the largest existing frequency below freq (0 to link
        at the head of the chain).
        """
        bucket = self._buckets.get(freq)
        if bucket is not None:
            return bucket

        nxt = self._buckets[after].next if after else self._min_freq
        bucket = _Bucket(prev=after, next=nxt)
        if after:
            self._buckets[after].next = freq
        if nxt:
            self._buckets[nxt].prev = freq
        self._buckets[freq] = bucket
        return bucket

    def _drop_bucket(self, freq: int) -> None:
        bucket = self._buckets.pop(freq)
        if bucket.prev:
            self._buckets[bucket.prev].next = bucket.next
        if bucket.next:
            self._buckets[bucket.next].prev = bucket.prev
        if self._min_freq == freq:
            self._min_freq = bucket.next
