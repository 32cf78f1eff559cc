from collections import OrderedDict
from typing import List, Optional

import pytest

from cachefs.caching import FrequencyCache, RecencyCache
from cachefs.services import CacheAddressedStore, InMemoryStore


class SpyStore(InMemoryStore):
    """In-memory store that records every read hitting it."""

    def __init__(self):
        super().__init__(name="spy")
        self.reads: List[str] = []

    def read(self, name: str) -> Optional[str]:
        self.reads.append(name)
        return super().read(name)


@pytest.fixture
def events():
    """Collect cache events emitted through the hook."""
    return []


@pytest.fixture
def spy_store():
    return SpyStore()


@pytest.fixture
def cached_store(spy_store):
    """Create a capacity-3 store with an LRU and an LFU cache."""
    caches = OrderedDict([
        ("lru", RecencyCache(3)),
        ("lfu", FrequencyCache(3)),
    ])
    return CacheAddressedStore(spy_store, caches)
