"""
Cache-Addressed Store

Tier 1: one or more cache policies (LRU, LFU), probed in priority order
Tier 2: backing key-value store (authoritative)

Reads go through the caches and fall back to the store; creates, writes
and deletes go to the store and to every cache before returning, so the
caches never serve stale or deleted content.
"""

import logging
from collections import OrderedDict
from types import MappingProxyType
from typing import TYPE_CHECKING, List, Mapping, Optional

from ..caching.factory import build_caches
from ..exceptions import AlreadyExistsError, NotFoundError
from ..interfaces.cache import ICache, MISS
from ..interfaces.store import IKeyValueStore
from ..models.event import EventHook
from .memory_store import InMemoryStore

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class CacheAddressedStore:
    """
    Multi-policy cache in front of a backing store

    Flow for read:
    1. Probe each cache in priority order
    2. On a hit, touch every other cache so their bookkeeping follows the
       access (backfilling any cache that no longer holds the entry)
    3. On a full miss, read the store and populate every cache
    """

    def __init__(self, store: IKeyValueStore, caches: Mapping[str, ICache]):
        """
        Initialize cache-addressed store

        Args:
            store: Backing key-value store
            caches: Ordered mapping of policy name -> cache, in probe order

        Raises:
            ValueError: If no cache is given
        """
        if not caches:
            raise ValueError("CacheAddressedStore needs at least one cache")

        self._store = store
        self._caches: "OrderedDict[str, ICache]" = OrderedDict(caches)

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        store: Optional[IKeyValueStore] = None,
        on_event: Optional[EventHook] = None
    ) -> "CacheAddressedStore":
        """Build a store with the caches named in settings.cache_policies."""
        caches = build_caches(settings.cache_policies, settings.cache_size, on_event)
        return cls(store if store is not None else InMemoryStore(settings.store_name), caches)

    @property
    def store(self) -> IKeyValueStore:
        return self._store

    @property
    def caches(self) -> Mapping[str, ICache]:
        return MappingProxyType(self._caches)

    def create(self, name: str, content: str = "") -> None:
        """
        Create a new entry and cache its content (write-through)

        Raises:
            AlreadyExistsError: If the store already has the entry
        """
        if self._store.exists(name) or not self._store.create(name, content):
            logger.info(f"CREATE '{name}' failed: already exists")
            raise AlreadyExistsError(name)

        for cache in self._caches.values():
            cache.put(name, content)
        logger.info(f"CREATE '{name}' succeeded")

    def read(self, name: str) -> str:
        """
        Read an entry, serving it from the first cache that holds it

        Args:
            name: Entry name

        Returns:
            Entry content

        Raises:
            NotFoundError: If neither the caches nor the store have the entry
        """
        caches = list(self._caches.values())
        for index, (policy, cache) in enumerate(self._caches.items()):
            content = cache.get(name)
            if content is MISS:
                continue

            # Higher-priority caches already missed
            for other in caches[:index]:
                other.put(name, content)
            for other in caches[index + 1:]:
                if other.get(name) is MISS:
                    other.put(name, content)

            logger.debug(f"READ '{name}' served from {policy} cache")
            return content

        content = self._store.read(name)
        if content is None:
            logger.info(f"READ '{name}' failed: not found")
            raise NotFoundError(name)

        for cache in self._caches.values():
            cache.put(name, content)
        logger.debug(f"READ '{name}' served from store")
        return content

    def write(self, name: str, content: str) -> None:
        """
        Overwrite an existing entry in the store and in every cache

        Raises:
            NotFoundError: If the store has no such entry
        """
        if not self._store.write(name, content):
            logger.info(f"WRITE '{name}' failed: not found")
            raise NotFoundError(name)

        for cache in self._caches.values():
            cache.put(name, content)
        logger.info(f"WRITE '{name}' succeeded")

    def delete(self, name: str) -> None:
        """
        Delete an entry and invalidate it in every cache

        Raises:
            NotFoundError: If the store has no such entry
        """
        if not self._store.delete(name):
            logger.info(f"DELETE '{name}' failed: not found")
            raise NotFoundError(name)

        for cache in self._caches.values():
            cache.remove(name)
        logger.info(f"DELETE '{name}' succeeded")

    def exists(self, name: str) -> bool:
        return self._store.exists(name)

    def list(self) -> List[str]:
        """List entry names straight from the store; caches are not consulted."""
        return self._store.list()
