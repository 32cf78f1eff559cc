"""cachefs - in-memory file system behind pluggable LRU/LFU caches."""

from .caching import FrequencyCache, RecencyCache, build_cache, build_caches
from .config import Settings, settings
from .exceptions import AlreadyExistsError, CacheFSError, NotFoundError
from .interfaces import MISS, ICache, IKeyValueStore
from .models import CacheEvent, CacheOperation, CacheOutcome, File
from .services import CacheAddressedStore, InMemoryStore

__all__ = [
    # Caching
    "ICache",
    "MISS",
    "RecencyCache",
    "FrequencyCache",
    "build_cache",
    "build_caches",
    # Store
    "IKeyValueStore",
    "InMemoryStore",
    "CacheAddressedStore",
    # Models
    "File",
    "CacheEvent",
    "CacheOperation",
    "CacheOutcome",
    # Errors
    "CacheFSError",
    "NotFoundError",
    "AlreadyExistsError",
    # Config
    "Settings",
    "settings",
]
