from .cached_store import CacheAddressedStore
from .memory_store import InMemoryStore

__all__ = [
    "CacheAddressedStore",
    "InMemoryStore",
]
