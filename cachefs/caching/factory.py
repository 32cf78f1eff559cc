from collections import OrderedDict
from typing import Dict, Iterable, Optional, Type

from ..interfaces.cache import ICache
from ..models.event import EventHook
from .lfu_cache import FrequencyCache
from .lru_cache import RecencyCache

POLICIES: Dict[str, Type[ICache]] = {
    RecencyCache.name: RecencyCache,
    FrequencyCache.name: FrequencyCache,
}


def build_cache(policy: str, capacity: int, on_event: Optional[EventHook] = None) -> ICache:
    """
    Create a cache for a policy name ("lru" or "lfu", case-insensitive).

    Raises:
        ValueError: Unknown policy or negative capacity
    """
    cache_cls = POLICIES.get(policy.strip().lower())
    if cache_cls is None:
        raise ValueError(f"Unknown cache policy: {policy!r}. Expected one of {sorted(POLICIES)}")
    return cache_cls(capacity, on_event=on_event)


def build_caches(
    policies: Iterable[str],
    capacity: int,
    on_event: Optional[EventHook] = None
) -> "OrderedDict[str, ICache]":
    """Create one cache per policy, keyed by policy name in priority order."""
    caches: "OrderedDict[str, ICache]" = OrderedDict()
    for policy in policies:
        cache = build_cache(policy, capacity, on_event)
        if cache.name in caches:
            raise ValueError(f"Duplicate cache policy: {policy!r}")
        caches[cache.name] = cache
    return caches
