"""
Cache policies following Strategy Pattern.

All cache implementations implement ICache interface, making them
interchangeable and testable.
"""

from .factory import POLICIES, build_cache, build_caches
from .lfu_cache import FrequencyCache
from .lru_cache import RecencyCache

__all__ = [
    "RecencyCache",
    "FrequencyCache",
    "POLICIES",
    "build_cache",
    "build_caches",
]
