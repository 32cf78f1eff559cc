"""
Core interface abstractions following Dependency Inversion Principle.

These interfaces define contracts that concrete implementations must follow,
enabling loose coupling and easier testing.
"""

from .cache import ICache, MISS
from .store import IKeyValueStore

__all__ = [
    "ICache",
    "MISS",
    "IKeyValueStore",
]
