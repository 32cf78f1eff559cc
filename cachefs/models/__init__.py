from .event import CacheEvent, CacheOperation, CacheOutcome, EventHook
from .file import File

__all__ = [
    "CacheEvent",
    "CacheOperation",
    "CacheOutcome",
    "EventHook",
    "File",
]
