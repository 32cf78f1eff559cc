from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field


class CacheOperation(str, Enum):
    GET = "get"
    PUT = "put"
    REMOVE = "remove"
    CLEAR = "clear"


class CacheOutcome(str, Enum):
    HIT = "hit"
    MISS = "miss"
    INSERT = "insert"
    UPDATE = "update"
    EVICT = "evict"
    REMOVE = "remove"
    NOOP = "noop"


class CacheEvent(BaseModel):
    """Structured record of a single cache operation"""
    policy: str
    operation: CacheOperation
    key: Any = None
    outcome: CacheOutcome
    timestamp: datetime = Field(default_factory=datetime.now)


EventHook = Callable[[CacheEvent], None]
