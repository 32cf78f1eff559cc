"""
Store interface - abstracts the backing key-value store behind the caches.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IKeyValueStore(ABC):
    """
    Backing store interface.

    Follows Repository Pattern - CacheAddressedStore only talks to the
    store through these operations, so tests can swap in spy stores.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass

    @abstractmethod
    def create(self, name: str, content: str = "") -> bool:
        """
        Create a new entry.

        Args:
            name: Entry name
            content: Initial content

        Returns:
            False if the entry already exists, True otherwise
        """
        pass

    @abstractmethod
    def read(self, name: str) -> Optional[str]:
        """
        Read an entry's content.

        Args:
            name: Entry name

        Returns:
            Content if found, None otherwise
        """
        pass

    @abstractmethod
    def write(self, name: str, content: str) -> bool:
        """
        Overwrite an existing entry. Never creates.

        Returns:
            False if the entry does not exist, True otherwise
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> bool:
        """
        Delete an entry.

        Returns:
            False if the entry does not exist, True otherwise
        """
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List entry names. Order is for display only."""
        pass
