import logging
from typing import Dict, List, Optional

from ..interfaces.store import IKeyValueStore
from ..models.file import File

logger = logging.getLogger(__name__)


class InMemoryStore(IKeyValueStore):
    """
    Flat name -> File map acting as the backing store.

    Nothing is persisted; the store lives as long as the process.
    """

    def __init__(self, name: str = "root"):
        self.name = name
        self._files: Dict[str, File] = {}

    def exists(self, name: str) -> bool:
        return name in self._files

    def create(self, name: str, content: str = "") -> bool:
        if name in self._files:
            return False
        self._files[name] = File(name=name, content=content)
        logger.debug(f"[{self.name}] created {name!r}")
        return True

    def get_file(self, name: str) -> Optional[File]:
        return self._files.get(name)

    def read(self, name: str) -> Optional[str]:
        file = self._files.get(name)
        return file.read() if file else None

    def write(self, name: str, content: str) -> bool:
        file = self._files.get(name)
        if file is None:
            return False
        file.write(content)
        logger.debug(f"[{self.name}] wrote {name!r}")
        return True

    def delete(self, name: str) -> bool:
        if self._files.pop(name, None) is None:
            return False
        logger.debug(f"[{self.name}] deleted {name!r}")
        return True

    def list(self) -> List[str]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)
