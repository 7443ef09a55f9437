"""Session-scoped string cache for fetched repository lists."""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheStats:
    """Hit/miss/write counters, updated by SessionCache."""
    hit: int = 0
    miss: int = 0
    write: int = 0


class SessionCache:
    """In-memory key/value store that lives as long as its owner's session.

    Values are serialized strings; callers own the encoding. Nothing is
    persisted, so a new process (or a new app session) starts empty.
    No locking: concurrent writers for the same key overwrite each other.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self.stats = CacheStats()

    def get(self, key: str) -> Optional[str]:
        value = self._data.get(key)
        if value is None:
            self.stats.miss += 1
        else:
            self.stats.hit += 1
        return value

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.stats.write += 1
        logger.debug("Cached %d bytes for %r", len(value), key)

    def delete(self, key: str) -> bool:
        """Remove *key*; returns True if it was present."""
        return self._data.pop(key, None) is not None

    def clear(self) -> None:
        """End of session: drop every entry."""
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)
