from __future__ import annotations

import time
from typing import Dict, Hashable, Optional, Tuple

from ..config import SETTINGS


CacheEntry = Tuple[float, bytes]


class ResponseCache:
    """Small TTL cache of rendered PNG bodies keyed by request parameters."""

    def __init__(self, ttl: float | None = None, max_entries: int | None = None) -> None:
        self._ttl = ttl
        self._max_entries = max_entries
        self._entries: Dict[Hashable, CacheEntry] = {}

    @property
    def ttl(self) -> float:
        return SETTINGS.cache_ttl if self._ttl is None else self._ttl

    @property
    def max_entries(self) -> int:
        return SETTINGS.cache_size if self._max_entries is None else self._max_entries

    def get(self, key: Hashable) -> Optional[bytes]:
        entry = self._entries.get(key)
        if not entry:
            return None
        timestamp, data = entry
        if time.time() - timestamp > self.ttl:
            self._entries.pop(key, None)
            return None
        return data

    def put(self, key: Hashable, data: bytes) -> None:
        if self.max_entries <= 0 or self.ttl <= 0:
            return
        while key not in self._entries and len(self._entries) >= self.max_entries:
            oldest = min(self._entries.items(), key=lambda item: item[1][0])[0]
            self._entries.pop(oldest, None)
        self._entries[key] = (time.time(), data)

    def clear(self) -> None:
        self._entries.clear()


CACHE = ResponseCache()
