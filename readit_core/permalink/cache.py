"""Process-wide lookup cache for permalink authorship."""

import threading
from collections import OrderedDict
from functools import lru_cache
from typing import Optional

from readit_core.models import Authorship


class LookupCache:
    """Permalink URL to Authorship mapping guarded by a single lock.

    The first value written for a URL is kept. Without ``max_entries`` the
    cache never evicts; with it, the least recently used entry is dropped once
    the bound is exceeded.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Authorship] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, url: str) -> Optional[Authorship]:
        with self._lock:
            authorship = self._entries.get(url)
            if authorship is not None and self.max_entries is not None:
                self._entries.move_to_end(url)
            return authorship

    def put(self, url: str, authorship: Authorship) -> Authorship:
        """Store ``authorship`` unless the URL is cached; return the cached value."""
        with self._lock:
            existing = self._entries.get(url)
            if existing is not None:
                return existing
            self._entries[url] = authorship
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
            return authorship

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@lru_cache
def get_lookup_cache() -> LookupCache:
    """Get the process-wide cache, bounded by settings."""
    from readit_core.config.settings import get_settings

    return LookupCache(max_entries=get_settings().lookup_cache_max_entries)
