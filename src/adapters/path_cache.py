"""
In-process view cache keyed by path.

Implements the invoices CacheInvalidatorPort. The listing route stores its
payload here and mutations drop it after a successful write.

Every invalidation bumps the path's version. A reader takes the version
before querying the store and stores its payload with ``set_if_version``,
which refuses the write if an invalidation happened in between.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class PathCache:
    """Thread-safe map of view path to cached payload."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            return self._entries.get(path)

    def version(self, path: str) -> int:
        with self._lock:
            return self._versions.get(path, 0)

    def set(self, path: str, payload: Any) -> None:
        with self._lock:
            self._entries[path] = payload

    def set_if_version(self, path: str, version: int, payload: Any) -> bool:
        """Store payload only if ``path`` was not invalidated since ``version``."""
        with self._lock:
            if self._versions.get(path, 0) != version:
                logger.debug("Skipped stale payload for %s (version %d)", path, version)
                return False
            self._entries[path] = payload
            return True

    def invalidate(self, path: str) -> None:
        with self._lock:
            dropped = self._entries.pop(path, None) is not None
            self._versions[path] = self._versions.get(path, 0) + 1
        logger.debug("Invalidated %s (cached=%s)", path, dropped)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries
