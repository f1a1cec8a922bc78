"""
Rendered-view cache backed by Valkey.

Read endpoints store their payload under the logical view path they render;
mutations call invalidate(path) once their write attempt has finished so
the next read recomputes from the database.
"""

import logging

from clients.valkey_client import ValkeyClient

logger = logging.getLogger(__name__)


class PageCache:
    """Path-keyed JSON cache for list views."""

    KEY_PREFIX = "page:"

    def __init__(self, valkey: ValkeyClient, ttl_seconds: int = 300):
        self._valkey = valkey
        self._ttl_seconds = ttl_seconds

    def _key(self, path: str) -> str:
        return f"{self.KEY_PREFIX}{path}"

    def get(self, path: str) -> dict | list | None:
        """Cached payload for path, or None when stale or never stored."""
        return self._valkey.get_json(self._key(path))

    def store(self, path: str, payload: dict | list) -> None:
        self._valkey.set_json(self._key(path), payload, expire_seconds=self._ttl_seconds)

    def invalidate(self, path: str) -> None:
        """Mark the cached output for path as stale."""
        self._valkey.delete(self._key(path))
        logger.info(f"Invalidated cached view {path}")
