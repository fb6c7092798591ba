"""
Caching system for lintrun.

Uses diskcache for SQLite-based persistent caching of directory scans.
"""

from typing import Any, Optional, Protocol

from diskcache import Cache

from .logging_config import get_logger

logger = get_logger(__name__)

CACHE_KEY_PREFIX = "analyse-files-"


def cache_key(directory: str) -> str:
    """Cache key for the file list found under ``directory``."""
    return CACHE_KEY_PREFIX + directory


class CacheStore(Protocol):
    """Key/value persistence used by the directory scanner."""

    def load(self, key: str) -> Optional[Any]:
        ...

    def save(self, key: str, value: Any) -> None:
        ...


class FileListCache:
    """
    SQLite-based cache for directory scan results.

    Features:
    - Optional TTL; without one a stored entry is trusted until it is
      overwritten or the cache is cleared
    - Thread-safe operations
    - Backend failures degrade to a cache miss
    """

    def __init__(
        self,
        cache_dir: str = ".lintrun-cache",
        ttl_hours: Optional[float] = None,
        enabled: bool = True,
    ):
        """
        Initialize cache.

        Args:
            cache_dir: Directory for cache storage
            ttl_hours: Time-to-live in hours (None = never expire)
            enabled: Whether caching is enabled
        """
        self.enabled = enabled
        self.ttl_seconds = ttl_hours * 3600 if ttl_hours else None

        if self.enabled:
            self.cache = Cache(cache_dir)
            logger.debug(f"Cache initialized at {cache_dir} with TTL={ttl_hours}h")
        else:
            self.cache = None
            logger.debug("Cache disabled")

    def load(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found/expired
        """
        if not self.enabled or self.cache is None:
            return None

        try:
            value = self.cache.get(key)
            if value is not None:
                logger.debug(f"Cache hit: {key}")
            return value
        except Exception as e:
            logger.warning(f"Cache load failed: {e}")
            return None

    def save(self, key: str, value: Any) -> None:
        """
        Store value in cache, replacing any previous entry.

        Args:
            key: Cache key
            value: Value to cache
        """
        if not self.enabled or self.cache is None:
            return

        try:
            self.cache.set(key, value, expire=self.ttl_seconds)
            logger.debug(f"Cache set: {key}")
        except Exception as e:
            logger.warning(f"Cache save failed: {e}")

    def clear(self) -> None:
        """Clear all cache entries."""
        if not self.enabled or self.cache is None:
            return

        try:
            self.cache.clear()
            logger.info("Cache cleared")
        except Exception as e:
            logger.warning(f"Cache clear failed: {e}")

    def stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        if not self.enabled or self.cache is None:
            return {"enabled": False}

        try:
            return {
                "enabled": True,
                "size": len(self.cache),
                "directory": self.cache.directory,
                "volume": self.cache.volume(),
            }
        except Exception as e:
            logger.warning(f"Cache stats failed: {e}")
            return {"enabled": True, "error": str(e)}

    def close(self) -> None:
        """Close cache (cleanup)."""
        if self.cache is not None:
            self.cache.close()

    def __enter__(self) -> "FileListCache":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
