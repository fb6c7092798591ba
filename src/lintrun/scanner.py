"""Directory expansion with a persistent file-list cache.

A directory handed to the run is either answered from the cache, or
walked on disk and the result stored for next time.
"""

import os
from typing import Iterator, Optional, Sequence, Tuple

from .cache import CacheStore, cache_key
from .logging_config import get_logger
from .models import ScanResult
from .output import OutputStyle
from .paths import normalize_path

logger = get_logger(__name__)


def walk_source_files(directory: str, file_extensions: Sequence[str]) -> Iterator[str]:
    """
    Yield files under ``directory`` whose name ends in one of the extensions.

    Symbolic links are followed, but a real directory is entered only once
    so link cycles terminate. Entries are visited in sorted order.
    Extension matching is case-sensitive.

    Args:
        directory: Absolute directory to walk
        file_extensions: Extensions without the leading dot (e.g. ``"py"``)

    Yields:
        Normalized file paths in discovery order
    """
    suffixes: Tuple[str, ...] = tuple("." + ext.lstrip(".") for ext in file_extensions)
    if not suffixes:
        return

    seen = {os.path.realpath(directory)}

    for root, dirnames, filenames in os.walk(directory, followlinks=True):
        dirnames.sort()
        kept = []
        for name in dirnames:
            real = os.path.realpath(os.path.join(root, name))
            if real in seen:
                continue
            seen.add(real)
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            if not name.endswith(suffixes):
                continue
            path = os.path.join(root, name)
            if os.path.isfile(path):
                yield normalize_path(path)


class CachedDirectoryScanner:
    """Resolves a directory to its source files, consulting the cache first."""

    def __init__(self, file_extensions: Sequence[str], cache: CacheStore):
        self.file_extensions = list(file_extensions)
        self.cache = cache

    @staticmethod
    def _log(
        output: Optional[OutputStyle], debug: bool, message: str, debug_only: bool = False
    ) -> None:
        logger.debug(message)
        if output is not None and (debug or not debug_only):
            output.status(message)

    def scan(
        self,
        directory: str,
        cache_enabled: bool,
        clear_cache: bool,
        output: Optional[OutputStyle] = None,
        debug: bool = False,
    ) -> ScanResult:
        """
        Files under ``directory``, from the cache when allowed.

        A cache hit is returned as stored; the filesystem is not consulted.
        After a fresh walk the result replaces the cache entry whenever
        caching is enabled, including when ``clear_cache`` forced the walk.

        Args:
            directory: Absolute, normalized directory path
            cache_enabled: Read from and write to the cache
            clear_cache: Ignore any stored entry and walk the filesystem
            output: Sink for progress messages
            debug: Also echo the file counts

        Returns:
            ScanResult with ``from_cache`` set on a hit
        """
        key = cache_key(directory)

        if cache_enabled and not clear_cache:
            self._log(output, debug, "Loading files from cache...")
            cached = self.cache.load(key)
            if cached is not None:
                files = tuple(cached)
                self._log(output, debug, f"Loaded {len(files)} files from cache", debug_only=True)
                return ScanResult(directory, files, from_cache=True)
            logger.debug(f"No cache entry for {directory}")

        self._log(output, debug, "Scanning file system")
        files = tuple(walk_source_files(directory, self.file_extensions))
        self._log(output, debug, f"Loaded {len(files)} files from file system", debug_only=True)

        if cache_enabled:
            self._log(output, debug, "Saving cache")
            self.cache.save(key, list(files))

        return ScanResult(directory, files, from_cache=False)
