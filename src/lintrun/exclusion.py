"""Exclusion rules applied to the resolved file set."""

import fnmatch
import os
from pathlib import PurePath
from typing import Iterable, List, Optional, Protocol, Sequence

from .paths import absolutize_path, normalize_path

_GLOB_CHARS = frozenset("*?[")


class Excluder(Protocol):
    def is_excluded(self, path: str) -> bool:
        ...


def _is_glob(pattern: str) -> bool:
    return any(ch in _GLOB_CHARS for ch in pattern)


class FileExcluder:
    """
    Decides whether an absolute, normalized path is left out of analysis.

    Plain patterns name a file or directory (relative ones are resolved
    against ``working_directory``) and exclude it and everything beneath.
    Glob patterns are matched against the full path when absolute, and
    against the trailing path components otherwise, so ``vendor/*`` and
    ``*_pb2.py`` work without a leading ``**``.
    """

    def __init__(self, exclude_patterns: Sequence[str] = (), working_directory: Optional[str] = None):
        self._prefixes: List[str] = []
        self._absolute_globs: List[str] = []
        self._relative_globs: List[str] = []

        for pattern in exclude_patterns:
            if not pattern:
                continue
            if not _is_glob(pattern):
                self._prefixes.append(absolutize_path(pattern, working_directory))
            elif os.path.isabs(pattern):
                self._absolute_globs.append(normalize_path(pattern))
            else:
                self._relative_globs.append(pattern)

    def is_excluded(self, path: str) -> bool:
        for prefix in self._prefixes:
            if path == prefix or path.startswith(prefix.rstrip(os.sep) + os.sep):
                return True

        for pattern in self._absolute_globs:
            if fnmatch.fnmatchcase(path, pattern):
                return True

        if self._relative_globs:
            pure = PurePath(path)
            for pattern in self._relative_globs:
                if pure.match(pattern):
                    return True
                # "vendor/*" should also cover vendor/a/b.py
                if _matches_directory_glob(pure, pattern):
                    return True

        return False


def _matches_directory_glob(path: PurePath, pattern: str) -> bool:
    if not pattern.endswith("/*"):
        return False
    directory = pattern[:-2]
    parents = path.parts[:-1]
    for depth in range(1, len(parents) + 1):
        if PurePath(*parents[:depth]).match(directory):
            return True
    return False


def filter_excluded(files: Iterable[str], excluder: Excluder) -> List[str]:
    """Drop every path the excluder rejects. Order is preserved."""
    return [f for f in files if not excluder.is_excluded(f)]
