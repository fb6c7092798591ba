"""
Path handling for lintrun.

Turns caller-supplied paths into absolute, normalized strings and sorts
them into files to analyse, directories to expand and paths that do not
exist.
"""

import os
from typing import Optional, Sequence

from .exceptions import UsageError
from .logging_config import get_logger
from .models import FileError, ResolvedPaths

logger = get_logger(__name__)

NO_PATHS_MESSAGE = "At least one path must be specified to analyse."


def normalize_path(path: str) -> str:
    """
    Collapse duplicate separators and ``.``/``..`` segments.

    Both ``/`` and ``\\`` are accepted as separators on input; the result
    only uses ``os.sep``.

    Args:
        path: Path to normalize

    Returns:
        Normalized path string
    """
    if os.sep != "/":
        path = path.replace("/", os.sep)
    else:
        path = path.replace("\\", "/")
    return os.path.normpath(path)


def absolutize_path(path: str, working_directory: Optional[str] = None) -> str:
    """
    Make ``path`` absolute against ``working_directory`` (default: cwd).

    Args:
        path: Absolute or relative path
        working_directory: Base for relative paths

    Returns:
        Absolute, normalized path
    """
    path = os.path.expanduser(path)
    if not os.path.isabs(path):
        path = os.path.join(working_directory or os.getcwd(), path)
    return normalize_path(path)


def missing_path_error(path: str) -> FileError:
    return FileError(path, f"Path {path} does not exist", None, is_semantic=False)


def resolve_paths(
    paths: Sequence[str], working_directory: Optional[str] = None
) -> ResolvedPaths:
    """
    Classify each caller path as missing, a file, or a directory.

    A missing path is recorded as a non-semantic ``FileError`` and the
    remaining paths are still classified.

    Args:
        paths: Non-empty sequence of caller paths
        working_directory: Base for relative paths

    Returns:
        ResolvedPaths with absolutized ``paths`` in input order

    Raises:
        UsageError: If ``paths`` is empty
    """
    if len(paths) == 0:
        raise UsageError(NO_PATHS_MESSAGE)

    absolute = tuple(absolutize_path(p, working_directory) for p in paths)
    files = []
    directories = []
    errors = []

    for path in absolute:
        if not os.path.exists(path):
            logger.debug(f"Path does not exist: {path}")
            errors.append(missing_path_error(path))
        elif os.path.isfile(path):
            files.append(path)
        else:
            directories.append(path)

    return ResolvedPaths(
        paths=absolute,
        files=tuple(files),
        directories=tuple(directories),
        errors=tuple(errors),
    )
