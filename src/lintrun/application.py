"""
The analyse pipeline.

Paths are resolved and expanded into a file set, the analyser is run over
it with per-file instrumentation, and its diagnostics are classified into
an AnalysisResult for the formatter. Peak memory is recorded before path
resolution, after filtering, and periodically while files are analysed.
"""

import os
from typing import Iterable, List, Optional, Sequence, Tuple

from .cache import CacheStore
from .engine import Analyser
from .exceptions import InternalContractError, UsageError
from .exclusion import Excluder, filter_excluded
from .formatters import ErrorFormatter
from .instrumentation import DEFAULT_MEMORY_CHECK_INTERVAL, Recorder, select_mode
from .logging_config import get_logger
from .models import AnalysisResult, Diagnostic, FileError, GlobalMessage
from .output import OutputStyle
from .paths import NO_PATHS_MESSAGE, normalize_path, resolve_paths
from .scanner import CachedDirectoryScanner

logger = get_logger(__name__)


def classify_diagnostics(
    diagnostics: Iterable[Diagnostic],
) -> Tuple[List[FileError], List[str]]:
    """
    Split diagnostics into file-scoped errors and global messages.

    Args:
        diagnostics: Mixed diagnostics from path resolution and the analyser

    Returns:
        (file_errors, global_messages) in input order

    Raises:
        InternalContractError: For anything that is neither kind
    """
    file_errors: List[FileError] = []
    global_messages: List[str] = []

    for diagnostic in diagnostics:
        if isinstance(diagnostic, str):
            global_messages.append(diagnostic)
        elif isinstance(diagnostic, GlobalMessage):
            global_messages.append(diagnostic.text)
        elif isinstance(diagnostic, FileError):
            file_errors.append(diagnostic)
        else:
            raise InternalContractError(diagnostic)

    return file_errors, global_messages


def merge_unique(*groups: Iterable[str]) -> List[str]:
    """Concatenate path groups, keeping the first occurrence of each path."""
    seen = set()
    merged = []
    for group in groups:
        for path in group:
            if path not in seen:
                seen.add(path)
                merged.append(path)
    return merged


class AnalyseApplication:
    """Runs one analysis over caller paths and returns the exit code."""

    def __init__(
        self,
        analyser: Analyser,
        watchdog: Recorder,
        file_extensions: Sequence[str],
        excluder: Excluder,
        cache: CacheStore,
        memory_check_interval: int = DEFAULT_MEMORY_CHECK_INTERVAL,
        working_directory: Optional[str] = None,
    ):
        self.analyser = analyser
        self.watchdog = watchdog
        self.excluder = excluder
        self.scanner = CachedDirectoryScanner(file_extensions, cache)
        self.memory_check_interval = memory_check_interval
        self.working_directory = working_directory

    def analyse(
        self,
        paths: Sequence[str],
        output: OutputStyle,
        formatter: ErrorFormatter,
        default_level_used: bool,
        debug: bool,
        enable_cache: bool,
        clear_cache: bool,
    ) -> int:
        """
        Analyse ``paths`` and report through ``formatter``.

        Args:
            paths: Files and directories to analyse (at least one)
            output: Sink for progress, debug echo and the report
            formatter: Renders the result and picks the exit code
            default_level_used: Passed through to the result untouched
            debug: Echo each file instead of showing a progress bar
            enable_cache: Use the directory scan cache
            clear_cache: Rescan directories even if cached

        Returns:
            The formatter's exit code

        Raises:
            UsageError: If ``paths`` is empty
            InternalContractError: If the analyser returns an unknown diagnostic
        """
        if len(paths) == 0:
            raise UsageError(NO_PATHS_MESSAGE)

        self.watchdog.record()

        resolved = resolve_paths(paths, self.working_directory)
        logger.info(
            f"Analysing {len(resolved.paths)} path(s): {len(resolved.files)} file(s), "
            f"{len(resolved.directories)} directory(ies), {len(resolved.errors)} missing"
        )

        only_files = True
        scanned = []
        for directory in resolved.directories:
            result = self.scanner.scan(directory, enable_cache, clear_cache, output, debug)
            if not result.from_cache and result.files:
                only_files = False
            scanned.append(result.files)

        files = merge_unique(resolved.files, *scanned)
        files = filter_excluded(files, self.excluder)

        self.watchdog.record()

        mode = select_mode(debug, output, len(files), self.watchdog, self.memory_check_interval)
        diagnostics = list(resolved.errors)
        diagnostics.extend(
            self.analyser.analyse(
                files,
                only_files,
                mode.before_file,
                mode.after_file,
                debug,
            )
        )
        mode.finish()

        file_errors, global_messages = classify_diagnostics(diagnostics)
        logger.info(
            f"Analysis finished: {len(files)} file(s), {len(file_errors)} file error(s), "
            f"{len(global_messages)} other message(s)"
        )

        result = AnalysisResult(
            file_errors=tuple(file_errors),
            global_messages=tuple(global_messages),
            default_level_used=default_level_used,
            current_directory=normalize_path(os.path.dirname(resolved.paths[0])),
        )
        return formatter.format_errors(result, output)
