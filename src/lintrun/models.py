"""Data models for lintrun"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class FileError:
    """A diagnostic attributable to one source file.

    ``is_semantic`` is False for failures that are about the path itself
    (e.g. the path does not exist) rather than about its contents.
    """

    file: str
    message: str
    line: Optional[int] = None
    is_semantic: bool = True


@dataclass(frozen=True)
class GlobalMessage:
    """A diagnostic that is not tied to any single file."""

    text: str


# Engines may hand back bare strings for global messages
Diagnostic = Union[FileError, GlobalMessage, str]


@dataclass(frozen=True)
class ScanResult:
    """Files found under one directory and where they came from."""

    directory: str
    files: Tuple[str, ...]
    from_cache: bool = False


@dataclass(frozen=True)
class ResolvedPaths:
    """Caller paths split into files, directories to expand and failures."""

    paths: Tuple[str, ...]
    files: Tuple[str, ...] = ()
    directories: Tuple[str, ...] = ()
    errors: Tuple[FileError, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Everything a formatter needs to report one run."""

    file_errors: Tuple[FileError, ...] = field(default_factory=tuple)
    global_messages: Tuple[str, ...] = field(default_factory=tuple)
    default_level_used: bool = False
    current_directory: str = ""

    @property
    def has_errors(self) -> bool:
        return self.total_errors_count > 0

    @property
    def total_errors_count(self) -> int:
        return len(self.file_errors) + len(self.global_messages)

    def errors_by_file(self) -> Dict[str, List[FileError]]:
        """Group file errors by path, files and lines in ascending order."""
        grouped: Dict[str, List[FileError]] = OrderedDict()
        ordered = sorted(
            self.file_errors,
            key=lambda e: (e.file, e.line if e.line is not None else -1),
        )
        for error in ordered:
            grouped.setdefault(error.file, []).append(error)
        return grouped
