"""Analysis engine interface and the built-in compile check."""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Sequence

from .logging_config import get_logger
from .models import Diagnostic, FileError

logger = get_logger(__name__)

BeforeFile = Optional[Callable[[str], None]]
AfterFile = Optional[Callable[[], None]]


class Analyser(Protocol):
    """Runs the checks. Calls ``before_file``/``after_file`` around each file."""

    def analyse(
        self,
        files: Sequence[str],
        only_files: bool,
        before_file: BeforeFile,
        after_file: AfterFile,
        debug: bool,
    ) -> Sequence[Diagnostic]:
        ...


class CompileCheckAnalyser:
    """Byte-compiles Python sources and reports syntax errors.

    Files that are not ``.py``/``.pyi`` still go through the hooks so the
    progress bar stays accurate. They produce no diagnostic, only a log line.
    """

    PYTHON_SUFFIXES = (".py", ".pyi")

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def analyse(
        self,
        files: Sequence[str],
        only_files: bool,
        before_file: BeforeFile,
        after_file: AfterFile,
        debug: bool,
    ) -> List[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        skipped = 0

        for path in files:
            if before_file is not None:
                before_file(path)
            if path.endswith(self.PYTHON_SUFFIXES):
                error = self._check(path)
                if error is not None:
                    diagnostics.append(error)
            else:
                skipped += 1
            if after_file is not None:
                after_file()

        if skipped:
            logger.info(f"{skipped} non-Python file(s) were not checked")
        logger.debug(f"Compile check done: {len(files)} files, only_files={only_files}")
        return diagnostics

    def _check(self, path: str) -> Optional[FileError]:
        try:
            with open(path, encoding=self.encoding) as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            return FileError(path, f"Cannot read file: {e}", None, is_semantic=False)

        try:
            compile(source, path, "exec", dont_inherit=True)
        except SyntaxError as e:
            return FileError(path, f"Syntax error: {e.msg}", e.lineno)
        except ValueError as e:
            # source containing null bytes
            return FileError(path, f"Cannot compile file: {e}")
        return None
