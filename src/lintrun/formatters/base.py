"""Base formatter interface for lintrun reports."""

import os
from abc import ABC, abstractmethod

from ..models import AnalysisResult
from ..output import OutputStyle


class ErrorFormatter(ABC):
    """Renders an AnalysisResult and decides the process exit code."""

    @abstractmethod
    def format_errors(self, result: AnalysisResult, output: OutputStyle) -> int:
        """Write the report to ``output`` and return the exit code."""

    @staticmethod
    def exit_code(result: AnalysisResult) -> int:
        return 1 if result.has_errors else 0

    @staticmethod
    def relative_path(file: str, directory: str) -> str:
        """``file`` relative to ``directory`` when it lies beneath it."""
        if directory and file.startswith(directory.rstrip(os.sep) + os.sep):
            return os.path.relpath(file, directory)
        return file
