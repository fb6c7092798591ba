"""
lintrun - orchestration for static-analysis runs

Expands caller paths into a file set (with a persistent scan cache),
drives an analyser over it with progress and peak-memory reporting, and
hands the classified diagnostics to a formatter that picks the exit code.
"""

__version__ = "0.1.0"

from .application import AnalyseApplication, classify_diagnostics
from .models import AnalysisResult, FileError, GlobalMessage

__all__ = [
    "AnalyseApplication",  # Main entry point
    "classify_diagnostics",
    "AnalysisResult",
    "FileError",
    "GlobalMessage",
]
