"""
Peak memory recorder for lintrun.

An outer supervisor reads the memory limit file to notice a run that is
eating memory. Every ``record()`` also acts as the cooperative checkpoint
where pending signal handlers (e.g. SIGINT) get to run.
"""

import math
import sys
import time
from typing import Callable, Optional

from .logging_config import get_logger

try:
    import resource
except ImportError:  # Windows
    resource = None  # type: ignore[assignment]

logger = get_logger(__name__)


def peak_memory_bytes() -> int:
    """Peak resident set size of this process in bytes (0 if unknown)."""
    if resource is None:
        return 0
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS and kilobytes elsewhere
    if sys.platform == "darwin":
        return int(peak)
    return int(peak) * 1024


def _yield_to_signal_handlers() -> None:
    time.sleep(0)


class MemoryWatchdog:
    """Writes ``"<N> MB"`` of peak memory to a well-known file."""

    def __init__(
        self,
        memory_limit_file: str,
        dispatch_signals: Optional[Callable[[], None]] = None,
        peak_memory: Callable[[], int] = peak_memory_bytes,
    ):
        self.memory_limit_file = memory_limit_file
        self._dispatch_signals = dispatch_signals or _yield_to_signal_handlers
        self._peak_memory = peak_memory

    def peak_memory_megabytes(self) -> int:
        return math.ceil(self._peak_memory() / 1024 / 1024)

    def record(self) -> None:
        """Overwrite the memory limit file, then run one signal checkpoint."""
        megabytes = self.peak_memory_megabytes()
        try:
            with open(self.memory_limit_file, "w", encoding="utf-8") as f:
                f.write(f"{megabytes} MB")
        except OSError as e:
            logger.warning(f"Cannot write memory limit file {self.memory_limit_file}: {e}")

        self._dispatch_signals()
