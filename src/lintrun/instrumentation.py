"""Per-file hooks handed to the analyser.

A run is either in batch mode (progress bar, periodic memory check) or in
debug mode (each file path echoed before it is analysed). The mode is
picked once and exposes at most one of ``before_file``/``after_file``.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Union

from .output import OutputStyle

DEFAULT_MEMORY_CHECK_INTERVAL = 100


class Recorder(Protocol):
    def record(self) -> None:
        ...


class BatchMode:
    """Progress bar sized to the file count, started lazily on the first file."""

    before_file: Optional[Callable[[str], None]] = None

    def __init__(
        self,
        output: OutputStyle,
        total: int,
        watchdog: Recorder,
        memory_check_interval: int = DEFAULT_MEMORY_CHECK_INTERVAL,
    ):
        if memory_check_interval < 1:
            raise ValueError("memory_check_interval must be at least 1")
        self.output = output
        self.total = total
        self.watchdog = watchdog
        self.memory_check_interval = memory_check_interval
        self.started = False
        self.finished = False
        self._file_order = 0

    @property
    def after_file(self) -> Callable[[], None]:
        return self.on_advance

    def on_advance(self) -> None:
        if not self.started:
            self.output.progress_start(self.total)
            self.started = True
        self.output.progress_advance()
        if self._file_order % self.memory_check_interval == 0:
            self.watchdog.record()
        self._file_order += 1

    def finish(self) -> None:
        if self.started and not self.finished:
            self.output.progress_finish()
            self.finished = True


class DebugMode:
    """Echo each file before the analyser starts on it."""

    after_file: Optional[Callable[[], None]] = None

    def __init__(self, output: OutputStyle):
        self.output = output

    @property
    def before_file(self) -> Callable[[str], None]:
        return self.on_file_start

    def on_file_start(self, file: str) -> None:
        self.output.status(file)

    def finish(self) -> None:
        pass


ExecutionMode = Union[BatchMode, DebugMode]


def select_mode(
    debug: bool,
    output: OutputStyle,
    total: int,
    watchdog: Recorder,
    memory_check_interval: int = DEFAULT_MEMORY_CHECK_INTERVAL,
) -> ExecutionMode:
    if debug:
        return DebugMode(output)
    return BatchMode(output, total, watchdog, memory_check_interval)
