"""Console output sink.

The report goes to ``console``. Status lines and the progress bar go to
``status_console`` so a machine-readable report on stdout stays parseable.
"""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class OutputStyle:
    """Where a run writes its report, status messages and progress."""

    def __init__(self, console: Console | None = None, status_console: Console | None = None):
        self.console = console or Console()
        self.status_console = status_console or self.console
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def writeln(self, message: str = "") -> None:
        """Write one report line."""
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def status(self, message: str) -> None:
        """Write a progress or debug message, never part of the report."""
        self.status_console.print(message, markup=False, highlight=False, soft_wrap=True)

    def progress_start(self, total: int) -> None:
        """Show a bar for ``total`` files. A second start is ignored."""
        if self._progress is not None:
            return
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.status_console,
            transient=False,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Analysing", total=total)

    def progress_advance(self, step: int = 1) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.advance(self._task_id, step)

    def progress_finish(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        task = self._progress.tasks[0]
        if task.total is not None:
            self._progress.update(self._task_id, completed=task.total)
        self._progress.stop()
        self._progress = None
        self._task_id = None
        self.status_console.print()
