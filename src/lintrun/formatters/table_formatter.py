"""Rich table formatter for terminal output."""

from rich.markup import escape
from rich.table import Table

from ..models import AnalysisResult
from ..output import OutputStyle
from .base import ErrorFormatter


class TableFormatter(ErrorFormatter):
    """One table per file, then global messages, then a summary line."""

    def format_errors(self, result: AnalysisResult, output: OutputStyle) -> int:
        console = output.console

        if not result.has_errors:
            console.print("[bold green][OK] No errors[/]")
            if result.default_level_used:
                self._default_level_note(output)
            return 0

        for file, errors in result.errors_by_file().items():
            table = Table(header_style="bold")
            table.add_column("Line", justify="right", style="dim", no_wrap=True)
            table.add_column(escape(self.relative_path(file, result.current_directory)), overflow="fold")
            for error in errors:
                line = str(error.line) if error.line is not None else ""
                table.add_row(line, escape(error.message))
            console.print(table)

        if result.global_messages:
            table = Table(header_style="bold")
            table.add_column("Error", overflow="fold")
            for message in result.global_messages:
                table.add_row(escape(message))
            console.print(table)

        total = result.total_errors_count
        noun = "error" if total == 1 else "errors"
        console.print(f"[bold red][ERROR] Found {total} {noun}[/]")
        if result.default_level_used:
            self._default_level_note(output)
        return 1

    @staticmethod
    def _default_level_note(output: OutputStyle) -> None:
        output.console.print(
            "[dim]Tip: no --level was given, so the default level was used. "
            "Pass --level to choose how strict the analysis is.[/]"
        )
