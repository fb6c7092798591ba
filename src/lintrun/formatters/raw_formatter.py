"""Raw formatter: one ``path:line:message`` per error."""

from ..models import AnalysisResult
from ..output import OutputStyle
from .base import ErrorFormatter


class RawFormatter(ErrorFormatter):
    """Grep- and editor-friendly output."""

    def format_errors(self, result: AnalysisResult, output: OutputStyle) -> int:
        for message in result.global_messages:
            output.writeln(f"?:?:{message}")
        for file, errors in result.errors_by_file().items():
            for error in errors:
                line = error.line if error.line is not None else "?"
                output.writeln(f"{file}:{line}:{error.message}")
        return self.exit_code(result)
