"""GitHub Actions formatter emitting ``::error`` annotations."""

from ..models import AnalysisResult
from ..output import OutputStyle
from .base import ErrorFormatter


def _escape(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GithubFormatter(ErrorFormatter):
    """Output GitHub Actions annotations, paths relative to the run directory."""

    def format_errors(self, result: AnalysisResult, output: OutputStyle) -> int:
        for file, errors in result.errors_by_file().items():
            relative = self.relative_path(file, result.current_directory)
            for error in errors:
                props = f"file={relative}"
                if error.line is not None:
                    props += f",line={error.line}"
                output.writeln(f"::error {props}::{_escape(error.message)}")
        for message in result.global_messages:
            output.writeln(f"::error ::{_escape(message)}")
        return self.exit_code(result)
