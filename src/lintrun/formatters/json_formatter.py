"""JSON formatter for lintrun."""

import json
from dataclasses import asdict

from ..models import AnalysisResult
from ..output import OutputStyle
from .base import ErrorFormatter


class JsonFormatter(ErrorFormatter):
    """Render the result as a JSON document."""

    def format_errors(self, result: AnalysisResult, output: OutputStyle) -> int:
        output.writeln(self.format(result))
        return self.exit_code(result)

    def format(self, result: AnalysisResult) -> str:
        data = {
            "totals": {
                "errors": len(result.global_messages),
                "file_errors": len(result.file_errors),
            },
            "files": {
                file: {
                    "errors": len(errors),
                    "messages": [asdict(e) for e in errors],
                }
                for file, errors in result.errors_by_file().items()
            },
            "errors": list(result.global_messages),
            "default_level_used": result.default_level_used,
        }
        return json.dumps(data, indent=2)
