"""Output formatters for lintrun."""

from .base import ErrorFormatter
from .github_formatter import GithubFormatter
from .json_formatter import JsonFormatter
from .raw_formatter import RawFormatter
from .table_formatter import TableFormatter


def get_formatter(name: str) -> ErrorFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "table", "raw", "json", "github"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "table": TableFormatter,
        "raw": RawFormatter,
        "json": JsonFormatter,
        "github": GithubFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "ErrorFormatter",
    "TableFormatter",
    "RawFormatter",
    "JsonFormatter",
    "GithubFormatter",
    "get_formatter",
]
