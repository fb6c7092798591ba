"""Exception hierarchy for lintrun."""

from .base import LintrunError
from .config import ConfigurationError, InvalidConfigError
from .run import InternalContractError, UsageError

__all__ = [
    "LintrunError",
    "UsageError",
    "InternalContractError",
    "ConfigurationError",
    "InvalidConfigError",
]
