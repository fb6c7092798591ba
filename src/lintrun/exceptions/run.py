"""Run-level exceptions: caller misuse and broken collaborator contracts."""

from typing import Any

from .base import LintrunError


class UsageError(LintrunError):
    """Raised when the run is invoked with arguments it cannot act on."""

    pass


class InternalContractError(LintrunError):
    """Raised when a collaborator hands back something outside its contract.

    This is a programming error in the collaborator, never a finding about
    the analysed code, so it aborts the run instead of being reported.
    """

    def __init__(self, value: Any, source: str = "analyser"):
        type_name = type(value).__name__
        super().__init__(
            f"Unexpected diagnostic of type {type_name} from {source}",
            details={"source": source, "type": type_name, "value": repr(value)[:200]},
        )
        self.value = value
        self.source = source
        self.type_name = type_name
