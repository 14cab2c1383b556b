"""External line counter exceptions."""

from .base import GhcountError
from .taxonomy import ErrorCode


class ExternalToolMissingError(GhcountError):
    """Raised when the external line counter is not installed. Fatal."""

    code = ErrorCode.GC300
    recoverable = False

    def __init__(self, tool: str):
        super().__init__(
            f"{tool} is not installed. Install {tool} and run again.",
            details={"tool": tool},
        )
        self.tool = tool


class ExternalToolExecutionError(GhcountError):
    """Raised when the external line counter fails or prints unusable output."""

    code = ErrorCode.GC301

    def __init__(self, tool: str, reason: str, pass_name: str = "total"):
        super().__init__(
            f"{tool} {pass_name} pass failed",
            details={"tool": tool, "reason": reason},
        )
        self.tool = tool
        self.reason = reason
        self.pass_name = pass_name
