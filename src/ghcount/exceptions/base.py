"""Base exception for ghcount."""

from typing import Dict, Optional

from .taxonomy import ErrorCode


class GhcountError(Exception):
    """Base exception for all ghcount errors.

    Subclasses pin ``code`` to their failure mode. ``recoverable`` tells the
    pipeline whether the failure is scoped to one repository (the run goes on)
    or fatal for the whole run.
    """

    code: ErrorCode = ErrorCode.GC000
    recoverable: bool = True

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def stage(self) -> str:
        return self.code.stage

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
