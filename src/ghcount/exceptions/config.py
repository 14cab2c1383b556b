"""Configuration exceptions: settings files and the team document.

Every configuration failure is fatal; the run stops before any repository is
touched.
"""

from pathlib import Path
from typing import Any

from .base import GhcountError
from .taxonomy import ErrorCode


class ConfigurationError(GhcountError):
    """Base class for configuration-related errors."""

    recoverable = False


class ConfigReadError(ConfigurationError):
    """Raised when a configuration file cannot be read."""

    code = ErrorCode.GC400

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read configuration file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class ConfigParseError(ConfigurationError):
    """Raised when a configuration document is malformed."""

    code = ErrorCode.GC401

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Invalid configuration document: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    code = ErrorCode.GC402

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
