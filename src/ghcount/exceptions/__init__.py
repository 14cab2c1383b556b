"""Exception hierarchy for ghcount."""

from .base import GhcountError
from .config import (
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    InvalidConfigError,
)
from .remote import (
    CloneAuthError,
    CloneError,
    ForbiddenError,
    MetadataFetchError,
    RepositoryNotFoundError,
    UnauthorizedError,
)
from .taxonomy import ErrorCode
from .tooling import ExternalToolExecutionError, ExternalToolMissingError

__all__ = [
    "GhcountError",
    "ErrorCode",
    "MetadataFetchError",
    "UnauthorizedError",
    "ForbiddenError",
    "RepositoryNotFoundError",
    "CloneError",
    "CloneAuthError",
    "ExternalToolMissingError",
    "ExternalToolExecutionError",
    "ConfigurationError",
    "ConfigReadError",
    "ConfigParseError",
    "InvalidConfigError",
]
