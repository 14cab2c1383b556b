"""Repository-scoped exceptions: metadata lookups and clones.

All of these are recoverable; the pipeline records them against the
repository and moves on to the next one.
"""

from typing import Optional

from .base import GhcountError
from .taxonomy import ErrorCode


class MetadataFetchError(GhcountError):
    """Raised when repository metadata cannot be fetched."""

    code = ErrorCode.GC100

    def __init__(
        self,
        repository: str,
        status: Optional[int] = None,
        body: str = "",
        message: Optional[str] = None,
    ):
        if message is None:
            if status is not None:
                message = f"GitHub API error ({status}): {body}"
            else:
                message = f"GitHub API request failed: {body}"
        details = {"repository": repository}
        if status is not None:
            details["status"] = str(status)
        super().__init__(message, details=details)
        self.repository = repository
        self.status = status
        self.body = body


class UnauthorizedError(MetadataFetchError):
    """401: the token was rejected."""

    code = ErrorCode.GC101

    def __init__(self, repository: str, body: str = ""):
        super().__init__(
            repository,
            status=401,
            body=body,
            message=(
                "Authentication failed: the GitHub token is invalid. "
                "Use a personal access token with repository read access."
            ),
        )


class ForbiddenError(MetadataFetchError):
    """403: the token is valid but cannot see the repository."""

    code = ErrorCode.GC102

    def __init__(self, repository: str, body: str = ""):
        super().__init__(
            repository,
            status=403,
            body=body,
            message=(
                f"Access denied to {repository}. "
                "Private repositories need a token with the matching permissions."
            ),
        )


class RepositoryNotFoundError(MetadataFetchError):
    """404: no such repository, or it is invisible to the token."""

    code = ErrorCode.GC103

    def __init__(self, repository: str, body: str = ""):
        super().__init__(
            repository,
            status=404,
            body=body,
            message=(
                f"Repository not found: {repository}. "
                "Check the name and that the token can access it."
            ),
        )


class CloneError(GhcountError):
    """Raised when ``git clone`` fails."""

    code = ErrorCode.GC200

    def __init__(self, repository: str, reason: str, message: Optional[str] = None):
        super().__init__(
            message or f"Failed to clone {repository}",
            details={"repository": repository, "reason": reason},
        )
        self.repository = repository
        self.reason = reason


class CloneAuthError(CloneError):
    """Raised when the remote rejects the clone credentials."""

    code = ErrorCode.GC201

    def __init__(self, repository: str, reason: str):
        super().__init__(
            repository,
            reason,
            message=(
                f"Authentication failed while cloning private repository {repository}. "
                "Check that the GitHub token has the required permissions."
            ),
        )
