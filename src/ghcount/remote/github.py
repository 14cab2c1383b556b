"""Async GitHub REST client for repository metadata."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..config import CounterConfig
from ..exceptions import (
    ForbiddenError,
    MetadataFetchError,
    RepositoryNotFoundError,
    UnauthorizedError,
)
from ..logging_config import get_logger
from ..models import Repository

logger = get_logger(__name__)

ACCEPT_HEADER = "application/vnd.github.v3+json"

_STATUS_ERRORS = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: RepositoryNotFoundError,
}


class GitHubClient:
    """Thin async wrapper around ``GET /repos/{owner}/{name}``.

    ``transport`` is handed to httpx unchanged, so tests can plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        token: str,
        config: Optional[CounterConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config = config or CounterConfig()
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": config.user_agent,
                "Accept": ACCEPT_HEADER,
            },
            timeout=config.api_timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────

    async def fetch(self, owner: str, name: str) -> Repository:
        """Fetch metadata for ``owner/name``.

        The returned ``name`` and ``full_name`` are always the requested ones, even
        if GitHub answers with a renamed or differently cased repository, so
        team attribution keeps matching the declared names. Renamed and
        transferred repositories answer 301, which is followed.

        Raises:
            UnauthorizedError: 401
            ForbiddenError: 403
            RepositoryNotFoundError: 404
            MetadataFetchError: Any other status, a transport failure, or a
                payload without the expected fields
        """
        full_name = f"{owner}/{name}"
        logger.debug(f"GET /repos/{full_name}")

        try:
            response = await self._client.get(f"/repos/{owner}/{name}")
        except httpx.HTTPError as e:
            raise MetadataFetchError(full_name, body=str(e)) from e

        if response.status_code != 200:
            error_cls = _STATUS_ERRORS.get(response.status_code)
            if error_cls is not None:
                raise error_cls(full_name, response.text)
            raise MetadataFetchError(full_name, status=response.status_code, body=response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise MetadataFetchError(
                full_name, status=response.status_code, body=f"invalid JSON: {e}"
            ) from e

        return _to_repository(full_name, name, payload)


def _to_repository(full_name: str, name: str, payload: Any) -> Repository:
    if not isinstance(payload, dict) or not isinstance(payload.get("clone_url"), str):
        raise MetadataFetchError(full_name, status=200, body="response has no clone_url")

    language = payload.get("language")
    return Repository(
        name=name,
        full_name=full_name,
        clone_url=payload["clone_url"],
        language=language if isinstance(language, str) else None,
    )
