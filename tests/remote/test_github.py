"""Tests for the GitHub metadata client, over httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from ghcount.config import CounterConfig
from ghcount.exceptions import (
    ErrorCode,
    ForbiddenError,
    MetadataFetchError,
    RepositoryNotFoundError,
    UnauthorizedError,
)
from ghcount.remote import GitHubClient

REPO_PAYLOAD = {
    "name": "API",
    "full_name": "MyOrg/API",
    "clone_url": "https://github.com/MyOrg/API.git",
    "language": "Rust",
}


def _fetch(handler, owner="myorg", name="api", config=None):
    async def _run():
        async with GitHubClient("tok123", config, transport=httpx.MockTransport(handler)) as client:
            return await client.fetch(owner, name)

    return asyncio.run(_run())


class TestFetch:
    def test_success_forces_requested_names(self):
        repo = _fetch(lambda request: httpx.Response(200, json=REPO_PAYLOAD))
        assert repo.full_name == "myorg/api"
        assert repo.name == "api"
        assert repo.clone_url == "https://github.com/MyOrg/API.git"
        assert repo.language == "Rust"

    def test_request_shape(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            return httpx.Response(200, json=REPO_PAYLOAD)

        _fetch(handler, config=CounterConfig(api_base_url="https://ghe.example.com/api/v3"))
        assert seen["url"] == "https://ghe.example.com/api/v3/repos/myorg/api"
        assert seen["headers"]["authorization"] == "Bearer tok123"
        assert seen["headers"]["user-agent"] == "ghcount"
        assert seen["headers"]["accept"] == "application/vnd.github.v3+json"

    def test_null_language(self):
        payload = dict(REPO_PAYLOAD, language=None)
        repo = _fetch(lambda request: httpx.Response(200, json=payload))
        assert repo.language is None

    def test_follows_rename_redirect(self):
        requested = []

        def handler(request):
            requested.append(request.url.path)
            if request.url.path == "/repos/myorg/old":
                return httpx.Response(
                    301, headers={"location": "https://api.github.com/repositories/42"}
                )
            return httpx.Response(200, json=REPO_PAYLOAD)

        repo = _fetch(handler, name="old")
        assert requested == ["/repos/myorg/old", "/repositories/42"]
        assert repo.full_name == "myorg/old"
        assert repo.clone_url == "https://github.com/MyOrg/API.git"

    @pytest.mark.parametrize(
        "status,error_cls,code",
        [
            (401, UnauthorizedError, ErrorCode.GC101),
            (403, ForbiddenError, ErrorCode.GC102),
            (404, RepositoryNotFoundError, ErrorCode.GC103),
        ],
    )
    def test_status_mapping(self, status, error_cls, code):
        with pytest.raises(error_cls) as exc_info:
            _fetch(lambda request: httpx.Response(status, text="nope"))
        assert exc_info.value.code is code
        assert exc_info.value.status == status
        assert exc_info.value.repository == "myorg/api"

    def test_other_status_keeps_body(self):
        with pytest.raises(MetadataFetchError) as exc_info:
            _fetch(lambda request: httpx.Response(500, text="server exploded"))
        error = exc_info.value
        assert type(error) is MetadataFetchError
        assert error.status == 500
        assert "server exploded" in error.message
        assert error.recoverable is True

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(MetadataFetchError) as exc_info:
            _fetch(handler)
        assert exc_info.value.status is None

    def test_payload_without_clone_url(self):
        with pytest.raises(MetadataFetchError):
            _fetch(lambda request: httpx.Response(200, json={"name": "api"}))

    def test_invalid_json_body(self):
        with pytest.raises(MetadataFetchError):
            _fetch(lambda request: httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"}))

    def test_payload_is_list(self):
        with pytest.raises(MetadataFetchError):
            _fetch(lambda request: httpx.Response(200, content=json.dumps([REPO_PAYLOAD]).encode()))
