"""Shared fixtures: a configured client backed by a fake GitBook API."""

import json

import httpx
import pytest

from gitbook_mcp.client import GitBookClient
from gitbook_mcp.config import GitBookConfig
from gitbook_mcp.mcp_server.tools import build_registry

BASE_URL = "https://api.gitbook.test/v1"
BASE_PATH = "/v1"


class FakeGitBookAPI:
    """In-memory stand-in for the GitBook API, wired in via httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response] = {}

    def respond(
        self,
        method: str,
        path: str,
        json_body=None,
        status: int = 200,
        text: str | None = None,
    ) -> None:
        """Register the response for ``METHOD path`` (path relative to the base)."""
        if text is not None:
            response = httpx.Response(status, text=text)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self._routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(BASE_PATH):]
        response = self._routes.get((request.method, path))
        if response is None:
            return httpx.Response(404, text=f"unexpected request {request.method} {path}")
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_path(self) -> str:
        return self.last.url.path[len(BASE_PATH):]

    def last_json(self):
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def config():
    return GitBookConfig(api_token="test-token", api_base_url=BASE_URL)


@pytest.fixture
def api():
    return FakeGitBookAPI()


@pytest.fixture
def client(config, api):
    return GitBookClient(config, transport=httpx.MockTransport(api.handler))


@pytest.fixture
def registry(client):
    return build_registry(client)
