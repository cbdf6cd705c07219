"""
Shared fixtures: a recording mock of the Dumpling AI API and registries
bound to it.
"""

import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from dumpling_mcp.config import Settings
from dumpling_mcp.registry import build_registry

TEST_BASE_URL = "https://dumpling.test"
TEST_API_KEY = "test-key"


class MockUpstream:
    """Records every request and answers per tool path."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: Dict[str, Tuple[int, Any]] = {}
        self._errors: Dict[str, Exception] = {}

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def respond(self, tool: str, body: Any = None, status: int = 200) -> None:
        """Answer `tool` with a JSON body, or raw text when body is a str."""
        self._responses[tool] = (status, {} if body is None else body)

    def fail(self, tool: str, error: Exception) -> None:
        self._errors[tool] = error

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        tool = request.url.path.rsplit("/", 1)[-1]
        if tool in self._errors:
            raise self._errors[tool]
        status, body = self._responses.get(tool, (200, {}))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def upstream() -> MockUpstream:
    return MockUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def registry(settings, upstream):
    return build_registry(settings, transport=upstream.transport)


@pytest.fixture
def registry_without_key(upstream):
    return build_registry(Settings(api_key=None, base_url=TEST_BASE_URL), transport=upstream.transport)
