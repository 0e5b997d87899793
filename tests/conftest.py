"""Pytest bootstrap configuration.

Provides a fake upstream built on ``httpx.MockTransport`` so no test ever
reaches the real API.
"""
from typing import Any, Callable, List

import httpx
import pytest
import pytest_asyncio

from cocktaildb.api_clients import CocktailDBClient
from cocktaildb.core.config import ClientSettings


class FakeUpstream:
    """Records every request and answers with the configured handler."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(status_code, json=payload)

    def reply_content(self, content: bytes, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(status_code, content=content)

    def fail_with(self, exc_type: type) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type("simulated failure", request=request)
        self._handler = _raise

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def client(upstream):
    async with CocktailDBClient(transport=upstream.transport()) as c:
        yield c


@pytest_asyncio.fixture
async def debug_client(upstream):
    async with CocktailDBClient(ClientSettings(debug=True), transport=upstream.transport()) as c:
        yield c
