"""Shared fixtures for the Orderchamp client tests."""

import hashlib
import hmac
import json
from collections.abc import AsyncGenerator, Callable
from typing import Any
from urllib.parse import urlencode

import httpx
import pytest
import pytest_asyncio

from orderchamp_api import OrderchampApiClient

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TEST_CLIENT_ID = "abc"
TEST_CLIENT_SECRET = "client-secret"
TEST_SHARED_SECRET = "shared-secret"
TEST_ACCESS_TOKEN = "tok123"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers from a queue and records every request."""

    def __init__(self) -> None:
        super().__init__(self._handle)
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response | Exception] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json={})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def reply(self, outcome: httpx.Response | Exception) -> None:
        self.responses.append(outcome)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest_asyncio.fixture
async def http_client(transport: RecordingTransport) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def make_client(http_client: httpx.AsyncClient) -> Callable[..., OrderchampApiClient]:
    """Build an OrderchampApiClient wired to the recording transport."""

    def _make(**options: Any) -> OrderchampApiClient:
        return OrderchampApiClient(options, http_client=http_client)

    return _make


@pytest.fixture
def sign_params() -> Callable[..., dict[str, str]]:
    """Return a copy of params with a signature computed independently."""

    def _sign(params: dict[str, str], secret: str = TEST_CLIENT_SECRET) -> dict[str, str]:
        message = urlencode(sorted(params.items()))
        signature = hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()
        return {**params, "signature": signature}

    return _sign
