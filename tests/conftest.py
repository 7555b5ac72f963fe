"""Shared test fixtures."""

import httpx
import pytest

from bestbuy import Client, ClientConfig

API_KEY = "testkey123"


@pytest.fixture
def api_key() -> str:
    """API key used by the fake client."""
    return API_KEY


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def response_body() -> dict:
    """JSON object the mock transport answers with."""
    return {"products": [], "total": 0}


@pytest.fixture
def transport(recorded_requests, response_body) -> httpx.MockTransport:
    """Mock transport that records requests and answers 200 with JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json=response_body)

    return httpx.MockTransport(handler)


@pytest.fixture
def client(api_key: str, transport: httpx.MockTransport) -> Client:
    """Client wired to the mock transport."""
    return Client(ClientConfig(api_key=api_key), transport=transport)


@pytest.fixture
def last_url(recorded_requests):
    """Return the URL of the most recent request as a string."""

    def _last_url() -> str:
        assert recorded_requests, "no request was made"
        return str(recorded_requests[-1].url)

    return _last_url


@pytest.fixture
def make_client(api_key: str):
    """Build a client whose every request is answered by ``handler``."""

    def _make_client(handler, debug: bool = False) -> Client:
        config = ClientConfig(api_key=api_key, debug=debug)
        return Client(config, transport=httpx.MockTransport(handler))

    return _make_client
