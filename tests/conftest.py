"""Shared fixtures: a fake Stripe endpoint and an app wired to it."""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from payment_relay.config import Settings, get_settings
from payment_relay.main import app
from payment_relay.utils import get_http_client

TEST_SECRET = "sk_test_relay_secret_123"


class FakeStripe:
    """Records outbound requests and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {"id": "pi_123", "client_secret": "pi_123_secret_abc", "object": "payment_intent"}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def form(self, index: int = -1) -> dict[str, str]:
        parsed = parse_qs(self.requests[index].content.decode(), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


@pytest.fixture
def fake_stripe() -> FakeStripe:
    return FakeStripe()


@pytest.fixture
def stripe_client(fake_stripe: FakeStripe):
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_stripe.handler))
    yield client
    asyncio.run(client.aclose())
    assert client.is_closed


@pytest.fixture
def relay_settings() -> Settings:
    return Settings(_env_file=None, stripe_secret_key=TEST_SECRET)


@pytest.fixture
def client(relay_settings: Settings, stripe_client: httpx.AsyncClient):
    app.dependency_overrides[get_settings] = lambda: relay_settings
    app.dependency_overrides[get_http_client] = lambda: stripe_client
    yield TestClient(app)
    app.dependency_overrides.clear()
