"""Pytest configuration and fixtures."""

import httpx
import pytest

from scrapebadger.config.settings import resolve_config
from scrapebadger.core.http_client import HttpClient
from scrapebadger.core.retry_handler import RetryHandler

FIXED_NOW = 1_700_000_000.0


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class Recorder:
    """MockTransport handler replaying queued responses and recording requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        # Fresh response per request; a Response object is single-use
        return httpx.Response(template.status_code, headers=template.headers, content=template.content)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ("SCRAPEBADGER_API_KEY", "SCRAPEBADGER_LOG_LEVEL", "SCRAPEBADGER_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Resolved config with a short timeout and fast retries."""
    return resolve_config(api_key="sb_test", timeout=5.0, max_retries=3, retry_delay=0.5)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
async def make_http_client(config, fake_sleep):
    """Build an HttpClient wired to a MockTransport handler."""
    clients = []

    def factory(handler, max_retries=None, **overrides):
        cfg = config.model_copy(update=overrides) if overrides else config
        retries = cfg.max_retries if max_retries is None else max_retries
        retry_handler = RetryHandler(
            max_retries=retries,
            base_delay=cfg.retry_delay,
            sleep=fake_sleep,
            clock=lambda: FIXED_NOW,
        )
        client = HttpClient(cfg, retry_handler=retry_handler, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.close()
