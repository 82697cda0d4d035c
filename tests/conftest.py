import httpx
import pytest
from loguru import logger

from tests.payloads import OWN_IP, PASSWORD, USERNAME, VIP
from vipfailover.configurer.hetzner import HetznerConfigurer
from vipfailover.hetzner.client import RobotClient


class FakeClock:
    def __init__(self, now: float = 10_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider:
    """Records requests and answers with queued responses (or the last one)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list = []

    def respond(self, *responses) -> None:
        self.responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, text=response)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def make_client(provider):
    def _make(resolver=lambda: OWN_IP, verbose=False):
        return RobotClient(
            USERNAME,
            PASSWORD,
            VIP,
            verbose=verbose,
            resolver=resolver,
            transport=httpx.MockTransport(provider.handler),
        )

    return _make


@pytest.fixture
def make_configurer(make_client, clock):
    def _make(resolver=lambda: OWN_IP, ttl_seconds=3600):
        return HetznerConfigurer(
            make_client(resolver=resolver),
            ttl_seconds=ttl_seconds,
            resolver=resolver,
            clock=clock,
        )

    return _make


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    logger.remove(handler_id)
