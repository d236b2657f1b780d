"""Pytest configuration for the pyth_benchmarks test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

FEED_A = "e62df6c8b4a85fe1a67db44dc12de5db330f7ac66b72dc658afedf0f4a415b43"
FEED_B = "ff61491a931112ddf1bd8147cd1b641375f79f5825126d665480874634fd0ace"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--benchmarks-run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that call the public Benchmarks API.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker."""

    config.addinivalue_line(
        "markers",
        "integration: marks tests requiring network access",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--benchmarks-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --benchmarks-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def _price(price: str = "4213511000000", conf: str = "2150000000", expo: int = -8, publish_time: int = 1700000000) -> dict:
    return {"price": price, "conf": conf, "expo": expo, "publish_time": publish_time}


def _feed(feed_id: str = FEED_A, **price_kwargs) -> dict:
    return {
        "id": feed_id,
        "price": _price(**price_kwargs),
        "ema_price": _price(**price_kwargs),
        "metadata": {"slot": 118000000, "proof_available_time": 1700000001, "prev_publish_time": 1699999999},
    }


def _body(parsed: list[dict] | None = None, encoding: str = "hex", data: list[str] | None = None) -> dict:
    return {
        "parsed": [_feed(FEED_A), _feed(FEED_B)] if parsed is None else parsed,
        "binary": {"encoding": encoding, "data": ["aabb", "ccdd"] if data is None else data},
    }


class RecordingHandler:
    """``httpx.MockTransport`` handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | None = None, exc: Exception | None = None) -> None:
        self.response = response if response is not None else httpx.Response(200, json=_body())
        self.exc = exc
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def make_feed() -> Callable[..., dict]:
    return _feed


@pytest.fixture
def make_body() -> Callable[..., dict]:
    return _body


@pytest.fixture
def provider_body() -> dict:
    return _body()


@pytest.fixture
def recording_handler() -> Callable[..., RecordingHandler]:
    return RecordingHandler
