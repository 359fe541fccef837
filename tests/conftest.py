from __future__ import annotations

import json
from typing import Any, Iterable, Sequence

import httpx
import pytest
from fastapi.testclient import TestClient

from token_holdings.api.deps import get_http_client
from token_holdings.core.config import Settings
from token_holdings.domain.holdings import SOL_MINT, HoldingsSnapshot, TokenMetadata, UpstreamSearchError
from token_holdings.main import create_app

WALLET = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
BASE_URL = "https://jupiter.test/ultra/v1"


def token_payload(mint: str, **overrides: Any) -> dict[str, Any]:
    payload = {"id": mint, "name": f"{mint} token", "symbol": mint[:4].upper(), "decimals": 6}
    payload.update(overrides)
    return payload


class FakeJupiter:
    """Stand-in for the Jupiter Ultra API, usable as an ``httpx.MockTransport`` handler."""

    def __init__(
        self,
        holdings: dict[str, Any] | None = None,
        metadata: dict[str, dict[str, Any]] | None = None,
        holdings_status: int = 200,
        fail_search_call: int | None = None,
    ) -> None:
        self.holdings = holdings if holdings is not None else {"amount": "0", "tokens": {}}
        self.metadata = metadata or {}
        self.holdings_status = holdings_status
        self.fail_search_call = fail_search_call
        self.requests: list[httpx.Request] = []

    @property
    def search_queries(self) -> list[list[str]]:
        return [
            request.url.params["query"].split(",")
            for request in self.requests
            if request.url.path.endswith("/search")
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/search"):
            if self.fail_search_call is not None and len(self.search_queries) - 1 == self.fail_search_call:
                return httpx.Response(503)
            mints = request.url.params["query"].split(",")
            body = [self.metadata.get(mint, token_payload(mint)) for mint in mints]
            return httpx.Response(200, content=json.dumps(body))
        if "/holdings/" in request.url.path:
            if self.holdings_status != 200:
                return httpx.Response(self.holdings_status)
            return httpx.Response(200, content=json.dumps(self.holdings))
        return httpx.Response(404)


class FakeTokenSource:
    """In-memory token data source for service level tests."""

    def __init__(
        self,
        snapshot: HoldingsSnapshot,
        metadata: dict[str, TokenMetadata] | None = None,
        fail_on_call: int | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.metadata = metadata or {}
        self.fail_on_call = fail_on_call
        self.holdings_calls: list[str] = []
        self.search_calls: list[list[str]] = []

    async def fetch_holdings(self, address: str) -> HoldingsSnapshot:
        self.holdings_calls.append(address)
        return self.snapshot

    async def search_tokens(self, mints: Sequence[str]) -> list[TokenMetadata]:
        self.search_calls.append(list(mints))
        if self.fail_on_call is not None and len(self.search_calls) - 1 == self.fail_on_call:
            raise UpstreamSearchError("Service Unavailable", 503)
        return [self.metadata.get(mint, metadata_for(mint)) for mint in mints]


def metadata_for(mint: str, **overrides: Any) -> TokenMetadata:
    values: dict[str, Any] = {"id": mint, "name": f"{mint} token", "symbol": mint[:4].upper(), "decimals": 6}
    values.update(overrides)
    return TokenMetadata(**values)


def snapshot_with(native: int = 0, tokens: dict[str, Iterable[int]] | None = None) -> HoldingsSnapshot:
    return HoldingsSnapshot(
        native_amount=native,
        token_accounts={mint: list(amounts) for mint, amounts in (tokens or {}).items()},
    )


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "jupiter_api_key": "test-key",
        "jupiter": {"base_url": BASE_URL},
        "log_level": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(upstream: FakeJupiter, settings: Settings | None = None) -> TestClient:
    app = create_app(settings or make_settings())

    async def _mock_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
            yield client

    app.dependency_overrides[get_http_client] = _mock_http_client
    return TestClient(app)


@pytest.fixture
def native_only_upstream() -> FakeJupiter:
    return FakeJupiter(
        holdings={"amount": "0", "tokens": {}},
        metadata={SOL_MINT: token_payload(SOL_MINT, name="Wrapped SOL", symbol="SOL", decimals=9)},
    )
