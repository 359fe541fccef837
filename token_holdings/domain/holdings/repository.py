"""Token data source contract used by the holdings service."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import HoldingsSnapshot, TokenMetadata


class TokenDataSource(Protocol):
    async def fetch_holdings(self, address: str) -> HoldingsSnapshot:  # pragma: no cover - interface
        ...

    async def search_tokens(self, mints: Sequence[str]) -> list[TokenMetadata]:  # pragma: no cover - interface
        ...
