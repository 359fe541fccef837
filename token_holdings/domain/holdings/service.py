"""Holdings aggregation: merge raw balances with token metadata."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TypeVar

from .models import SOL_DISPLAY_NAME, SOL_MINT, HoldingsSnapshot, TokenMetadata, TokenRecord
from .repository import TokenDataSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_SEARCH_BATCH = 100


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    if size <= 0:
        raise ValueError("chunk size must be positive")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def collect_balances(snapshot: HoldingsSnapshot) -> dict[str, int]:
    """Sum raw balances per mint, keyed in insertion order.

    The native mint is always present, even at zero. Any other mint is kept
    only when its summed balance is positive.
    """
    balances: dict[str, int] = {SOL_MINT: snapshot.native_amount}
    for mint, amounts in snapshot.token_accounts.items():
        total = sum(amounts)
        if total > 0:
            balances[mint] = balances.get(mint, 0) + total
    return balances


def build_token_record(metadata: TokenMetadata, amount: int) -> TokenRecord:
    # Falsy upstream values (0 price, 0 change, empty icon) are reported as missing.
    usd_price = metadata.usd_price or None
    usd_value = None
    if usd_price:
        # Truncate to whole units before the float multiply.
        usd_value = float(amount // 10**metadata.decimals) * usd_price
    return TokenRecord(
        mint=metadata.id,
        amount=amount,
        name=SOL_DISPLAY_NAME if metadata.id == SOL_MINT else metadata.name,
        symbol=metadata.symbol,
        icon=metadata.icon or None,
        decimals=metadata.decimals,
        usd_price_unit=usd_price,
        usd_value=usd_value,
        jupiter_is_verified=bool(metadata.is_verified),
        price_change_24h_percent=metadata.price_change_24h or None,
    )


def merge_metadata(balances: dict[str, int], batches: Iterable[Sequence[TokenMetadata]]) -> list[TokenRecord]:
    records: list[TokenRecord] = []
    for batch in batches:
        for metadata in batch:
            records.append(build_token_record(metadata, balances.get(metadata.id, 0)))
    return records


@dataclass(slots=True)
class HoldingsService:
    """Fetches an account's holdings and enriches them with token metadata."""

    source: TokenDataSource
    batch_size: int = MAX_SEARCH_BATCH
    concurrent_search: bool = False

    async def fetch_tokens(self, address: str) -> list[TokenRecord]:
        snapshot = await self.source.fetch_holdings(address)
        balances = collect_balances(snapshot)
        batches = list(chunked(list(balances), self.batch_size))
        logger.debug("Searching metadata for %d mints in %d batches", len(balances), len(batches))

        if self.concurrent_search:
            results = await self._search_concurrently(batches)
        else:
            results = []
            for batch in batches:
                results.append(await self.source.search_tokens(batch))

        records = merge_metadata(balances, results)
        logger.info("Resolved %d tokens for %s", len(records), address)
        return records

    async def _search_concurrently(self, batches: list[list[str]]) -> list[list[TokenMetadata]]:
        tasks = [asyncio.ensure_future(self.source.search_tokens(batch)) for batch in batches]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            # No batch may outlive the failed request.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise


__all__ = [
    "MAX_SEARCH_BATCH",
    "HoldingsService",
    "build_token_record",
    "chunked",
    "collect_balances",
    "merge_metadata",
]
