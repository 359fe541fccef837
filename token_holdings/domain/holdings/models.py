"""Domain models for token holdings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

SOL_MINT = "So11111111111111111111111111111111111111112"
SOL_DISPLAY_NAME = "Solana"


@dataclass(slots=True)
class HoldingsSnapshot:
    """Raw balances reported by the holdings endpoint."""

    native_amount: int
    token_accounts: dict[str, list[int]] = field(default_factory=dict)


@dataclass(slots=True)
class TokenMetadata:
    id: str
    name: Optional[str]
    symbol: Optional[str]
    decimals: int
    icon: Optional[str] = None
    usd_price: Optional[float] = None
    is_verified: Optional[bool] = None
    price_change_24h: Optional[float] = None


@dataclass(slots=True)
class TokenRecord:
    mint: str
    amount: int
    name: Optional[str]
    symbol: Optional[str]
    icon: Optional[str]
    decimals: int
    usd_price_unit: Optional[float]
    usd_value: Optional[float]
    jupiter_is_verified: bool
    price_change_24h_percent: Optional[float]
