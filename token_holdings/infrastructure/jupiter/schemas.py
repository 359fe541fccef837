"""Pydantic models for Jupiter Ultra API payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from token_holdings.domain.holdings.models import HoldingsSnapshot, TokenMetadata


class HoldingsAccountPayload(BaseModel):
    amount: str


class HoldingsPayload(BaseModel):
    amount: str
    tokens: dict[str, list[HoldingsAccountPayload]] = Field(default_factory=dict)

    def to_snapshot(self) -> HoldingsSnapshot:
        return HoldingsSnapshot(
            native_amount=int(self.amount),
            token_accounts={
                mint: [int(account.amount) for account in accounts]
                for mint, accounts in self.tokens.items()
            },
        )


class TokenStatsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price_change: Optional[float] = Field(default=None, alias="priceChange")


class TokenSearchPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: int
    icon: Optional[str] = None
    usd_price: Optional[float] = Field(default=None, alias="usdPrice")
    is_verified: Optional[bool] = Field(default=None, alias="isVerified")
    stats24h: Optional[TokenStatsPayload] = None

    def to_metadata(self) -> TokenMetadata:
        return TokenMetadata(
            id=self.id,
            name=self.name,
            symbol=self.symbol,
            decimals=self.decimals,
            icon=self.icon,
            usd_price=self.usd_price,
            is_verified=self.is_verified,
            price_change_24h=self.stats24h.price_change if self.stats24h else None,
        )
