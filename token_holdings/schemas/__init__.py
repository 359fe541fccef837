"""Pydantic schemas used across the project."""
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from token_holdings.domain.holdings.models import TokenRecord

# Raw balances can exceed the range JSON numbers represent exactly.
BigIntString = Annotated[int, PlainSerializer(str, return_type=str, when_used="json")]


class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mint: str
    amount: BigIntString
    name: Optional[str]
    symbol: Optional[str]
    icon: Optional[str] = None
    decimals: int
    usd_price_unit: Optional[float] = Field(default=None, alias="usdPriceUnit")
    usd_value: Optional[float] = Field(default=None, alias="usdValue")
    jupiter_is_verified: bool = Field(default=False, alias="jupiterIsVerified")
    price_change_24h_percent: Optional[float] = Field(default=None, alias="priceChange24hPercent")

    @classmethod
    def from_record(cls, record: TokenRecord) -> "TokenResponse":
        return cls(
            mint=record.mint,
            amount=record.amount,
            name=record.name,
            symbol=record.symbol,
            icon=record.icon,
            decimals=record.decimals,
            usd_price_unit=record.usd_price_unit,
            usd_value=record.usd_value,
            jupiter_is_verified=record.jupiter_is_verified,
            price_change_24h_percent=record.price_change_24h_percent,
        )


class TokenListResponse(BaseModel):
    tokens: list[TokenResponse]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
