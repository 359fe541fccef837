"""Holdings domain exports"""

from .address import is_address, require_address
from .exceptions import (
    AddressError,
    HoldingsError,
    InvalidAddressError,
    MissingCredentialError,
    MissingParameterError,
    MultipleValuesError,
    UpstreamError,
    UpstreamHoldingsError,
    UpstreamSearchError,
)
from .models import SOL_DISPLAY_NAME, SOL_MINT, HoldingsSnapshot, TokenMetadata, TokenRecord
from .repository import TokenDataSource
from .service import HoldingsService

__all__ = [
    "AddressError",
    "HoldingsError",
    "HoldingsService",
    "HoldingsSnapshot",
    "InvalidAddressError",
    "MissingCredentialError",
    "MissingParameterError",
    "MultipleValuesError",
    "SOL_DISPLAY_NAME",
    "SOL_MINT",
    "TokenDataSource",
    "TokenMetadata",
    "TokenRecord",
    "UpstreamError",
    "UpstreamHoldingsError",
    "UpstreamSearchError",
    "is_address",
    "require_address",
]
