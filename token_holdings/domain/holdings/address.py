"""Validation of the account address supplied by callers."""

from __future__ import annotations

import re
from typing import Sequence, Union

from solders.pubkey import Pubkey

from .exceptions import InvalidAddressError, MissingParameterError, MultipleValuesError

_BASE58_ADDRESS = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

AddressParam = Union[str, Sequence[str], None]


def is_address(value: str) -> bool:
    """Return True when ``value`` is a base-58 string decoding to a 32 byte public key."""
    if not _BASE58_ADDRESS.match(value):
        return False
    try:
        Pubkey.from_string(value)
    except ValueError:
        return False
    return True


def require_address(value: AddressParam) -> str:
    """Return the single valid address in ``value`` or raise an :class:`AddressError`.

    ``value`` is whatever the request carried: nothing, one string, or a list
    of strings when the parameter was repeated.
    """
    if not value:
        raise MissingParameterError()
    if not isinstance(value, str):
        raise MultipleValuesError()
    if not is_address(value):
        raise InvalidAddressError(value)
    return value


__all__ = ["AddressParam", "is_address", "require_address"]
