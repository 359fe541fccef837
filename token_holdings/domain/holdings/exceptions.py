"""Holdings domain specific exceptions."""


class HoldingsError(Exception):
    """Base class for holdings domain errors."""


class AddressError(HoldingsError):
    """Base class for rejected address input."""


class MissingParameterError(AddressError):
    """Raised when no address was supplied."""

    def __init__(self) -> None:
        super().__init__("Address parameter is required")


class MultipleValuesError(AddressError):
    """Raised when the address was supplied more than once."""

    def __init__(self) -> None:
        super().__init__("Address parameter must be a single value")


class InvalidAddressError(AddressError):
    """Raised when the address is not a valid Solana public key."""

    def __init__(self, address: str) -> None:
        super().__init__("Invalid address parameter")
        self.address = address


class MissingCredentialError(HoldingsError):
    """Raised when the upstream API key is not configured."""

    def __init__(self) -> None:
        super().__init__("JUPITER_API_KEY is not configured")


class UpstreamError(HoldingsError):
    """Raised when an upstream Jupiter call does not succeed."""

    def __init__(self, message: str, status_text: str, status_code: int | None = None) -> None:
        super().__init__(f"{message}: {status_text}")
        self.status_text = status_text
        self.status_code = status_code


class UpstreamHoldingsError(UpstreamError):
    """Raised when the holdings endpoint fails."""

    def __init__(self, status_text: str, status_code: int | None = None) -> None:
        super().__init__("Error fetching token holdings", status_text, status_code)


class UpstreamSearchError(UpstreamError):
    """Raised when a token search batch fails."""

    def __init__(self, status_text: str, status_code: int | None = None) -> None:
        super().__init__("Error fetching token data", status_text, status_code)
