"""Jupiter Ultra API implementation of the token data source."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from token_holdings.domain.holdings.exceptions import UpstreamHoldingsError, UpstreamSearchError
from token_holdings.domain.holdings.models import HoldingsSnapshot, TokenMetadata

from .schemas import HoldingsPayload, TokenSearchPayload

logger = logging.getLogger(__name__)

_search_adapter = TypeAdapter(list[TokenSearchPayload])


class JupiterTokenClient:
    def __init__(self, http: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        self._http = http
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @property
    def headers(self) -> dict[str, str]:
        return {"x-api-key": self._api_key}

    async def fetch_holdings(self, address: str) -> HoldingsSnapshot:
        data = await self._get_json(f"/holdings/{address}", None, UpstreamHoldingsError)
        try:
            return HoldingsPayload.model_validate(data).to_snapshot()
        except (ValidationError, ValueError) as exc:
            logger.error("Malformed holdings payload for %s: %s", address, exc)
            raise UpstreamHoldingsError("Malformed response") from exc

    async def search_tokens(self, mints: Sequence[str]) -> list[TokenMetadata]:
        logger.debug("Searching %d mints", len(mints))
        data = await self._get_json("/search", {"query": ",".join(mints)}, UpstreamSearchError)
        try:
            payloads = _search_adapter.validate_python(data)
        except ValidationError as exc:
            logger.error("Malformed search payload: %s", exc)
            raise UpstreamSearchError("Malformed response") from exc
        return [payload.to_metadata() for payload in payloads]

    async def _get_json(
        self,
        path: str,
        params: dict[str, str] | None,
        error_cls: type[UpstreamHoldingsError] | type[UpstreamSearchError],
    ) -> Any:
        try:
            response = await self._http.get(f"{self._base_url}{path}", params=params, headers=self.headers)
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", path, exc)
            raise error_cls(str(exc)) from exc

        if not response.is_success:
            logger.error("Jupiter %s returned %s %s", path, response.status_code, response.reason_phrase)
            raise error_cls(response.reason_phrase, response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Jupiter %s returned invalid JSON: %s", path, exc)
            raise error_cls("Malformed response", response.status_code) from exc


__all__ = ["JupiterTokenClient"]
