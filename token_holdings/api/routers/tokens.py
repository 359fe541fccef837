"""Token holdings endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from token_holdings.api.deps import get_app_settings, get_holdings_service, get_requested_address
from token_holdings.core.config import Settings
from token_holdings.domain.holdings import HoldingsService
from token_holdings.schemas import ErrorResponse, TokenListResponse, TokenResponse

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


async def _list_tokens(
    response: Response,
    address: str,
    service: HoldingsService,
    settings: Settings,
) -> TokenListResponse:
    records = await service.fetch_tokens(address)
    response.headers["Cache-Control"] = settings.cache_control
    return TokenListResponse(tokens=[TokenResponse.from_record(record) for record in records])


# The address dependency is declared first so input errors win over missing configuration.
@router.get("", response_model=TokenListResponse, responses=ERROR_RESPONSES, summary="List token holdings (address in query)")
async def list_tokens_by_query(
    response: Response,
    account: str = Depends(get_requested_address),
    service: HoldingsService = Depends(get_holdings_service),
    settings: Settings = Depends(get_app_settings),
) -> TokenListResponse:
    return await _list_tokens(response, account, service, settings)


@router.get("/{address}", response_model=TokenListResponse, responses=ERROR_RESPONSES, summary="List token holdings")
async def list_tokens(
    response: Response,
    account: str = Depends(get_requested_address),
    service: HoldingsService = Depends(get_holdings_service),
    settings: Settings = Depends(get_app_settings),
) -> TokenListResponse:
    return await _list_tokens(response, account, service, settings)


@router.options("", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
@router.options("/{address}", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def tokens_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
