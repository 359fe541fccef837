"""Reusable FastAPI dependencies."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from token_holdings.core.config import Settings
from token_holdings.core.container import ApplicationContainer
from token_holdings.domain.holdings import HoldingsService, MissingCredentialError, require_address
from token_holdings.infrastructure.jupiter import JupiterTokenClient


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_app_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_http_client(container: ApplicationContainer = Depends(get_container)) -> httpx.AsyncClient:
    return container.get_http_client()


def get_requested_address(request: Request) -> str:
    """Collect the address from the path and the query string, then validate it."""
    values: list[str] = []
    path_value = request.path_params.get("address")
    if path_value is not None:
        values.append(path_value)
    values.extend(request.query_params.getlist("address"))
    return require_address(values[0] if len(values) == 1 else values)


def get_token_source(
    settings: Settings = Depends(get_app_settings),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> JupiterTokenClient:
    if not settings.jupiter_api_key:
        raise MissingCredentialError()
    return JupiterTokenClient(http, settings.jupiter_api_key, settings.jupiter_base_url)


def get_holdings_service(
    source: JupiterTokenClient = Depends(get_token_source),
    settings: Settings = Depends(get_app_settings),
) -> HoldingsService:
    return HoldingsService(
        source,
        batch_size=settings.jupiter.search_batch_size,
        concurrent_search=settings.jupiter.concurrent_search,
    )


__all__ = [
    "get_app_settings",
    "get_container",
    "get_holdings_service",
    "get_http_client",
    "get_requested_address",
    "get_token_source",
]
