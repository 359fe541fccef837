"""Translate holdings domain errors into JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from token_holdings.domain.holdings import AddressError, MissingCredentialError, UpstreamError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_address_error(request: Request, exc: AddressError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_missing_credential(request: Request, exc: MissingCredentialError) -> JSONResponse:
    logger.error("Rejecting %s: %s", request.url.path, exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error("Error fetching tokens: %s", exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch tokens")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AddressError, handle_address_error)
    app.add_exception_handler(MissingCredentialError, handle_missing_credential)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
