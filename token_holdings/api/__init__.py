from fastapi import APIRouter

from token_holdings.api.routers import tokens


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(tokens.router, prefix="/tokens", tags=["tokens"])
    return router


__all__ = [
    "create_api_router",
]
