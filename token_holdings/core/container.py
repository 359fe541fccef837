"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from token_holdings.core.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    http_client: httpx.AsyncClient | None = None

    async def startup(self) -> None:
        """Open the pooled HTTP client shared by upstream calls."""
        if self.http_client is not None:
            return
        client_kwargs: dict[str, Any] = {}
        if self.settings.jupiter.timeout_seconds is not None:
            client_kwargs["timeout"] = self.settings.jupiter.timeout_seconds
        self.http_client = httpx.AsyncClient(**client_kwargs)

    async def shutdown(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None

    def get_http_client(self) -> httpx.AsyncClient:
        if self.http_client is None:
            raise RuntimeError("HTTP client is not initialised; application startup has not run")
        return self.http_client


def build_container(settings: Settings | None = None) -> ApplicationContainer:
    return ApplicationContainer(settings=settings or get_settings())


__all__ = ["ApplicationContainer", "build_container"]
