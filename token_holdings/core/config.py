"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class JupiterSettings(BaseModel):
    base_url: str = "https://api.jup.ag/ultra/v1"
    # Upstream rejects search queries with more than 100 mints.
    search_batch_size: int = Field(default=100, ge=1, le=100)
    concurrent_search: bool = False
    timeout_seconds: Optional[float] = None


class CorsSettings(BaseModel):
    allowed_origins: list[str] = Field(default_factory=list)
    allow_origin_regex: Optional[str] = r"^http://localhost(:\d+)?$"


class CacheSettings(BaseModel):
    max_age: int = Field(default=60, ge=0)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False
    project_name: str = "Token Holdings Service"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    jupiter_api_key: Optional[str] = None

    server: ServerSettings = ServerSettings()
    jupiter: JupiterSettings = JupiterSettings()
    cors: CorsSettings = CorsSettings()
    cache: CacheSettings = CacheSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def jupiter_base_url(self) -> str:
        return self.jupiter.base_url

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.cache.max_age}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
