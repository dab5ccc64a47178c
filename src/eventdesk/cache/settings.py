from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """
    Cache settings.

    Env support:
      - CACHE_URL, CACHE_ENABLED, CACHE_NAMESPACE, CACHE_ADMIN_TTL, CACHE_CLIENT_TTL
      - REDIS_URL is accepted as a fallback for the connection URL.
    """

    url: Optional[str] = Field(default=None)
    enabled: bool = Field(default=True)
    namespace: str = Field(default="")
    admin_ttl: int = Field(default=30 * 60)
    client_ttl: int = Field(default=60)
    socket_timeout: float = Field(default=1.0)
    socket_connect_timeout: float = Field(default=1.0)

    model_config = SettingsConfigDict(
        env_prefix="CACHE_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def resolved_url(self) -> Optional[str]:
        return self.url or os.getenv("REDIS_URL")


@lru_cache
def get_cache_settings(**kwargs) -> CacheSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return CacheSettings(**filtered)
