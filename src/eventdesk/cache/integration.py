from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request

from .base import BaseCache, InMemoryCache, NullCache
from .redis import RedisCache, redact_url
from .settings import CacheSettings

logger = logging.getLogger(__name__)


def build_cache(settings: CacheSettings, *, fallback_memory: bool = False) -> BaseCache:
    """Pick the cache backend from settings."""
    url: Optional[str] = settings.resolved_url
    if not settings.enabled:
        logger.info("Cache disabled by settings")
        return NullCache()
    if not url:
        if fallback_memory:
            logger.info("No cache URL configured; using in-process cache")
            return InMemoryCache(settings.namespace)
        logger.warning("No cache URL configured; caching is off")
        return NullCache()
    logger.info("Cache configured: %s (namespace=%r)", redact_url(url), settings.namespace)
    return RedisCache(
        url,
        settings.namespace,
        socket_timeout=settings.socket_timeout,
        socket_connect_timeout=settings.socket_connect_timeout,
    )


def get_cache(request: Request) -> BaseCache:
    return request.app.state.cache  # type: ignore[attr-defined]
