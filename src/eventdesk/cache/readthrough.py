from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar

from .base import BaseCache

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def read_through(
    cache: BaseCache,
    key: str,
    loader: Callable[[], Awaitable[T]],
    *,
    ttl: int,
) -> T | Any:
    """
    Return the cached value for ``key`` or load, store and return it.

    ``None`` is the only miss marker; a cached empty list is a hit. When the
    cache is unreachable this is a plain call to ``loader``.
    """
    cached = await cache.get(key)
    if cached is not None:
        logger.debug("cache hit", extra={"cache_key": key, "cache_op": "get"})
        return cached

    value = await loader()
    await cache.set(key, value, ttl=ttl)
    logger.debug("cache fill", extra={"cache_key": key, "cache_op": "set"})
    return value
