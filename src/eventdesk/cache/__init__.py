"""
Cache gateway, cached views and the invalidation map.

Reads go through ``read_through``; writes call ``invalidate`` after the
database commit.
"""

from .base import BaseCache, InMemoryCache, NullCache
from .integration import build_cache, get_cache
from .invalidation import INVALIDATION_MAP, Mutation, invalidate, keys_for
from .readthrough import read_through
from .redis import RedisCache
from .settings import CacheSettings, get_cache_settings
from .views import (
    CLIENT_EVENT_LIST,
    CLIENT_EVENT_ONGOING,
    CLIENT_EVENT_UPCOMING,
    CLIENT_LINK_LIST,
    EVENT_LIST,
    LINK_LIST,
    VIEWS,
    Audience,
    CachedView,
    Entity,
)

__all__ = [
    "BaseCache",
    "InMemoryCache",
    "NullCache",
    "RedisCache",
    "CacheSettings",
    "get_cache_settings",
    "build_cache",
    "get_cache",
    "read_through",
    "invalidate",
    "keys_for",
    "INVALIDATION_MAP",
    "Mutation",
    "Entity",
    "Audience",
    "CachedView",
    "VIEWS",
    "EVENT_LIST",
    "CLIENT_EVENT_LIST",
    "CLIENT_EVENT_ONGOING",
    "CLIENT_EVENT_UPCOMING",
    "LINK_LIST",
    "CLIENT_LINK_LIST",
]
