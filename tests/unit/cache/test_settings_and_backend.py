from __future__ import annotations

import pytest

from eventdesk.cache import (
    CLIENT_EVENT_LIST,
    EVENT_LIST,
    CacheSettings,
    InMemoryCache,
    NullCache,
    RedisCache,
    build_cache,
)


@pytest.fixture(autouse=True)
def _no_redis_env(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.delenv("CACHE_URL", raising=False)


def test_defaults_match_admin_and_client_ttls():
    settings = CacheSettings()

    assert EVENT_LIST.ttl(settings) == 1800
    assert CLIENT_EVENT_LIST.ttl(settings) == 60


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CACHE_CLIENT_TTL", "15")
    monkeypatch.setenv("CACHE_NAMESPACE", "sekuro")

    settings = CacheSettings()

    assert settings.client_ttl == 15
    assert settings.namespace == "sekuro"


def test_redis_url_fallback(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")

    assert CacheSettings().resolved_url == "redis://cache:6379/1"
    assert CacheSettings(url="redis://other:6379").resolved_url == "redis://other:6379"


def test_build_cache_uses_redis_when_url_configured():
    assert isinstance(build_cache(CacheSettings(url="redis://cache:6379/0")), RedisCache)


def test_build_cache_disabled():
    settings = CacheSettings(url="redis://cache:6379/0", enabled=False)

    assert isinstance(build_cache(settings), NullCache)


def test_build_cache_without_url():
    assert isinstance(build_cache(CacheSettings()), NullCache)
    assert isinstance(build_cache(CacheSettings(), fallback_memory=True), InMemoryCache)
