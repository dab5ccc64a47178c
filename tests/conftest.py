"""
Shared fixtures.

- ``db_engine``: in-memory SQLite with every table created
- ``memory_cache`` + ``clock``: TTL-aware cache on a controllable clock
- ``down_cache``: a Redis gateway whose store refuses every command
- ``app`` / ``client``: the service wired to the two above, driven by httpx
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from eventdesk.api import create_app
from eventdesk.app import AppSettings
from eventdesk.cache import VIEWS, CacheSettings, InMemoryCache, RedisCache
from eventdesk.db.testing import ephemeral_db


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class UnreachableRedis:
    """Stands in for a redis.asyncio client whose server is gone."""

    def __init__(self):
        self.calls: list[str] = []

    def _fail(self, op: str):
        self.calls.append(op)
        raise RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")

    async def get(self, key):
        self._fail("get")

    async def set(self, key, value, ex=None):
        self._fail("set")

    async def delete(self, *keys):
        self._fail("delete")

    async def ping(self):
        self._fail("ping")

    async def aclose(self):
        self.calls.append("aclose")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock) -> InMemoryCache:
    return InMemoryCache(clock=clock)


@pytest.fixture
def unreachable_redis() -> UnreachableRedis:
    return UnreachableRedis()


@pytest.fixture
def down_cache(unreachable_redis) -> RedisCache:
    return RedisCache("redis://localhost:6379/0", client=unreachable_redis)


@pytest.fixture
def cache_settings() -> CacheSettings:
    return CacheSettings(url=None, admin_ttl=1800, client_ttl=60)


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(name="eventdesk-test", event_utc_offset_minutes=420)


@pytest_asyncio.fixture
async def db_engine():
    async with ephemeral_db() as engine:
        yield engine


@pytest.fixture
def fill_views():
    """Seed every cached view with a sentinel row."""

    async def _fill(cache) -> None:
        for view in VIEWS:
            await cache.set(view.key, [{"stale": True}], ttl=3600)

    return _fill


@pytest.fixture
def app(app_settings, cache_settings, db_engine, memory_cache):
    return create_app(app_settings, cache_settings=cache_settings, engine=db_engine, cache=memory_cache)


@pytest_asyncio.fixture
async def client(app) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
