from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from eventdesk.cache import read_through


@pytest.mark.asyncio
async def test_miss_loads_and_stores(memory_cache):
    loader = AsyncMock(return_value=[{"id": 1}])

    assert await read_through(memory_cache, "event:list", loader, ttl=60) == [{"id": 1}]
    assert await memory_cache.get("event:list") == [{"id": 1}]
    loader.assert_awaited_once()


@pytest.mark.asyncio
async def test_hit_skips_loader(memory_cache):
    await memory_cache.set("event:list", [{"id": 7}], ttl=60)
    loader = AsyncMock(return_value=[{"id": 1}])

    assert await read_through(memory_cache, "event:list", loader, ttl=60) == [{"id": 7}]
    loader.assert_not_awaited()


@pytest.mark.asyncio
async def test_cached_empty_list_is_a_hit(memory_cache):
    await memory_cache.set("client:event:ongoing", [], ttl=60)
    loader = AsyncMock(return_value=[{"id": 1}])

    assert await read_through(memory_cache, "client:event:ongoing", loader, ttl=60) == []
    loader.assert_not_awaited()


@pytest.mark.asyncio
async def test_expired_entry_reloads(memory_cache, clock):
    loader = AsyncMock(side_effect=[["first"], ["second"]])

    await read_through(memory_cache, "k", loader, ttl=30)
    clock.advance(30)

    assert await read_through(memory_cache, "k", loader, ttl=30) == ["second"]
    assert loader.await_count == 2


@pytest.mark.asyncio
async def test_unreachable_cache_falls_back_to_loader(down_cache):
    loader = AsyncMock(return_value=[{"id": 1}])

    for _ in range(2):
        assert await read_through(down_cache, "event:list", loader, ttl=60) == [{"id": 1}]
    assert loader.await_count == 2


@pytest.mark.asyncio
async def test_loader_errors_propagate_and_nothing_is_cached(memory_cache):
    loader = AsyncMock(side_effect=RuntimeError("db down"))

    with pytest.raises(RuntimeError):
        await read_through(memory_cache, "event:list", loader, ttl=60)
    assert await memory_cache.get("event:list") is None
