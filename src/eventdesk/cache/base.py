from __future__ import annotations

import copy
import time
from typing import Any, Callable, Optional, Protocol


class BaseCache(Protocol):
    async def get(self, key: str) -> Optional[Any]:
        ...

    async def set(self, key: str, value: Any, ttl: int = 60) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...


class NullCache:
    """Cache disabled: every read misses, every write is dropped."""

    async def get(self, key: str) -> Optional[Any]:
        return None

    async def set(self, key: str, value: Any, ttl: int = 60) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        return None


class InMemoryCache:
    """Process-local cache for tests and local runs. Honours TTL."""

    def __init__(self, namespace: str = "", *, clock: Callable[[], float] = time.monotonic):
        self._store: dict[str, tuple[Any, float]] = {}
        self._ns = (namespace + ":") if namespace else ""
        self._clock = clock

    def _k(self, key: str) -> str:
        return self._ns + key

    async def get(self, key: str) -> Optional[Any]:
        k = self._k(key)
        entry = self._store.get(k)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            self._store.pop(k, None)
            return None
        return copy.deepcopy(value)

    async def set(self, key: str, value: Any, ttl: int = 60) -> None:
        self._store[self._k(key)] = (copy.deepcopy(value), self._clock() + ttl)

    async def delete(self, key: str) -> None:
        self._store.pop(self._k(key), None)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._store.clear()

    def keys(self) -> list[str]:
        now = self._clock()
        return [k[len(self._ns):] for k, (_v, exp) in self._store.items() if exp > now]
