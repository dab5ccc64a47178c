from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from .engine import DBEngine
from .settings import DBSettings


def make_sqlite_memory_engine(*, echo: bool = False) -> DBEngine:
    settings = DBSettings(database_url="sqlite+aiosqlite:///:memory:", echo=echo)
    return DBEngine(settings)


@asynccontextmanager
async def ephemeral_db() -> AsyncIterator[DBEngine]:
    """In-memory database with every mapped table created."""
    # models must be imported so their tables are on Base.metadata
    from .. import events, links  # noqa: F401

    engine = make_sqlite_memory_engine()
    await engine.create_all()
    try:
        yield engine
    finally:
        await engine.dispose()
