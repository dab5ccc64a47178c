from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...db import EngineDep
from ...db.health import db_healthcheck

INCLUDE_ROUTER_IN_SCHEMA = False
ROUTER_TAG = "internal"

router = APIRouter()


@router.get("/_health")
async def health(request: Request, engine: EngineDep):
    """Database decides the status; a down cache only degrades it."""
    async with engine.session() as s:
        db_ok = await db_healthcheck(s)
    cache_ok = await request.app.state.cache.ping()  # type: ignore[attr-defined]
    return JSONResponse(
        status_code=200 if db_ok else 503,
        content={"ok": db_ok, "database": db_ok, "cache": cache_ok},
    )
