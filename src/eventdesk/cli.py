from __future__ import annotations

import asyncio
from typing import Optional

import typer

from .app import setup_logging
from .cache import INVALIDATION_MAP, Entity, Mutation, build_cache, get_cache_settings, invalidate
from .db import DBEngine, get_db_settings

app = typer.Typer(no_args_is_help=True, add_completion=False, help="eventdesk service tools")


@app.callback()
def _main(log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL")) -> None:
    setup_logging(level=log_level)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes (dev only)"),
) -> None:
    """Run the HTTP service with uvicorn."""
    import uvicorn

    uvicorn.run("eventdesk.api.asgi:app", host=host, port=port, reload=reload, log_config=None)


@app.command("init-db")
def init_db() -> None:
    """Create missing tables. For local runs; production schemas are managed elsewhere."""
    from . import events, links  # noqa: F401  register tables on Base.metadata

    async def _run() -> str:
        engine = DBEngine(get_db_settings())
        try:
            await engine.create_all()
            return engine.sanitized_url
        finally:
            await engine.dispose()

    url = asyncio.run(_run())
    typer.echo(f"Tables ready on {url}")


@app.command("cache-keys")
def cache_keys() -> None:
    """Show which cache keys each mutation invalidates."""
    for (entity, mutation), keys in INVALIDATION_MAP.items():
        typer.echo(f"{entity}.{mutation}: {', '.join(keys)}")


@app.command("invalidate")
def invalidate_cmd(entity: Entity = typer.Argument(..., help="Entity whose views to drop")) -> None:
    """Drop every cached view that depends on ENTITY."""

    async def _run() -> tuple[str, ...]:
        cache = build_cache(get_cache_settings())
        try:
            return await invalidate(cache, entity, Mutation.UPDATE)
        finally:
            await cache.close()

    keys = asyncio.run(_run())
    typer.echo(f"Invalidated {len(keys)} key(s): {', '.join(keys)}")


if __name__ == "__main__":  # pragma: no cover
    app()
