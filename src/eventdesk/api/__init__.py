from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import CURRENT_ENVIRONMENT, AppSettings, Env, get_app_settings, get_env
from ..cache import BaseCache, CacheSettings, build_cache, get_cache_settings
from ..db import DBEngine, DBSettings, get_db_settings
from .errors import register_error_handlers
from .middleware import CatchAllExceptionMiddleware
from .routers import register_all_routers

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[AppSettings] = None,
    db_settings: Optional[DBSettings] = None,
    cache_settings: Optional[CacheSettings] = None,
    *,
    engine: Optional[DBEngine] = None,
    cache: Optional[BaseCache] = None,
) -> FastAPI:
    """
    Build the service.

    The database engine and the cache client are created once here, stored
    on ``app.state`` and shared by every request. Passing ``engine`` or
    ``cache`` hands their lifecycle to the caller; whatever the factory
    builds itself is closed on shutdown.
    """
    app_settings = app_settings or get_app_settings()
    cache_settings = cache_settings or get_cache_settings()
    owned: list = []

    if engine is None:
        engine = DBEngine(db_settings or get_db_settings())
        owned.append(engine.dispose)
    if cache is None:
        # without a cache URL only local runs cache, in process
        cache = build_cache(cache_settings, fallback_memory=get_env() is Env.LOCAL)
        owned.append(cache.close)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        logger.info(
            "%s %s starting [env: %s] db=%s",
            app_settings.name,
            app_settings.version,
            CURRENT_ENVIRONMENT,
            engine.sanitized_url,
        )
        try:
            yield
        finally:
            for close in reversed(owned):
                await close()
            logger.info("%s stopped", app_settings.name)

    app = FastAPI(title=app_settings.name, version=app_settings.version, lifespan=lifespan)
    app.state.app_settings = app_settings
    app.state.cache_settings = cache_settings
    app.state.db_engine = engine
    app.state.cache = cache

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)
    register_all_routers(app, base_package=f"{__name__}.routers")
    return app


__all__ = ["create_app"]
