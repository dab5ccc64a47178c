from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ..cache import CacheSettings
from ..cache.integration import get_cache
from ..db.deps import get_engine
from ..events import EventService
from ..links import LinkService


def get_cache_settings(request: Request) -> CacheSettings:
    return request.app.state.cache_settings  # type: ignore[attr-defined]


def get_event_service(request: Request) -> EventService:
    return EventService(
        get_engine(request),
        get_cache(request),
        get_cache_settings(request),
        event_tz=request.app.state.app_settings.event_tz,  # type: ignore[attr-defined]
    )


def get_link_service(request: Request) -> LinkService:
    return LinkService(get_engine(request), get_cache(request), get_cache_settings(request))


EventServiceDep = Annotated[EventService, Depends(get_event_service)]
LinkServiceDep = Annotated[LinkService, Depends(get_link_service)]
