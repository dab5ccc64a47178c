from __future__ import annotations

import datetime as dt
from typing import Any

from ..cache import (
    CLIENT_EVENT_LIST,
    CLIENT_EVENT_ONGOING,
    CLIENT_EVENT_UPCOMING,
    EVENT_LIST,
    BaseCache,
    CacheSettings,
    Entity,
)
from ..db import DBEngine
from ..services import CachedCRUDService, Row
from .models import Event, EventStatus
from .schemas import EventRead

UPCOMING_STATUSES = (EventStatus.UPCOMING, EventStatus.COMING_SOON)
TIME_FIELDS = ("event_start", "event_end")


def localize(value: dt.datetime | None, tz: dt.tzinfo) -> dt.datetime | None:
    """Attach ``tz`` to naive timestamps; aware ones are left alone."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=tz)


def to_wall_clock(value: dt.datetime | None, tz: dt.tzinfo) -> dt.datetime | None:
    """Aware timestamps become naive local time at ``tz``; naive ones already are."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)


class EventService(CachedCRUDService[Event]):
    entity = Entity.EVENT
    model = Event
    read_schema = EventRead
    admin_view = EVENT_LIST
    label = "Event"

    def __init__(
        self,
        engine: DBEngine,
        cache: BaseCache,
        cache_settings: CacheSettings,
        *,
        event_tz: dt.tzinfo = dt.timezone.utc,
    ):
        super().__init__(engine, cache, cache_settings)
        self.event_tz = event_tz

    def dump(self, obj: Event) -> Row:
        row = EventRead.model_validate(obj)
        row.event_start = localize(row.event_start, self.event_tz)  # type: ignore[assignment]
        row.event_end = localize(row.event_end, self.event_tz)
        return row.model_dump(mode="json")

    def _stored(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: to_wall_clock(v, self.event_tz) if k in TIME_FIELDS else v for k, v in data.items()}

    async def create(self, data: dict[str, Any]) -> Row:
        return await super().create(self._stored(data))

    async def update(self, id: int, data: dict[str, Any]) -> Row:
        return await super().update(id, self._stored(data))

    async def _client_rows(self, where: dict[str, Any] | None = None) -> list[Row]:
        return await self.query(where=where, order_by=Event.event_start)

    async def list_client(self, now: dt.datetime | None = None) -> list[Row]:
        """Events that have not started yet, soonest first."""
        rows = await self.cached(CLIENT_EVENT_LIST, self._client_rows)
        now = now or dt.datetime.now(dt.timezone.utc)
        return [r for r in rows if dt.datetime.fromisoformat(r["event_start"]) > now]

    async def list_upcoming(self) -> list[Row]:
        return await self.cached(
            CLIENT_EVENT_UPCOMING,
            lambda: self._client_rows({"event_status": UPCOMING_STATUSES}),
        )

    async def list_ongoing(self) -> list[Row]:
        return await self.cached(
            CLIENT_EVENT_ONGOING,
            lambda: self._client_rows({"event_status": EventStatus.ONGOING}),
        )
