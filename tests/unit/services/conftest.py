from __future__ import annotations

import datetime as dt

import pytest

from eventdesk.events import EventService
from eventdesk.links import LinkService


@pytest.fixture
def event_tz() -> dt.tzinfo:
    return dt.timezone(dt.timedelta(hours=7))


@pytest.fixture
def events(db_engine, memory_cache, cache_settings, event_tz) -> EventService:
    return EventService(db_engine, memory_cache, cache_settings, event_tz=event_tz)


@pytest.fixture
def links(db_engine, memory_cache, cache_settings) -> LinkService:
    return LinkService(db_engine, memory_cache, cache_settings)


def event_data(**overrides) -> dict:
    data = {
        "event_title": "Opening Ceremony",
        "event_start": dt.datetime(2099, 3, 1, 9, 0),
        "event_location": "Main Hall",
        "event_status": "UPCOMING",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_event():
    return event_data
