from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import EventStatus


class EventCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    event_title: str = Field(min_length=1)
    event_start: dt.datetime
    event_location: str
    event_status: EventStatus = EventStatus.UPCOMING
    event_end: Optional[dt.datetime] = None


class EventUpdate(BaseModel):
    """Edit body: ``id`` plus the fields to change."""

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = None
    event_title: Optional[str] = Field(default=None, min_length=1)
    event_start: Optional[dt.datetime] = None
    event_location: Optional[str] = None
    event_status: Optional[EventStatus] = None
    event_end: Optional[dt.datetime] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"id"})


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt.datetime
    event_title: str
    event_start: dt.datetime
    event_location: str
    event_status: EventStatus
    event_end: Optional[dt.datetime] = None


class EventList(BaseModel):
    data: list[EventRead]


class EventMutationResult(BaseModel):
    message: str
    data: list[EventRead] = Field(default_factory=list)
