from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Optional

from sqlalchemy import DateTime, Enum, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..db.base import Base, CreatedAtMixin, IntIdMixin


class EventStatus(StrEnum):
    UPCOMING = "UPCOMING"
    COMING_SOON = "COMING_SOON"
    ONGOING = "ONGOING"
    OVER = "OVER"


class Event(IntIdMixin, CreatedAtMixin, Base):
    """
    A scheduled event. Status is only ever changed by an admin edit.

    Start and end are stored as naive wall-clock times at the event timezone.
    """

    __tablename__ = "sekuro_event"

    event_title: Mapped[str] = mapped_column(Text, nullable=False)
    event_start: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    event_location: Mapped[str] = mapped_column(Text, nullable=False)
    event_status: Mapped[EventStatus] = mapped_column(
        Enum(EventStatus, name="event_status", native_enum=False, length=16),
        default=EventStatus.UPCOMING,
        nullable=False,
    )
    event_end: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=False), default=None)
