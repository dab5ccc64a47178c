from .models import Event, EventStatus
from .schemas import EventCreate, EventList, EventMutationResult, EventRead, EventUpdate
from .service import EventService, localize, to_wall_clock

__all__ = [
    "Event",
    "EventStatus",
    "EventCreate",
    "EventUpdate",
    "EventRead",
    "EventList",
    "EventMutationResult",
    "EventService",
    "localize",
    "to_wall_clock",
]
