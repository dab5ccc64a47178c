from __future__ import annotations

from fastapi import APIRouter

from ...events import EventList
from ...links import LinkList
from ..deps import EventServiceDep, LinkServiceDep

ROUTER_PREFIX = "/api"
ROUTER_TAG = "public"

router = APIRouter()


@router.get("/eventList", response_model=EventList)
async def event_list(service: EventServiceDep):
    return {"data": await service.list_client()}


@router.get("/upcomingEvents", response_model=EventList)
async def upcoming_events(service: EventServiceDep):
    return {"data": await service.list_upcoming()}


@router.get("/ongoingEvents", response_model=EventList)
async def ongoing_events(service: EventServiceDep):
    return {"data": await service.list_ongoing()}


@router.get("/links", response_model=LinkList)
async def links(service: LinkServiceDep):
    return {"data": await service.list_client()}
