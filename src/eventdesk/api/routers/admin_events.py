from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from ...events import EventCreate, EventList, EventMutationResult, EventUpdate
from ...exceptions import InvalidRequestError
from ..deps import EventServiceDep

ROUTER_PREFIX = "/admin/api/event"
ROUTER_TAG = "admin-events"

router = APIRouter()


@router.get("/list-event", response_model=EventList)
async def list_events(service: EventServiceDep):
    return {"data": await service.list_admin()}


@router.post("/add-event", response_model=EventMutationResult)
async def add_event(body: EventCreate, service: EventServiceDep):
    row = await service.create(body.model_dump())
    return {"message": "Event added successfully", "data": [row]}


@router.put("/edit-event", response_model=EventMutationResult)
async def edit_event(body: EventUpdate, service: EventServiceDep):
    if not body.id:
        raise InvalidRequestError("Event ID is required")
    row = await service.update(body.id, body.changes())
    return {"message": "Event updated successfully", "data": [row]}


@router.delete("/delete-event", response_model=EventMutationResult, response_model_exclude={"data"})
async def delete_event(service: EventServiceDep, id: Optional[int] = None):
    if not id:
        raise InvalidRequestError("Event ID is required")
    await service.delete(id)
    return {"message": "Event deleted successfully"}
