from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from ...exceptions import InvalidRequestError
from ...links import LinkCreate, LinkList, LinkMutationResult, LinkUpdate
from ..deps import LinkServiceDep

ROUTER_PREFIX = "/admin/api/link"
ROUTER_TAG = "admin-links"

router = APIRouter()


@router.get("/list-link", response_model=LinkList)
async def list_links(service: LinkServiceDep):
    return {"data": await service.list_admin()}


@router.post("/add-link", response_model=LinkMutationResult)
async def add_link(body: LinkCreate, service: LinkServiceDep):
    row = await service.create(body.model_dump())
    return {"message": "Link added successfully", "data": [row]}


@router.put("/edit-link", response_model=LinkMutationResult)
async def edit_link(body: LinkUpdate, service: LinkServiceDep):
    if not body.id:
        raise InvalidRequestError("Link ID is required")
    row = await service.update(body.id, body.changes())
    return {"message": "Link updated successfully", "data": [row]}


@router.delete("/delete-link", response_model=LinkMutationResult, response_model_exclude={"data"})
async def delete_link(service: LinkServiceDep, id: Optional[int] = None):
    if not id:
        raise InvalidRequestError("Link ID is required")
    await service.delete(id)
    return {"message": "Link deleted successfully"}
