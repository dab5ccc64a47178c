from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import LinkGroup


class LinkCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    link: str = Field(min_length=1)
    group_type: LinkGroup = LinkGroup.DEV
    is_available: bool = True


class LinkUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = None
    title: Optional[str] = Field(default=None, min_length=1)
    link: Optional[str] = Field(default=None, min_length=1)
    group_type: Optional[LinkGroup] = None
    is_available: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"id"})


class LinkRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt.datetime
    title: str
    link: str
    group_type: LinkGroup
    is_available: bool = True


class LinkList(BaseModel):
    data: list[LinkRead]


class LinkMutationResult(BaseModel):
    message: str
    data: list[LinkRead] = Field(default_factory=list)
