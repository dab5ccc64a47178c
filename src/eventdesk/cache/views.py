"""Every cached read in the service, and what each one depends on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .settings import CacheSettings


class Entity(StrEnum):
    EVENT = "event"
    LINK = "link"


class Audience(StrEnum):
    ADMIN = "admin"
    CLIENT = "client"


@dataclass(frozen=True)
class CachedView:
    key: str
    depends_on: frozenset[Entity]
    audience: Audience

    def ttl(self, settings: CacheSettings) -> int:
        return settings.admin_ttl if self.audience is Audience.ADMIN else settings.client_ttl


EVENT_LIST = CachedView("event:list", frozenset({Entity.EVENT}), Audience.ADMIN)
CLIENT_EVENT_LIST = CachedView("client:event:list", frozenset({Entity.EVENT}), Audience.CLIENT)
CLIENT_EVENT_ONGOING = CachedView("client:event:ongoing", frozenset({Entity.EVENT}), Audience.CLIENT)
CLIENT_EVENT_UPCOMING = CachedView("client:event:upcoming", frozenset({Entity.EVENT}), Audience.CLIENT)
LINK_LIST = CachedView("link:list", frozenset({Entity.LINK}), Audience.ADMIN)
CLIENT_LINK_LIST = CachedView("client:link:list", frozenset({Entity.LINK}), Audience.CLIENT)

# A new cached read only needs an entry here to be invalidated correctly.
VIEWS: tuple[CachedView, ...] = (
    EVENT_LIST,
    CLIENT_EVENT_LIST,
    CLIENT_EVENT_ONGOING,
    CLIENT_EVENT_UPCOMING,
    LINK_LIST,
    CLIENT_LINK_LIST,
)
