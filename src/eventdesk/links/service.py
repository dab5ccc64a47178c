from __future__ import annotations

from ..cache import CLIENT_LINK_LIST, LINK_LIST, Entity
from ..services import CachedCRUDService, Row
from .models import Link, LinkGroup
from .schemas import LinkRead


class LinkService(CachedCRUDService[Link]):
    entity = Entity.LINK
    model = Link
    read_schema = LinkRead
    admin_view = LINK_LIST
    label = "Link"

    async def list_client(self) -> list[Row]:
        """Public links: available ones, minus the DEV group."""
        return await self.cached(
            CLIENT_LINK_LIST,
            lambda: self.query(
                where={"is_available": True},
                exclude={"group_type": LinkGroup.DEV},
                order_by=Link.id,
            ),
        )
