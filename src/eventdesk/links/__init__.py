from .models import Link, LinkGroup
from .schemas import LinkCreate, LinkList, LinkMutationResult, LinkRead, LinkUpdate
from .service import LinkService

__all__ = [
    "Link",
    "LinkGroup",
    "LinkCreate",
    "LinkUpdate",
    "LinkRead",
    "LinkList",
    "LinkMutationResult",
    "LinkService",
]
