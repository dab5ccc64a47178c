from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, Type, TypeVar, cast

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


def apply_filters(stmt, model, where: dict[str, Any] | None, exclude: dict[str, Any] | None = None):
    """Exact-match filters; a list/tuple/set value becomes ``IN``, ``exclude`` becomes ``!=``."""
    conds = []
    for k, v in (where or {}).items():
        col = cast(Any, getattr(model, k))
        if isinstance(v, (list, tuple, set, frozenset)):
            conds.append(col.in_(list(v)))
        else:
            conds.append(col == v)
    for k, v in (exclude or {}).items():
        conds.append(cast(Any, getattr(model, k)) != v)
    if not conds:
        return stmt
    return stmt.where(and_(*conds))


class Repository(Generic[T]):
    """Generic async repository: row CRUD for one mapped table."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def get(self, id: Any) -> Optional[T]:
        return await self.session.get(self.model, id)

    async def list(
        self,
        *,
        where: Optional[dict[str, Any]] = None,
        exclude: Optional[dict[str, Any]] = None,
        order_by: Any | None = None,
    ) -> Sequence[T]:
        stmt = apply_filters(select(self.model), self.model, where, exclude)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return (await self.session.execute(stmt)).scalars().all()

    async def create(self, **data) -> T:
        obj = self.model(**data)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def update(self, id: Any, **data) -> Optional[T]:
        obj = await self.get(id)
        if obj is None:
            return None
        for k, v in data.items():
            setattr(obj, k, v)
        await self.session.flush()
        return obj

    async def delete(self, id: Any) -> int:
        cond = cast(Any, self.model).id == id
        res = await self.session.execute(delete(self.model).where(cond))
        return int(res.rowcount or 0)

