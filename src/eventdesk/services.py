from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from .cache import BaseCache, CacheSettings, CachedView, Entity, Mutation, invalidate, read_through
from .db import DBEngine, Repository, UnitOfWork
from .exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

Row = dict[str, Any]


def store_message(exc: SQLAlchemyError) -> str:
    """The driver's message without SQLAlchemy's statement/params dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class CachedCRUDService(Generic[ModelT]):
    """
    Cache-aware reads and writes for one entity.

    Writes commit first and then delete every cache key that depends on the
    entity, so the response is only returned once stale views are gone.
    Reads go through the cache and fall back to the database on a miss.
    """

    entity: ClassVar[Entity]
    model: ClassVar[type]
    read_schema: ClassVar[type[BaseModel]]
    admin_view: ClassVar[CachedView]
    label: ClassVar[str]

    def __init__(self, engine: DBEngine, cache: BaseCache, cache_settings: CacheSettings):
        self.engine = engine
        self.cache = cache
        self.cache_settings = cache_settings

    def dump(self, obj: Any) -> Row:
        return self.read_schema.model_validate(obj).model_dump(mode="json")

    async def cached(self, view: CachedView, loader: Callable[[], Awaitable[list[Row]]]) -> list[Row]:
        return await read_through(self.cache, view.key, loader, ttl=view.ttl(self.cache_settings))

    async def query(
        self,
        *,
        where: dict[str, Any] | None = None,
        exclude: dict[str, Any] | None = None,
        order_by: Any | None = None,
        dump: Callable[[Any], Row] | None = None,
    ) -> list[Row]:
        dump = dump or self.dump
        try:
            async with self.engine.session() as session:
                rows = await Repository(session, self.model).list(
                    where=where, exclude=exclude, order_by=order_by
                )
                return [dump(r) for r in rows]
        except SQLAlchemyError as exc:
            logger.warning("%s query failed: %s", self.label, store_message(exc))
            raise StoreError(store_message(exc)) from exc

    @asynccontextmanager
    async def _write(self) -> AsyncIterator[UnitOfWork]:
        try:
            async with UnitOfWork(self.engine) as uow:
                yield uow
        except SQLAlchemyError as exc:
            logger.warning("%s write failed: %s", self.label, store_message(exc))
            raise StoreError(store_message(exc)) from exc

    async def list_admin(self) -> list[Row]:
        return await self.cached(
            self.admin_view, lambda: self.query(order_by=self.model.id)  # type: ignore[attr-defined]
        )

    async def create(self, data: dict[str, Any]) -> Row:
        async with self._write() as uow:
            obj = await uow.repo(self.model).create(**data)
            row = self.dump(obj)
        await invalidate(self.cache, self.entity, Mutation.CREATE)
        logger.info("%s %s created", self.label, row.get("id"))
        return row

    async def update(self, id: int, data: dict[str, Any]) -> Row:
        async with self._write() as uow:
            obj = await uow.repo(self.model).update(id, **data)
            if obj is None:
                raise NotFoundError(f"{self.label} {id} not found")
            row = self.dump(obj)
        await invalidate(self.cache, self.entity, Mutation.UPDATE)
        logger.info("%s %s updated (%s)", self.label, id, ", ".join(sorted(data)) or "no fields")
        return row

    async def delete(self, id: int) -> None:
        async with self._write() as uow:
            deleted = await uow.repo(self.model).delete(id)
            if not deleted:
                raise NotFoundError(f"{self.label} {id} not found")
        await invalidate(self.cache, self.entity, Mutation.DELETE)
        logger.info("%s %s deleted", self.label, id)
