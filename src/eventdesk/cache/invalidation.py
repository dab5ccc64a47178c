from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from .base import BaseCache
from .views import VIEWS, CachedView, Entity

logger = logging.getLogger(__name__)


class Mutation(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def build_invalidation_map(
    views: Iterable[CachedView],
) -> Mapping[tuple[Entity, Mutation], tuple[str, ...]]:
    """(entity, mutation) -> keys of every view that reads the entity."""
    views = tuple(views)
    table: dict[tuple[Entity, Mutation], tuple[str, ...]] = {}
    for entity in Entity:
        keys = tuple(v.key for v in views if entity in v.depends_on)
        for mutation in Mutation:
            table[(entity, mutation)] = keys
    return MappingProxyType(table)


INVALIDATION_MAP = build_invalidation_map(VIEWS)


def keys_for(entity: Entity, mutation: Mutation) -> tuple[str, ...]:
    return INVALIDATION_MAP[(Entity(entity), Mutation(mutation))]


async def invalidate(cache: BaseCache, entity: Entity, mutation: Mutation) -> tuple[str, ...]:
    """Delete every key dependent on ``entity``; returns the keys deleted."""
    keys = keys_for(entity, mutation)
    if keys:
        await asyncio.gather(*(cache.delete(k) for k in keys))
    logger.debug("Invalidated %s after %s: %s", entity, mutation, ", ".join(keys))
    return keys
