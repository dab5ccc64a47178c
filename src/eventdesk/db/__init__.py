from .base import Base, CreatedAtMixin, IntIdMixin
from .deps import EngineDep, get_engine
from .engine import DBEngine
from .health import db_healthcheck
from .repository import Repository
from .settings import DBSettings, get_db_settings
from .uow import UnitOfWork

__all__ = [
    "Base",
    "CreatedAtMixin",
    "IntIdMixin",
    "DBEngine",
    "DBSettings",
    "get_db_settings",
    "Repository",
    "UnitOfWork",
    "db_healthcheck",
    "get_engine",
    "EngineDep",
]
