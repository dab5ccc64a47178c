from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Boolean, Enum, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from ..db.base import Base, CreatedAtMixin, IntIdMixin


class LinkGroup(StrEnum):
    SOCIAL = "SOCIAL"
    MATERIAL = "MATERIAL"
    TEST = "TEST"
    FORM = "FORM"
    MISC = "MISC"
    DEV = "DEV"


class Link(IntIdMixin, CreatedAtMixin, Base):
    __tablename__ = "sekuro_links"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    link: Mapped[str] = mapped_column(Text, nullable=False)
    group_type: Mapped[LinkGroup] = mapped_column(
        Enum(LinkGroup, name="link_group", native_enum=False, length=16),
        default=LinkGroup.DEV,
        nullable=False,
    )
    is_available: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=true(), nullable=False
    )
