"""SQLAlchemy metadata for the serialized data cache."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()


class KeyKind(StrEnum):
    ASSET = "asset"
    RESOURCE = "resource"


serialized_entry_table = Table(
    "serialized_entry",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("cache_key", String, nullable=False),
    Column("position", Integer, nullable=False),
    Column("key_kind", Enum(KeyKind, native_enum=False), nullable=False),
    Column("key", String, nullable=False),
    Column("payload", Text, nullable=False),
    UniqueConstraint("cache_key", "key_kind", "key"),
    Index("ix_serialized_entry_cache_position", "cache_key", "position"),
)


def create_cache_tables(engine: Engine) -> None:
    """Create the cache tables if they do not exist yet."""

    metadata.create_all(engine, checkfirst=True)
