"""SQLAlchemy adapter for the serialized data cache."""

from __future__ import annotations

from .mappings import create_cache_tables, serialized_entry_table
from .serializer import SqlAlchemyDataSerializer, read_parsed_data
from .unit_of_work import SqlAlchemyCacheUnitOfWork, StartupError, create_cache_engine

__all__ = [
    "SqlAlchemyCacheUnitOfWork",
    "SqlAlchemyDataSerializer",
    "StartupError",
    "create_cache_engine",
    "create_cache_tables",
    "read_parsed_data",
    "serialized_entry_table",
]
