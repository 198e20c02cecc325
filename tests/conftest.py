from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from resmerger.adapters.sqlalchemy import SqlAlchemyCacheUnitOfWork, create_cache_engine

os.environ.setdefault("RESMERGER_CACHE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_cache_engine(database_uri="sqlite+pysqlite:///:memory:")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def cache_unit_of_work(
    sqlite_engine: Engine,
) -> Callable[[], SqlAlchemyCacheUnitOfWork]:
    def factory() -> SqlAlchemyCacheUnitOfWork:
        return SqlAlchemyCacheUnitOfWork(sqlite_engine)

    return factory


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "sources"
    path.mkdir()
    return path
