"""SQLAlchemy session scope for the serialized data cache."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from resmerger.adapters.sqlalchemy.mappings import create_cache_tables
from resmerger.config.cache import get_cache_config

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


class StartupError(RuntimeError):
    """Raised when a cache unit of work is used outside its ``with`` block."""


def create_cache_engine(*, database_uri: str | None = None) -> Engine:
    """Create an engine for the cache database and make sure its tables exist."""

    engine = create_engine(database_uri or get_cache_config().uri, future=True)
    create_cache_tables(engine)
    return engine


class SqlAlchemyCacheUnitOfWork:
    """Unit of work managing one SQLAlchemy session against the cache."""

    def __init__(self, engine: Engine) -> None:
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=engine, expire_on_commit=False
        )
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyCacheUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = self.session_factory()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self._session = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
