"""Engine and session lifecycle for the read-only SQL record store."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from stayledger.config import DatabaseConfig, get_database_config

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


class StartupError(RuntimeError):
    """Raised when a session is requested before the adapter is initialised."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call stayledger.adapters.sqlalchemy."
                "session.startup() before opening a session."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the SQLAlchemy engine and session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    if engine is None:
        config = (
            DatabaseConfig(uri=database_uri) if database_uri is not None else get_database_config()
        )
        engine = create_engine(config.uri, echo=config.echo, future=True)
    _STATE.engine = engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose of the managed engine."""

    engine = _STATE.engine
    if engine is not None:
        engine.dispose()
    _STATE.engine = None


@contextmanager
def read_session() -> Iterator[Session]:
    """Yield a session that is rolled back on exit; the store is never written."""

    session = _STATE.session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
