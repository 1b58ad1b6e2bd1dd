"""Database configuration, session management and the unit of work."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict[str, object]:
    """Return ``create_engine`` keyword arguments suited to the configured URL."""

    options: dict[str, object] = {"pool_pre_ping": True}
    if settings.database_url.startswith("sqlite"):
        # Requests are served from a thread pool; sessions never cross threads.
        options["connect_args"] = {"check_same_thread": False}
    return options


def _use_immediate_transactions(target: Engine) -> None:
    """Make every SQLite transaction take the database write lock up front.

    SQLite ignores ``FOR UPDATE`` and pysqlite defers ``BEGIN`` until the
    first write, so a unit of work would otherwise validate against state
    another connection is about to change. Emitting ``BEGIN IMMEDIATE``
    serializes units of work the way the row lock does on PostgreSQL.
    """

    @event.listens_for(target, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(target, "begin")
    def _begin_immediate(connection) -> None:
        connection.exec_driver_sql("BEGIN IMMEDIATE")


engine = create_engine(settings.database_url, **_engine_options(settings))
if engine.dialect.name == "sqlite":
    _use_immediate_transactions(engine)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Run the enclosed block as one transaction on ``session``.

    Commits when the block finishes and rolls back in full when it raises, so
    a failed command never leaves partial rows behind. Row locks taken inside
    the block are held until the commit or rollback.
    """

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
