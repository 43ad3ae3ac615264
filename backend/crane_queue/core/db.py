from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from crane_queue.core.config import settings

# make sure all SQLModel tables are registered before create_all
from crane_queue.infrastructure.database import models  # noqa: F401


def enable_sqlite_write_locking(target: Engine) -> None:
    """
    Open every SQLite transaction with ``BEGIN IMMEDIATE``.

    pysqlite defers ``BEGIN`` until the first DML statement and SQLite has no
    ``SELECT ... FOR UPDATE``, so a unit of work must take the database write
    lock before its first read for guard checks to hold until commit.
    """

    @event.listens_for(target, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(target, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine; SQLite engines get write locking at transaction start."""
    db_engine = create_engine(url, **kwargs)
    if db_engine.dialect.name == "sqlite":
        enable_sqlite_write_locking(db_engine)
    return db_engine


engine_kwargs: dict = {"echo": settings.SQL_ECHO}

if settings.is_sqlite:
    # Sessions are opened per request from FastAPI's threadpool
    engine_kwargs["connect_args"] = {
        "check_same_thread": False,
        "timeout": settings.SQLITE_BUSY_TIMEOUT,
    }
else:
    engine_kwargs.update(
        {
            "pool_pre_ping": True,  # Verify connections before use
            "pool_recycle": 3600,
            "pool_size": 10,
            "max_overflow": 20,
        }
    )

engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI, **engine_kwargs)


def init_db(target: Engine | None = None) -> None:
    """Create all tables. Deployments use the Alembic revisions instead."""
    SQLModel.metadata.create_all(target or engine)


def make_session_factory(target: Engine | None = None):
    """Return a zero-argument session factory bound to ``target``."""
    bound = target or engine

    def session_factory() -> Session:
        # Records are read after the unit of work commits
        return Session(bound, expire_on_commit=False)

    return session_factory
