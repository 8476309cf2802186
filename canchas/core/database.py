"""Database configuration for the canchas reservation service."""

import logging
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from canchas.core.config import settings

logger = logging.getLogger(__name__)

# Execution option asking SQLite to take its write lock when the transaction
# begins instead of at the first INSERT/UPDATE.
SQLITE_BEGIN_MODE = "canchas_sqlite_begin"


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _engine_options(database_url: str) -> dict[str, Any]:
    if _is_sqlite(database_url):
        # FastAPI serves sync endpoints from a thread pool.
        return {"connect_args": {"check_same_thread": False, "timeout": 30}}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


def configure_sqlite_transactions(engine: Engine) -> Engine:
    """Let SQLAlchemy emit BEGIN itself so write units can use BEGIN IMMEDIATE.

    pysqlite only starts a transaction before DML, which leaves the reads of a
    check-then-write sequence outside any lock.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        mode = conn.get_execution_options().get(SQLITE_BEGIN_MODE)
        conn.exec_driver_sql(f"BEGIN {mode}" if mode else "BEGIN")

    return engine


def build_engine(database_url: str) -> Engine:
    engine = create_engine(database_url, **_engine_options(database_url))
    if _is_sqlite(database_url):
        configure_sqlite_transactions(engine)
    return engine


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def verify_database_connection(bind: Engine = engine) -> None:
    """Ensure the service can connect to the configured database."""

    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Database connection validation failed")
        raise RuntimeError("Failed to connect to the canchas database") from exc


__all__ = [
    "Base",
    "SQLITE_BEGIN_MODE",
    "SessionLocal",
    "build_engine",
    "configure_sqlite_transactions",
    "engine",
    "verify_database_connection",
]
