from __future__ import annotations

from collections.abc import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

SessionLocal = sessionmaker(autoflush=False)

_engine: Engine | None = None


def _enable_sqlite_write_serialization(engine: Engine) -> None:
    # pysqlite's own BEGIN handling is disabled so every transaction starts
    # with BEGIN IMMEDIATE and holds the write lock for its whole duration.
    @event.listens_for(engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        _enable_sqlite_write_serialization(engine)
        return engine

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def configure_database(database_url: str, echo: bool = False) -> Engine:
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = build_engine(database_url, echo=echo)
    SessionLocal.configure(bind=_engine)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("database is not configured")
    return _engine


def init_db(engine: Engine) -> None:
    from eventhub.models import Base

    Base.metadata.create_all(engine)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
