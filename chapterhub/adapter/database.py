"""
Engine construction.

On SQLite, SELECT ... FOR UPDATE is a no-op and pysqlite only opens a
transaction at the first write, so two units of work could both read the
same state before either writes. SQLite engines therefore begin every
transaction with BEGIN IMMEDIATE, which takes the database write lock up
front and serializes units of work end to end. Other dialects keep their
default transaction handling and rely on row locks.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_SECONDS = 30


def build_engine(db_uri: str, echo: bool = False) -> AsyncEngine:
    if not db_uri.startswith("sqlite"):
        return create_async_engine(db_uri, echo=echo, future=True)

    engine = create_async_engine(
        db_uri,
        echo=echo,
        future=True,
        connect_args={"timeout": SQLITE_BUSY_TIMEOUT_SECONDS},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        # BEGIN is emitted by the "begin" listener below instead
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    logger.debug("SQLite engine configured with immediate transactions")
    return engine
