"""SQLite schema bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

TABLES = (
    """
    CREATE TABLE IF NOT EXISTS Inventory (
        ProductId   INTEGER PRIMARY KEY AUTOINCREMENT,
        ProductName TEXT    NOT NULL,
        Stock       INTEGER NOT NULL CHECK (Stock >= 0),
        UnitPrice   TEXT    NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Orders (
        Id         INTEGER PRIMARY KEY AUTOINCREMENT,
        CustomerId INTEGER NOT NULL,
        CreatedAt  TEXT    NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS OrderDetails (
        Id        INTEGER PRIMARY KEY AUTOINCREMENT,
        OrderId   INTEGER NOT NULL REFERENCES Orders (Id),
        ProductId INTEGER NOT NULL,
        Quantity  INTEGER NOT NULL CHECK (Quantity >= 1),
        UnitPrice TEXT    NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS AuditLog (
        Id        INTEGER PRIMARY KEY AUTOINCREMENT,
        Action    TEXT NOT NULL,
        Details   TEXT NOT NULL,
        CreatedAt TEXT NOT NULL
    )
    """,
)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Build the async engine and turn on foreign keys for every connection."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA foreign_keys=ON")
            finally:
                cursor.close()

    return engine


async def ensure_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        for statement in TABLES:
            await connection.execute(text(statement))
    logger.info("Database schema ensured")
