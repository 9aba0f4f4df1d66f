"""Request-scoped database session.

One ``DbSession`` wraps one SQLAlchemy ``AsyncConnection`` plus a slot for
the transaction currently owned by the unit of work.  Repositories read
``connection``; only the unit of work writes ``transaction``.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncTransaction

logger = logging.getLogger(__name__)


class DbSession:

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._connection: AsyncConnection | None = None
        self.transaction: AsyncTransaction | None = None

    @property
    def connection(self) -> AsyncConnection:
        if self._connection is None:
            raise RuntimeError("DbSession is not open; call open() first")
        return self._connection

    @property
    def is_open(self) -> bool:
        return (
            self._connection is not None
            and not self._connection.closed
            and not self._connection.invalidated
        )

    async def open(self) -> DbSession:
        if self._connection is None:
            self._connection = await self._engine.connect()
            logger.debug("Database connection opened")
        return self

    async def ensure_open(self) -> None:
        """Open the connection, replacing it if it was closed or invalidated."""
        if self.is_open:
            return
        if self._connection is not None:
            logger.warning("Database connection was lost and is being reopened")
            await self._connection.close()
            self._connection = None
        await self.open()

    async def close(self) -> None:
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.debug("Database connection closed")
