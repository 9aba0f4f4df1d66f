"""SQLAlchemy-backed Unit of Work.

State machine::

    Idle --begin--> Active --commit | rollback--> Idle

Only one transaction may be active per instance.  Every exit path of
``execute_in_transaction`` -- success, business failure, exception or
cancellation -- leaves the instance Idle again.

On SQLite the transaction opens with ``BEGIN IMMEDIATE``, so concurrent
units of work queue on the write lock instead of reading stale stock.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncTransaction

from stockorders.application.unit_of_work import UnitOfWork
from stockorders.domain.exceptions import TransactionStateError
from stockorders.domain.result import Result
from stockorders.infrastructure.persistence.session import DbSession

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session: DbSession) -> None:
        self._session = session
        self._closed = False

    @property
    def session(self) -> DbSession:
        return self._session

    @property
    def in_transaction(self) -> bool:
        return self._session.transaction is not None

    # --- Public API -----------------------------------------------------------

    async def execute_in_transaction(
        self, operation: Callable[[], Awaitable[Result[T]]]
    ) -> Result[T]:
        self._assert_usable()
        await self._session.ensure_open()
        transaction = await self._begin()

        try:
            result = await operation()

            if result.is_success:
                await transaction.commit()
                logger.info("Transaction committed")
            else:
                await self._rollback(transaction)
                error_code = result.match(success=repr, failure=lambda e: e.code)
                logger.warning(
                    "Transaction rolled back due to business failure: %s",
                    error_code,
                    extra={"error_code": error_code},
                )
            return result
        except asyncio.CancelledError:
            await self._rollback(transaction)
            logger.warning("Transaction rolled back due to cancellation")
            raise
        except Exception:
            await self._rollback(transaction)
            logger.exception("Transaction rolled back due to exception")
            raise
        finally:
            self._session.transaction = None

    async def close(self) -> None:
        """Dispose: roll back anything uncommitted, then release the connection."""
        if self._closed:
            return
        self._closed = True

        transaction = self._session.transaction
        if transaction is not None:
            logger.warning("Unit of work closed with an active transaction; rolling back")
            await self._rollback(transaction)
            self._session.transaction = None
        await self._session.close()

    # --- Transaction helpers --------------------------------------------------

    async def _begin(self) -> AsyncTransaction:
        if self._session.transaction is not None:
            raise TransactionStateError(
                "A transaction is already active on this unit of work; "
                "nested execute_in_transaction calls are not supported"
            )

        connection = self._session.connection
        if connection.in_transaction():
            # Left behind by reads issued outside a unit of work.
            await connection.rollback()

        transaction = await connection.begin()
        if connection.dialect.name == "sqlite":
            # pysqlite defers BEGIN until the first write, so reads inside the
            # operation would see stale stock.  Take the write lock up front.
            try:
                await connection.exec_driver_sql("BEGIN IMMEDIATE")
            except Exception:
                await self._rollback(transaction)
                raise
        self._session.transaction = transaction
        logger.debug("Transaction started")
        return transaction

    async def _rollback(self, transaction: AsyncTransaction) -> None:
        # Never raises; the caller gets the original error or result.
        try:
            if transaction.is_active:
                await transaction.rollback()
        except Exception:
            logger.exception("Error during transaction rollback")

    def _assert_usable(self) -> None:
        if self._closed:
            raise TransactionStateError("Unit of work has been closed")
