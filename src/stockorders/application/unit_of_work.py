"""Abstract Unit of Work -- the transactional boundary used by services.

A service hands ``execute_in_transaction`` a coroutine function that
performs its repository calls and returns a ``Result``.  The unit of work
commits when that result is a success and rolls back when it is a
failure or when the operation raises.  Failures come back as values;
exceptions come back as exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TypeVar

from stockorders.domain.result import Result

T = TypeVar("T")


class UnitOfWork(ABC):

    @property
    @abstractmethod
    def in_transaction(self) -> bool:
        """True while a transaction is active."""

    @abstractmethod
    async def execute_in_transaction(
        self, operation: Callable[[], Awaitable[Result[T]]]
    ) -> Result[T]:
        """Run *operation* inside one transaction and commit or roll back."""

    @abstractmethod
    async def close(self) -> None:
        """Roll back anything uncommitted and release the connection."""

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
