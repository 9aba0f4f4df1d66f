"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockorders.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: Order) -> int:
        """Persist an order with all of its details and return its new id."""

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    async def get_all(self) -> list[Order]:
        """Return every order with its details, oldest first."""
