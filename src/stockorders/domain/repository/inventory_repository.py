"""Abstract repository for the Inventory aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockorders.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    async def get_all(self) -> list[Inventory]:
        """Return every inventory record, ordered by product id."""

    @abstractmethod
    async def get_by_product_id(self, product_id: int) -> Inventory | None:
        """Return the inventory for a product, or None."""

    @abstractmethod
    async def create(self, inventory: Inventory) -> int:
        """Insert a new record, assign its product id and return it."""

    @abstractmethod
    async def update(self, inventory: Inventory) -> None:
        """Persist name, stock and price of an existing record."""

    @abstractmethod
    async def update_stock(self, product_id: int, stock: int) -> int:
        """Overwrite the stock level; return the number of rows touched."""

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Hard-delete a record."""
