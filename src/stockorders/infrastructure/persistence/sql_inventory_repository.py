"""SQL implementation of InventoryRepository."""

from __future__ import annotations

from sqlalchemy import text

from stockorders.domain.model.inventory import Inventory
from stockorders.domain.model.value_objects import ProductId
from stockorders.domain.repository.inventory_repository import InventoryRepository
from stockorders.infrastructure.persistence.mappers import (
    inventory_to_domain,
    inventory_to_record,
)
from stockorders.infrastructure.persistence.records import InventoryRecord
from stockorders.infrastructure.persistence.session import DbSession


class SqlInventoryRepository(InventoryRepository):

    def __init__(self, session: DbSession) -> None:
        self._session = session

    # --- Queries --------------------------------------------------------------

    async def get_all(self) -> list[Inventory]:
        result = await self._session.connection.execute(
            text("SELECT * FROM Inventory ORDER BY ProductId")
        )
        return [
            inventory_to_domain(InventoryRecord.from_row(row))
            for row in result.mappings().all()
        ]

    async def get_by_product_id(self, product_id: int) -> Inventory | None:
        result = await self._session.connection.execute(
            text("SELECT * FROM Inventory WHERE ProductId = :ProductId"),
            {"ProductId": product_id},
        )
        row = result.mappings().first()
        return None if row is None else inventory_to_domain(InventoryRecord.from_row(row))

    # --- Commands -------------------------------------------------------------

    async def create(self, inventory: Inventory) -> int:
        record = inventory_to_record(inventory)
        result = await self._session.connection.execute(
            text(
                "INSERT INTO Inventory (ProductName, Stock, UnitPrice) "
                "VALUES (:ProductName, :Stock, :UnitPrice)"
            ),
            record.params(),
        )
        product_id = result.lastrowid
        inventory._assign_id(ProductId(product_id))
        return product_id

    async def update(self, inventory: Inventory) -> None:
        await self._session.connection.execute(
            text(
                "UPDATE Inventory "
                "SET ProductName = :ProductName, Stock = :Stock, UnitPrice = :UnitPrice "
                "WHERE ProductId = :ProductId"
            ),
            inventory_to_record(inventory).params(),
        )

    async def update_stock(self, product_id: int, stock: int) -> int:
        result = await self._session.connection.execute(
            text("UPDATE Inventory SET Stock = :Stock WHERE ProductId = :ProductId"),
            {"ProductId": product_id, "Stock": stock},
        )
        return result.rowcount

    async def delete(self, product_id: int) -> None:
        await self._session.connection.execute(
            text("DELETE FROM Inventory WHERE ProductId = :ProductId"),
            {"ProductId": product_id},
        )
