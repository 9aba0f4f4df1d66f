"""Application service: inventory maintenance.

Every write validates through the Inventory aggregate, persists, and
records a matching audit entry, all in one transaction.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from stockorders.application.unit_of_work import UnitOfWork
from stockorders.domain import errors
from stockorders.domain.model.audit_log import (
    INVENTORY_CREATED,
    INVENTORY_DELETED,
    INVENTORY_RESTOCKED,
    INVENTORY_UPDATED,
    AuditLogRecord,
)
from stockorders.domain.model.inventory import Inventory
from stockorders.domain.repository.audit_log_repository import AuditLogRepository
from stockorders.domain.repository.inventory_repository import InventoryRepository
from stockorders.domain.result import OK, EmptySuccess, Failure, Result, Success, failed

logger = logging.getLogger(__name__)


class InventoryService:

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        audit_log_repo: AuditLogRepository,
    ) -> None:
        self._uow = uow
        self._inventory_repo = inventory_repo
        self._audit_log_repo = audit_log_repo

    # --- Queries --------------------------------------------------------------

    async def get_all(self) -> Result[list[Inventory]]:
        return Success(await self._inventory_repo.get_all())

    async def get_by_product_id(self, product_id: int) -> Result[Inventory]:
        inventory = await self._inventory_repo.get_by_product_id(product_id)
        if inventory is None:
            return Failure(errors.inventory_not_found(product_id))
        return Success(inventory)

    # --- Commands -------------------------------------------------------------

    async def create(self, product_name: str, stock: int, unit_price: Decimal) -> Result[int]:
        """Add a new product with its opening stock; returns the product id."""

        async def operation() -> Result[int]:
            return await Inventory.create(product_name, stock, unit_price).match(
                success=self._insert, failure=failed
            )

        return await self._uow.execute_in_transaction(operation)

    async def update(
        self, product_id: int, product_name: str, stock: int, unit_price: Decimal
    ) -> EmptySuccess | Failure:

        async def operation() -> EmptySuccess | Failure:
            existing = await self._inventory_repo.get_by_product_id(product_id)
            if existing is None:
                return Failure(errors.inventory_not_found(product_id))

            updated = existing.update(product_name, stock, unit_price)
            if updated.is_failure:
                return updated

            await self._inventory_repo.update(existing)
            await self._audit(
                INVENTORY_UPDATED,
                f"ProductId={product_id}, Name={existing.product_name}, "
                f"Stock={existing.stock}, Price={existing.unit_price}",
            )
            return OK

        return await self._uow.execute_in_transaction(operation)

    async def delete(self, product_id: int) -> EmptySuccess | Failure:

        async def operation() -> EmptySuccess | Failure:
            existing = await self._inventory_repo.get_by_product_id(product_id)
            if existing is None:
                return Failure(errors.inventory_not_found(product_id))

            await self._inventory_repo.delete(product_id)
            await self._audit(
                INVENTORY_DELETED,
                f"ProductId={product_id}, Name={existing.product_name}",
            )
            return OK

        return await self._uow.execute_in_transaction(operation)

    async def restock(self, product_id: int, quantity: int) -> Result[int]:
        """Add *quantity* units to stock; returns the new stock level."""

        async def operation() -> Result[int]:
            existing = await self._inventory_repo.get_by_product_id(product_id)
            if existing is None:
                return Failure(errors.inventory_not_found(product_id))

            increased = existing.increase(quantity)
            if increased.is_failure:
                return increased

            await self._inventory_repo.update_stock(product_id, existing.stock)
            await self._audit(
                INVENTORY_RESTOCKED,
                f"ProductId={product_id}, Added={quantity}, Stock={existing.stock}",
            )
            return Success(existing.stock)

        return await self._uow.execute_in_transaction(operation)

    # --- Internal helpers -----------------------------------------------------

    async def _insert(self, inventory: Inventory) -> Result[int]:
        product_id = await self._inventory_repo.create(inventory)
        await self._audit(
            INVENTORY_CREATED,
            f"ProductId={product_id}, Name={inventory.product_name}, "
            f"Stock={inventory.stock}, Price={inventory.unit_price}",
        )
        return Success(product_id)

    async def _audit(self, action: str, details: str) -> None:
        await self._audit_log_repo.create(AuditLogRecord.new(action, details))
        logger.debug("Audit %s: %s", action, details)
