"""Application service: orders.

Orchestrates inventory, orders and the audit log inside one unit of
work.  This is the only place that coordinates multiple aggregates.
"""

from __future__ import annotations

import logging

from stockorders.application.dto import OrderItem
from stockorders.application.unit_of_work import UnitOfWork
from stockorders.domain import errors
from stockorders.domain.model.audit_log import ORDER_CREATED, AuditLogRecord
from stockorders.domain.model.order import Order
from stockorders.domain.repository.audit_log_repository import AuditLogRepository
from stockorders.domain.repository.inventory_repository import InventoryRepository
from stockorders.domain.repository.order_repository import OrderRepository
from stockorders.domain.result import Failure, Result, Success, failed

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        order_repo: OrderRepository,
        audit_log_repo: AuditLogRepository,
    ) -> None:
        self._uow = uow
        self._inventory_repo = inventory_repo
        self._order_repo = order_repo
        self._audit_log_repo = audit_log_repo

    async def create_order(self, customer_id: int, items: list[OrderItem]) -> Result[int]:
        """Place an order and take its items out of stock.

        Steps (all inside one transaction):
        1. For each item: load inventory, decrease stock, persist the new
           stock level, add a detail priced at the *current* unit price.
        2. Insert the order aggregate (parent row, then details).
        3. Record an ORDER_CREATED audit entry.

        Any failure rolls back every stock decrement made so far.
        """
        if not items:
            return Failure(errors.EMPTY_ORDER)

        return await Order.create(customer_id).match(
            success=lambda order: self._uow.execute_in_transaction(
                lambda: self._place(order, items)
            ),
            failure=failed,
        )

    async def _place(self, order: Order, items: list[OrderItem]) -> Result[int]:
        for item in items:
            inventory = await self._inventory_repo.get_by_product_id(item.product_id)
            if inventory is None:
                return Failure(errors.inventory_not_found(item.product_id))

            decreased = inventory.decrease(item.quantity)
            if decreased.is_failure:
                return decreased

            await self._inventory_repo.update_stock(item.product_id, inventory.stock)

            added = order.add_detail(
                inventory.product_id,
                item.quantity,
                inventory.unit_price,  # <-- price snapshot
            )
            if added.is_failure:
                return added

        order_id = await self._order_repo.create(order)

        await self._audit_log_repo.create(
            AuditLogRecord.new(
                ORDER_CREATED,
                f"OrderId={order_id}, CustomerId={order.customer_id}, "
                f"Items={len(items)}, Total={order.total_amount:.2f}",
            )
        )
        logger.info("Order %s created for customer %s", order_id, order.customer_id)
        return Success(order_id)

    # --- Queries --------------------------------------------------------------

    async def get_all_orders(self) -> Result[list[Order]]:
        return Success(await self._order_repo.get_all())

    async def get_order_by_id(self, order_id: int) -> Result[Order]:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            return Failure(errors.order_not_found(order_id))
        return Success(order)
