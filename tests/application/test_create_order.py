"""Tests for OrderService.create_order.

Uses in-memory fake repositories and a snapshotting unit of work, so
rollback behaviour can be observed without a database.
"""

from decimal import Decimal

import pytest

from stockorders.application.dto import OrderItem, order_to_dto
from stockorders.application.order_service import OrderService
from stockorders.domain.model.audit_log import ORDER_CREATED
from stockorders.domain.model.inventory import Inventory
from stockorders.domain.model.value_objects import ProductId
from stockorders.domain.result import ErrorType
from tests.fakes import (
    FakeAuditLogRepository,
    FakeInventoryRepository,
    FakeOrderRepository,
    FakeUnitOfWork,
)


def _inventory(product_id: int, name: str, stock: int, price: str) -> Inventory:
    return Inventory(ProductId(product_id), name, stock, Decimal(price))


def _setup(items: list[Inventory] | None = None):
    """Build the service with fake repos, pre-loaded with inventory."""
    if items is None:
        items = [
            _inventory(1, "Widget", 10, "15.00"),
            _inventory(2, "Gadget", 5, "25.00"),
        ]
    inventory_repo = FakeInventoryRepository(items)
    order_repo = FakeOrderRepository()
    audit_repo = FakeAuditLogRepository()
    uow = FakeUnitOfWork(inventory_repo, order_repo, audit_repo)
    service = OrderService(uow, inventory_repo, order_repo, audit_repo)
    return service, uow, inventory_repo, order_repo, audit_repo


async def _stock(repo: FakeInventoryRepository, product_id: int) -> int:
    return (await repo.get_by_product_id(product_id)).stock


class TestCreateOrderHappyPath:

    async def test_returns_new_order_id(self):
        service, *_ = _setup()
        result = await service.create_order(7, [OrderItem(1, 3)])
        assert result.is_success
        assert result.value == 1

    async def test_decrements_stock_for_every_item(self):
        service, _, inventory_repo, _, _ = _setup()
        await service.create_order(7, [OrderItem(1, 3), OrderItem(2, 5)])
        assert await _stock(inventory_repo, 1) == 7
        assert await _stock(inventory_repo, 2) == 0

    async def test_persists_order_with_total(self):
        service, _, _, order_repo, _ = _setup()
        result = await service.create_order(7, [OrderItem(1, 3), OrderItem(2, 5)])

        order = await order_repo.get_by_id(result.value)
        assert order.customer_id == 7
        assert len(order.details) == 2
        assert order.total_amount == Decimal("170.00")
        assert order_to_dto(order).total == "$170.00"

    async def test_writes_order_created_audit_entry(self):
        service, _, _, _, audit_repo = _setup()
        result = await service.create_order(7, [OrderItem(1, 3)])

        assert len(audit_repo.records) == 1
        entry = audit_repo.records[0]
        assert entry.action == ORDER_CREATED
        assert f"OrderId={result.value}" in entry.details
        assert "CustomerId=7" in entry.details
        assert "Total=45.00" in entry.details

    async def test_commits_once(self):
        service, uow, *_ = _setup()
        await service.create_order(7, [OrderItem(1, 1)])
        assert (uow.commits, uow.rollbacks) == (1, 0)


class TestPriceSnapshot:

    async def test_detail_keeps_price_at_order_time(self):
        service, _, inventory_repo, order_repo, _ = _setup()
        result = await service.create_order(7, [OrderItem(1, 2)])

        widget = await inventory_repo.get_by_product_id(1)
        widget.update("Widget", widget.stock, Decimal("99.00"))
        await inventory_repo.update(widget)

        order = await order_repo.get_by_id(result.value)
        assert order.details[0].unit_price == Decimal("15.00")
        assert order.total_amount == Decimal("30.00")


class TestCreateOrderFailures:

    async def test_empty_order_rejected_without_transaction(self):
        service, uow, *_ = _setup()
        result = await service.create_order(7, [])
        assert result.error.code == "Order.EmptyOrder"
        assert (uow.commits, uow.rollbacks) == (0, 0)

    async def test_invalid_customer_rejected(self):
        service, uow, *_ = _setup()
        result = await service.create_order(0, [OrderItem(1, 1)])
        assert result.error.code == "Order.InvalidCustomerId"
        assert uow.commits == 0

    async def test_unknown_product_is_not_found(self):
        service, *_ = _setup()
        result = await service.create_order(7, [OrderItem(99, 1)])
        assert result.is_failure
        assert result.error.code == "Inventory.NotFound"
        assert result.error.type is ErrorType.NOT_FOUND

    async def test_insufficient_stock_leaves_everything_unchanged(self):
        service, _, inventory_repo, order_repo, audit_repo = _setup()
        result = await service.create_order(7, [OrderItem(1, 11)])

        assert result.error.code == "Inventory.InsufficientStock"
        assert result.error.metadata["available"] == 10
        assert result.error.metadata["requested"] == 11
        assert await _stock(inventory_repo, 1) == 10
        assert await order_repo.get_all() == []
        assert audit_repo.records == []

    async def test_failure_on_later_item_rolls_back_earlier_decrements(self):
        service, uow, inventory_repo, order_repo, audit_repo = _setup()
        result = await service.create_order(7, [OrderItem(1, 3), OrderItem(2, 6)])

        assert result.is_failure
        assert await _stock(inventory_repo, 1) == 10
        assert await _stock(inventory_repo, 2) == 5
        assert await order_repo.get_all() == []
        assert audit_repo.records == []
        assert (uow.commits, uow.rollbacks) == (0, 1)

    @pytest.mark.parametrize("qty", [0, -1])
    async def test_non_positive_quantity_rejected(self, qty):
        service, _, inventory_repo, _, _ = _setup()
        result = await service.create_order(7, [OrderItem(1, qty)])
        assert result.error.code == "Inventory.InvalidQuantity"
        assert await _stock(inventory_repo, 1) == 10


class TestOrderQueries:

    async def test_get_order_by_id(self):
        service, *_ = _setup()
        created = await service.create_order(7, [OrderItem(1, 1)])
        result = await service.get_order_by_id(created.value)
        assert result.value.customer_id == 7

    async def test_missing_order_is_not_found(self):
        service, *_ = _setup()
        result = await service.get_order_by_id(42)
        assert result.error.code == "Order.NotFound"
        assert result.error.status == 404

    async def test_get_all_orders(self):
        service, *_ = _setup()
        await service.create_order(7, [OrderItem(1, 1)])
        await service.create_order(8, [OrderItem(2, 1)])
        result = await service.get_all_orders()
        assert [o.customer_id for o in result.value] == [7, 8]
