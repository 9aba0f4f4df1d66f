"""Conversion between domain entities and persistence records.

These functions are the only place that restores entities from stored
state.  Restoration goes through the plain constructors, skipping the
``create`` validation: the data was validated when it was written.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from stockorders.domain.model.audit_log import AuditLogRecord
from stockorders.domain.model.inventory import Inventory
from stockorders.domain.model.order import Order, OrderDetail
from stockorders.domain.model.value_objects import OrderId, ProductId
from stockorders.infrastructure.persistence.records import (
    AuditLogRow,
    InventoryRecord,
    OrderDetailRecord,
    OrderRecord,
)

# --- Inventory ----------------------------------------------------------------


def inventory_to_record(inventory: Inventory) -> InventoryRecord:
    return InventoryRecord(
        ProductId=None if inventory.product_id is None else inventory.product_id.value,
        ProductName=inventory.product_name,
        Stock=inventory.stock,
        UnitPrice=str(inventory.unit_price),
    )


def inventory_to_domain(record: InventoryRecord) -> Inventory:
    return Inventory(
        product_id=ProductId(record.ProductId),
        product_name=record.ProductName,
        stock=record.Stock,
        unit_price=Decimal(record.UnitPrice),
    )


# --- Orders -------------------------------------------------------------------


def order_to_records(order: Order) -> tuple[OrderRecord, list[OrderDetailRecord]]:
    """Split an aggregate into its parent row and detail rows.

    Detail rows carry ``OrderId=None`` until the parent insert returns an id.
    """
    order_id = None if order.id is None else order.id.value
    order_record = OrderRecord(
        Id=order_id,
        CustomerId=order.customer_id,
        CreatedAt=order.created_at.isoformat(timespec="microseconds"),
    )
    detail_records = [
        OrderDetailRecord(
            Id=None,
            OrderId=order_id,
            ProductId=detail.product_id.value,
            Quantity=detail.quantity,
            UnitPrice=str(detail.unit_price),
        )
        for detail in order.details
    ]
    return order_record, detail_records


def order_to_domain(record: OrderRecord, details: Iterable[OrderDetailRecord]) -> Order:
    return Order(
        id=OrderId(record.Id),
        customer_id=record.CustomerId,
        created_at=datetime.fromisoformat(record.CreatedAt),
        _details=[
            OrderDetail(
                product_id=ProductId(d.ProductId),
                quantity=d.Quantity,
                unit_price=Decimal(d.UnitPrice),
            )
            for d in details
        ],
    )


# --- Audit log ----------------------------------------------------------------


def audit_log_to_row(record: AuditLogRecord) -> AuditLogRow:
    return AuditLogRow(
        Id=record.id,
        Action=record.action,
        Details=record.details,
        CreatedAt=record.created_at.isoformat(timespec="microseconds"),
    )


def audit_log_to_domain(row: AuditLogRow) -> AuditLogRecord:
    return AuditLogRecord(
        id=row.Id,
        action=row.Action,
        details=row.Details,
        created_at=datetime.fromisoformat(row.CreatedAt),
    )
