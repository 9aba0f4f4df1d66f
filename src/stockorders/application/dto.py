"""Data Transfer Objects -- plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from stockorders.domain.model.audit_log import AuditLogRecord
from stockorders.domain.model.inventory import Inventory
from stockorders.domain.model.order import Order


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


@dataclass(frozen=True)
class OrderItem:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDetailDTO:
    product_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    customer_id: int
    details: list[OrderDetailDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class InventoryDTO:
    product_id: int
    product_name: str
    stock: int
    unit_price: str


@dataclass(frozen=True)
class AuditLogDTO:
    id: int
    action: str
    details: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id.value,  # type: ignore[union-attr]
        customer_id=order.customer_id,
        details=[
            OrderDetailDTO(
                product_id=d.product_id.value,
                quantity=d.quantity,
                unit_price=format_money(d.unit_price),
                subtotal=format_money(d.subtotal),
            )
            for d in order.details
        ],
        total=format_money(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def inventory_to_dto(inventory: Inventory) -> InventoryDTO:
    return InventoryDTO(
        product_id=inventory.product_id.value,  # type: ignore[union-attr]
        product_name=inventory.product_name,
        stock=inventory.stock,
        unit_price=format_money(inventory.unit_price),
    )


def audit_log_to_dto(record: AuditLogRecord) -> AuditLogDTO:
    return AuditLogDTO(
        id=record.id,  # type: ignore[arg-type]
        action=record.action,
        details=record.details,
        created_at=record.created_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
    )
