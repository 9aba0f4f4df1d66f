"""Order aggregate -- the core of the domain.

The Order is an aggregate root that owns its details.  Details are only
ever created through ``Order.add_detail`` and cannot be changed or
removed afterwards.  The total is always derived, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from stockorders.domain import errors
from stockorders.domain.model.value_objects import OrderId, ProductId
from stockorders.domain.result import OK, EmptySuccess, Failure, Result, Success


@dataclass(frozen=True)
class OrderDetail:
    """One product line of an order.

    ``unit_price`` is a snapshot taken when the order was placed and is
    independent of later inventory price changes.
    """

    product_id: ProductId
    quantity: int
    unit_price: Decimal  # locked at order-creation time

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__`` is
    kept plain so the persistence mappers can restore stored
    orders without re-validating.
    """

    id: OrderId | None
    customer_id: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _details: list[OrderDetail] = field(default_factory=list, repr=False)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_id: int) -> Result[Order]:
        if customer_id <= 0:
            return Failure(errors.INVALID_CUSTOMER_ID)
        return Success(Order(id=None, customer_id=customer_id))

    # --- Behaviour ------------------------------------------------------------

    def add_detail(
        self, product_id: ProductId, quantity: int, unit_price: Decimal
    ) -> EmptySuccess | Failure:
        if quantity < 1:
            return Failure(errors.INVALID_DETAIL_QUANTITY)
        if unit_price <= 0:
            return Failure(errors.INVALID_DETAIL_UNIT_PRICE)
        self._details.append(OrderDetail(product_id, quantity, unit_price))
        return OK

    # --- Computed properties --------------------------------------------------

    @property
    def details(self) -> tuple[OrderDetail, ...]:
        return tuple(self._details)

    @property
    def total_amount(self) -> Decimal:
        return sum((d.subtotal for d in self._details), Decimal("0"))

    # --- Persistence hook -----------------------------------------------------

    def _assign_id(self, order_id: OrderId) -> None:
        """Called by the repository once the parent row has an identity."""
        self.id = order_id
