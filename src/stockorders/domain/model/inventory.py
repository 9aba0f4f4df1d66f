"""Inventory aggregate -- stock level and current price for one product.

Invariant: ``stock`` is never negative.  Every mutation validates first
and changes state only when it succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from stockorders.domain import errors
from stockorders.domain.model.value_objects import ProductId
from stockorders.domain.result import OK, EmptySuccess, Failure, Result, Success


@dataclass
class Inventory:
    """Aggregate root for a product's stock.

    Use ``Inventory.create()`` for new products.  The ``__init__`` is kept
    plain so the persistence mappers can restore stored rows without
    re-validating them.
    """

    product_id: ProductId | None
    product_name: str
    stock: int
    unit_price: Decimal

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(product_name: str, stock: int, unit_price: Decimal) -> Result[Inventory]:
        invalid = _validate(product_name, stock, unit_price)
        if invalid is not None:
            return invalid
        return Success(
            Inventory(
                product_id=None,
                product_name=product_name.strip(),
                stock=stock,
                unit_price=unit_price,
            )
        )

    # --- Mutations ------------------------------------------------------------

    def decrease(self, quantity: int) -> EmptySuccess | Failure:
        """Take *quantity* units out of stock."""
        if quantity < 1:
            return Failure(errors.INVALID_QUANTITY)
        if quantity > self.stock:
            return Failure(
                errors.insufficient_stock(self.product_id, self.stock, quantity)
            )
        self.stock -= quantity
        return OK

    def increase(self, quantity: int) -> EmptySuccess | Failure:
        if quantity < 1:
            return Failure(errors.INVALID_QUANTITY)
        self.stock += quantity
        return OK

    def update(self, product_name: str, stock: int, unit_price: Decimal) -> EmptySuccess | Failure:
        """Replace name, stock and price in one step.

        Price changes never touch existing orders: order details keep the
        price they were created with.
        """
        invalid = _validate(product_name, stock, unit_price)
        if invalid is not None:
            return invalid
        self.product_name = product_name.strip()
        self.stock = stock
        self.unit_price = unit_price
        return OK

    # --- Persistence hook -----------------------------------------------------

    def _assign_id(self, product_id: ProductId) -> None:
        """Called by the repository once the row has an identity."""
        self.product_id = product_id


def _validate(product_name: str, stock: int, unit_price: Decimal) -> Failure | None:
    if not product_name or not product_name.strip():
        return Failure(errors.INVALID_PRODUCT_NAME)
    if stock < 0:
        return Failure(errors.NEGATIVE_STOCK)
    if unit_price <= 0:
        return Failure(errors.INVALID_UNIT_PRICE)
    return None
