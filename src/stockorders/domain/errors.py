"""Catalogue of the business errors the domain and services return."""

from __future__ import annotations

from stockorders.domain.result import Error

# --- Inventory ----------------------------------------------------------------

INVALID_PRODUCT_NAME = Error.business_rule(
    "Inventory.InvalidProductName", "Product name cannot be empty."
)
NEGATIVE_STOCK = Error.business_rule(
    "Inventory.NegativeStock", "Stock cannot be negative."
)
INVALID_UNIT_PRICE = Error.business_rule(
    "Inventory.InvalidUnitPrice", "Unit price must be greater than 0."
)
INVALID_QUANTITY = Error.business_rule(
    "Inventory.InvalidQuantity", "Quantity must be at least 1."
)


def insufficient_stock(product_id: object, available: int, requested: int) -> Error:
    return Error.business_rule(
        "Inventory.InsufficientStock",
        f"Insufficient stock. Available: {available}, Requested: {requested}",
        product_id=None if product_id is None else int(product_id),
        available=available,
        requested=requested,
    )


def inventory_not_found(product_id: int) -> Error:
    return Error.not_found(
        "Inventory.NotFound", f"Inventory not found for productId: {product_id}"
    )


# --- Orders -------------------------------------------------------------------

INVALID_CUSTOMER_ID = Error.business_rule(
    "Order.InvalidCustomerId", "Customer ID must be greater than 0."
)
EMPTY_ORDER = Error.business_rule(
    "Order.EmptyOrder", "Order must have at least one item."
)
INVALID_DETAIL_QUANTITY = Error.business_rule(
    "OrderDetail.InvalidQuantity", "Quantity must be at least 1."
)
INVALID_DETAIL_UNIT_PRICE = Error.business_rule(
    "OrderDetail.InvalidUnitPrice", "Unit price must be greater than 0."
)


def order_not_found(order_id: int) -> Error:
    return Error.not_found("Order.NotFound", f"Order not found for orderId: {order_id}")
