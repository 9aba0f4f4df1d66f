"""Unit tests for the Inventory aggregate."""

from decimal import Decimal

import pytest

from stockorders.domain.model.inventory import Inventory
from stockorders.domain.model.value_objects import ProductId


def _make(stock: int = 10, price: str = "5.00") -> Inventory:
    return Inventory(
        product_id=ProductId(1),
        product_name="Widget",
        stock=stock,
        unit_price=Decimal(price),
    )


class TestInventoryCreate:

    def test_happy_path(self):
        result = Inventory.create("Widget", 10, Decimal("5.00"))
        assert result.is_success
        inv = result.value
        assert inv.product_id is None  # assigned by repository
        assert inv.product_name == "Widget"
        assert inv.stock == 10
        assert inv.unit_price == Decimal("5.00")

    def test_zero_stock_accepted(self):
        assert Inventory.create("Widget", 0, Decimal("1")).is_success

    def test_name_is_trimmed(self):
        assert Inventory.create("  Widget ", 1, Decimal("1")).value.product_name == "Widget"

    @pytest.mark.parametrize(
        "name, stock, price, code",
        [
            ("", 10, "5.00", "Inventory.InvalidProductName"),
            ("   ", 10, "5.00", "Inventory.InvalidProductName"),
            ("Widget", -1, "5.00", "Inventory.NegativeStock"),
            ("Widget", 10, "0", "Inventory.InvalidUnitPrice"),
            ("Widget", 10, "-2.50", "Inventory.InvalidUnitPrice"),
        ],
    )
    def test_each_invalid_field_has_its_own_code(self, name, stock, price, code):
        result = Inventory.create(name, stock, Decimal(price))
        assert result.is_failure
        assert result.error.code == code


class TestInventoryDecrease:

    def test_decrease_reduces_stock(self):
        inv = _make(stock=10)
        assert inv.decrease(3).is_success
        assert inv.stock == 7

    def test_decrease_all_stock(self):
        inv = _make(stock=10)
        assert inv.decrease(10).is_success
        assert inv.stock == 0

    @pytest.mark.parametrize("qty", [0, -1, -100])
    def test_non_positive_quantity_rejected(self, qty):
        inv = _make(stock=10)
        result = inv.decrease(qty)
        assert result.is_failure
        assert result.error.code == "Inventory.InvalidQuantity"
        assert inv.stock == 10

    def test_more_than_stock_rejected_without_partial_decrement(self):
        inv = _make(stock=10)
        result = inv.decrease(11)
        assert result.is_failure
        assert result.error.code == "Inventory.InsufficientStock"
        assert result.error.metadata == {"product_id": 1, "available": 10, "requested": 11}
        assert "Available: 10, Requested: 11" in result.error.description
        assert inv.stock == 10


class TestInventoryIncrease:

    def test_increase_adds_stock(self):
        inv = _make(stock=10)
        assert inv.increase(5).is_success
        assert inv.stock == 15

    @pytest.mark.parametrize("qty", [0, -3])
    def test_non_positive_quantity_rejected(self, qty):
        inv = _make(stock=10)
        result = inv.increase(qty)
        assert result.is_failure
        assert result.error.code == "Inventory.InvalidQuantity"
        assert inv.stock == 10


class TestInventoryUpdate:

    def test_update_replaces_fields(self):
        inv = _make()
        assert inv.update("Gadget", 3, Decimal("9.99")).is_success
        assert (inv.product_name, inv.stock, inv.unit_price) == ("Gadget", 3, Decimal("9.99"))

    def test_invalid_update_changes_nothing(self):
        inv = _make(stock=10, price="5.00")
        result = inv.update("Gadget", -1, Decimal("9.99"))
        assert result.error.code == "Inventory.NegativeStock"
        assert (inv.product_name, inv.stock, inv.unit_price) == ("Widget", 10, Decimal("5.00"))
