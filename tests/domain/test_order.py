"""Unit tests for the Order aggregate and its business rules."""

from datetime import timezone
from decimal import Decimal

import pytest

from stockorders.domain.model.order import Order, OrderDetail
from stockorders.domain.model.value_objects import ProductId


def _new_order(customer_id: int = 7) -> Order:
    return Order.create(customer_id).value


class TestOrderCreation:

    def test_happy_path(self):
        result = Order.create(7)
        assert result.is_success
        order = result.value
        assert order.customer_id == 7
        assert order.id is None  # assigned by repository
        assert order.details == ()
        assert order.total_amount == Decimal("0")

    def test_created_at_is_utc(self):
        assert _new_order().created_at.tzinfo == timezone.utc

    @pytest.mark.parametrize("customer_id", [0, -1])
    def test_non_positive_customer_rejected(self, customer_id):
        result = Order.create(customer_id)
        assert result.is_failure
        assert result.error.code == "Order.InvalidCustomerId"


class TestOrderDetails:

    def test_total_is_sum_of_subtotals(self):
        order = _new_order()
        order.add_detail(ProductId(1), 3, Decimal("15.00"))
        order.add_detail(ProductId(2), 5, Decimal("25.00"))
        assert len(order.details) == 2
        assert order.total_amount == Decimal("170.00")

    def test_subtotal_is_price_times_quantity(self):
        detail = OrderDetail(ProductId(1), 4, Decimal("2.50"))
        assert detail.subtotal == Decimal("10.00")

    @pytest.mark.parametrize(
        "qty, price, code",
        [
            (0, "1.00", "OrderDetail.InvalidQuantity"),
            (-2, "1.00", "OrderDetail.InvalidQuantity"),
            (1, "0", "OrderDetail.InvalidUnitPrice"),
            (1, "-1", "OrderDetail.InvalidUnitPrice"),
        ],
    )
    def test_invalid_detail_rejected(self, qty, price, code):
        order = _new_order()
        result = order.add_detail(ProductId(1), qty, Decimal(price))
        assert result.is_failure
        assert result.error.code == code
        assert order.details == ()

    def test_details_view_is_read_only(self):
        order = _new_order()
        order.add_detail(ProductId(1), 1, Decimal("1"))
        with pytest.raises(AttributeError):
            order.details.append(OrderDetail(ProductId(2), 1, Decimal("1")))  # type: ignore[attr-defined]
        assert len(order.details) == 1
