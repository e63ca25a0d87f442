from datetime import datetime
from decimal import Decimal

from orders_api.models import Order, OrderItem, OrderStatus, money


def _item(product_id, quantity, unit_price):
    return OrderItem(product_id=product_id, quantity=quantity, unit_price=Decimal(unit_price))


class TestOrderTotal:

    def test_total_is_sum_of_line_totals(self):
        order = Order(customer_id="c-1", status=OrderStatus.NEW)
        order.replace_items([_item("a", 2, "10.50"), _item("b", 1, "5.00")])
        assert order.total_amount == Decimal("26.00")

    def test_total_has_no_float_drift(self):
        order = Order(customer_id="c-1", status=OrderStatus.NEW)
        order.replace_items([_item("a", 3, "0.10"), _item("b", 1, "0.20")])
        assert order.total_amount == Decimal("0.50")
        assert str(order.total_amount) == "0.50"

    def test_replace_items_drops_previous_items(self):
        order = Order(customer_id="c-1", status=OrderStatus.NEW)
        order.replace_items([_item("a", 1, "1.00"), _item("b", 1, "2.00"), _item("c", 1, "3.00")])
        order.replace_items([_item("d", 4, "2.50")])
        assert [item.product_id for item in order.items] == ["d"]
        assert order.total_amount == Decimal("10.00")

    def test_items_reference_their_order(self):
        order = Order(customer_id="c-1", status=OrderStatus.NEW)
        item = _item("a", 1, "1.00")
        order.replace_items([item])
        assert item.order is order

    def test_money_rounds_half_up_to_cents(self):
        assert money(Decimal("1.005")) == Decimal("1.01")
        assert money(Decimal("2")) == Decimal("2.00")


class TestOrderTimestamps:

    def test_first_touch_sets_both_timestamps(self):
        order = Order(customer_id="c-1")
        now = datetime(2024, 5, 1, 10, 0, 0)
        order.touch(now)
        assert order.created_at == now
        assert order.updated_at == now

    def test_later_touch_only_moves_updated_at(self):
        order = Order(customer_id="c-1")
        order.touch(datetime(2024, 5, 1, 10, 0, 0))
        order.touch(datetime(2024, 5, 1, 11, 0, 0))
        assert order.created_at == datetime(2024, 5, 1, 10, 0, 0)
        assert order.updated_at == datetime(2024, 5, 1, 11, 0, 0)

    def test_updated_at_moves_forward_when_clock_stands_still(self):
        order = Order(customer_id="c-1")
        now = datetime(2024, 5, 1, 10, 0, 0)
        order.touch(now)
        order.touch(now)
        assert order.updated_at > now
        assert order.created_at == now
