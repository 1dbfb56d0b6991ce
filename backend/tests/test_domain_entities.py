from datetime import datetime
from decimal import Decimal

import pytest

from constants import CountLimits
from domain.aggregates.menu import MenuLine
from domain.entities.order import Order, OrderLineItem
from domain.entities.order_table import OrderTable
from domain.entities.product import Product
from domain.value_objects.order_status import OrderStatus
from domain.value_objects.price import Price
from exceptions import InvalidOrderError, InvalidTableStateError, ValidationError
from utils.clock import fixed_clock

NOON = datetime(2024, 3, 1, 12, 0, 0)


def _order(status, table_id=1):
    return Order(id=7, order_table_id=table_id, status=status, ordered_time=NOON)


def test_price_accepts_numbers_and_strings():
    assert Price.of(1000).amount == Decimal("1000")
    assert Price.of("12.50").amount == Decimal("12.50")
    assert Price.of(Decimal("3")) == Price(Decimal("3"))


@pytest.mark.parametrize("value", [None, -1, "abc", "NaN", "Infinity"])
def test_price_rejects_invalid_values(value):
    with pytest.raises(ValidationError):
        Price.of(value)


def test_product_requires_name():
    with pytest.raises(ValidationError):
        Product.create("  ", 1000)


def test_order_status_parsing():
    assert OrderStatus.from_string("meal") is OrderStatus.MEAL
    with pytest.raises(ValueError):
        OrderStatus.from_string("SERVED")


def test_only_completion_is_terminal():
    assert OrderStatus.COMPLETION.is_terminal()
    assert not OrderStatus.COOKING.is_terminal()
    assert not OrderStatus.MEAL.is_terminal()


def test_order_table_rejects_negative_guests():
    with pytest.raises(ValidationError):
        OrderTable(id=None, number_of_guests=-1, empty=True)


def test_change_empty_rejected_for_grouped_table():
    table = OrderTable(id=1, number_of_guests=0, empty=False, table_group_id=3)
    with pytest.raises(InvalidTableStateError):
        table.change_empty(True, [])


def test_change_empty_rejected_while_orders_in_progress():
    table = OrderTable(id=1, number_of_guests=2, empty=False)
    with pytest.raises(InvalidTableStateError):
        table.change_empty(True, [_order(OrderStatus.COOKING)])


def test_change_empty_with_completed_orders():
    table = OrderTable(id=1, number_of_guests=2, empty=False)
    assert table.change_empty(True, [_order(OrderStatus.COMPLETION)]).empty is True


def test_change_guests_on_seated_table():
    table = OrderTable(id=1, number_of_guests=2, empty=False)
    assert table.change_number_of_guests(5).number_of_guests == 5


def test_change_guests_rejected_on_empty_table():
    table = OrderTable(id=1, number_of_guests=0, empty=True)
    with pytest.raises(InvalidTableStateError):
        table.change_number_of_guests(2)


def test_change_guests_rejects_negative_count():
    table = OrderTable(id=1, number_of_guests=2, empty=False)
    with pytest.raises(ValidationError):
        table.change_number_of_guests(-1)


def test_place_order_starts_cooking():
    table = OrderTable(id=4, number_of_guests=2, empty=False)
    order = Order.place(table, [OrderLineItem(None, menu_id=1, quantity=2)], clock=fixed_clock(NOON))

    assert order.status is OrderStatus.COOKING
    assert order.order_table_id == 4
    assert order.ordered_time == NOON
    assert len(order.line_items) == 1


def test_place_order_requires_line_items():
    table = OrderTable(id=4, number_of_guests=2, empty=False)
    with pytest.raises(InvalidOrderError):
        Order.place(table, [])


def test_place_order_rejects_repeated_menu():
    table = OrderTable(id=4, number_of_guests=2, empty=False)
    items = [OrderLineItem(None, 1, 1), OrderLineItem(None, 1, 2)]
    with pytest.raises(InvalidOrderError):
        Order.place(table, items)


def test_place_order_rejects_empty_table():
    table = OrderTable(id=4, number_of_guests=0, empty=True)
    with pytest.raises(InvalidOrderError):
        Order.place(table, [OrderLineItem(None, 1, 1)])


def test_completed_order_cannot_change_status():
    with pytest.raises(InvalidOrderError):
        _order(OrderStatus.COMPLETION).change_status(OrderStatus.MEAL)


def test_order_moves_through_statuses():
    order = _order(OrderStatus.COOKING).change_status(OrderStatus.MEAL)
    assert order.change_status(OrderStatus.COMPLETION).is_completed



@pytest.mark.parametrize("quantity", [-1, CountLimits.MAX_QUANTITY + 1])
def test_line_quantities_must_fit_a_bigint(quantity):
    product = Product(id=1, name="Fried chicken", price=Price.of(16000))
    with pytest.raises(ValidationError):
        MenuLine(id=None, product=product, quantity=quantity)
    with pytest.raises(ValidationError):
        OrderLineItem(id=None, menu_id=1, quantity=quantity)


def test_largest_line_quantity_is_accepted():
    assert OrderLineItem(id=None, menu_id=1, quantity=CountLimits.MAX_QUANTITY).quantity == 2 ** 63 - 1


def test_guest_count_must_fit_an_integer_column():
    with pytest.raises(ValidationError):
        OrderTable(id=None, number_of_guests=CountLimits.MAX_GUESTS + 1, empty=False)

    table = OrderTable(id=1, number_of_guests=2, empty=False)
    with pytest.raises(ValidationError):
        table.change_number_of_guests(CountLimits.MAX_GUESTS + 1)
