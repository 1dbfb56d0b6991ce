from datetime import datetime

import pytest

from domain.aggregates.table_group import GROUPING_RULES, TableGroup
from domain.entities.order import Order
from domain.entities.order_table import OrderTable
from domain.value_objects.order_status import OrderStatus
from exceptions import InvalidGroupingError, InvalidUngroupingError
from utils.clock import fixed_clock

NOON = datetime(2024, 3, 1, 12, 0, 0)


def _table(table_id, empty=True, table_group_id=None, guests=0):
    return OrderTable(id=table_id, number_of_guests=guests, empty=empty, table_group_id=table_group_id)


def _order(table_id, status):
    return Order(id=None, order_table_id=table_id, status=status, ordered_time=NOON)


def test_form_with_single_table_is_too_few():
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([_table(1)])
    assert exc.value.reason == "too few tables"


def test_form_with_no_tables_is_too_few():
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of(None)
    assert exc.value.reason == "too few tables"


def test_form_with_duplicate_table_is_rejected():
    t1 = _table(1)
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([t1, t1])
    assert exc.value.reason == "duplicate table"


def test_form_with_already_grouped_table_is_rejected():
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([_table(1, table_group_id=9), _table(2)])
    assert exc.value.reason == "already grouped"


def test_form_with_non_empty_table_is_rejected():
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([_table(1), _table(2, empty=False)])
    assert exc.value.reason == "non-empty table"


def test_first_violated_rule_wins():
    # Duplicate, grouped and seated all at once: duplicate is checked first
    t1 = _table(1, empty=False, table_group_id=3)
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([t1, t1])
    assert exc.value.reason == "duplicate table"

    # Grouped and seated: grouped is checked before emptiness
    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of([_table(1, empty=False, table_group_id=3), _table(2)])
    assert exc.value.reason == "already grouped"


def test_grouping_rules_are_ordered():
    assert [reason for _, reason in GROUPING_RULES] == [
        "too few tables",
        "duplicate table",
        "already grouped",
        "non-empty table",
    ]


def test_form_with_two_free_tables_succeeds():
    group = TableGroup.of([_table(1), _table(2)], clock=fixed_clock(NOON))

    assert group.id is None
    assert group.table_ids == (1, 2)
    assert group.created_at == NOON


def test_form_keeps_request_order():
    group = TableGroup.of([_table(5), _table(2), _table(7)])
    assert group.table_ids == (5, 2, 7)
    assert group.created_at is not None


def test_group_tables_links_and_seats_members():
    tables = [_table(1, guests=2), _table(2)]
    group = TableGroup(id=10, created_at=NOON, table_ids=(1, 2))

    linked = group.group_tables(tables)

    assert [t.table_group_id for t in linked] == [10, 10]
    assert [t.empty for t in linked] == [False, False]
    assert linked[0].number_of_guests == 2
    # Inputs are untouched
    assert tables[0].table_group_id is None


def test_group_tables_requires_saved_group():
    group = TableGroup.of([_table(1), _table(2)])
    with pytest.raises(ValueError):
        group.group_tables([_table(1), _table(2)])


def test_forming_again_with_grouped_tables_fails():
    tables = [_table(1), _table(2)]
    group = TableGroup(id=1, created_at=NOON, table_ids=(1, 2))
    linked = group.group_tables(tables)

    with pytest.raises(InvalidGroupingError) as exc:
        TableGroup.of(linked)
    assert exc.value.reason == "already grouped"


def test_ungroup_with_order_in_progress_is_rejected():
    group = TableGroup(id=1, created_at=NOON, table_ids=(1, 2))
    tables = [_table(1, empty=False, table_group_id=1), _table(2, empty=False, table_group_id=1)]
    orders_by_table = {
        1: [_order(1, OrderStatus.MEAL)],
        2: [_order(2, OrderStatus.COMPLETION)],
    }

    with pytest.raises(InvalidUngroupingError) as exc:
        group.ungroup(tables, orders_by_table)

    assert exc.value.reason == "orders in progress"
    assert group.table_ids == (1, 2)
    assert all(t.table_group_id == 1 for t in tables)


@pytest.mark.parametrize("status", [OrderStatus.COOKING, OrderStatus.MEAL])
def test_ungroup_rejects_every_non_terminal_status(status):
    group = TableGroup(id=1, created_at=NOON, table_ids=(1, 2))
    with pytest.raises(InvalidUngroupingError):
        group.ungroup([_table(1, False, 1), _table(2, False, 1)], {2: [_order(2, status)]})


def test_ungroup_with_completed_orders_releases_tables():
    group = TableGroup(id=1, created_at=NOON, table_ids=(1, 2))
    tables = [
        _table(1, empty=False, table_group_id=1, guests=3),
        _table(2, empty=False, table_group_id=1, guests=4),
    ]
    orders_by_table = {
        1: [_order(1, OrderStatus.COMPLETION)],
        2: [_order(2, OrderStatus.COMPLETION)],
    }

    released = group.ungroup(tables, orders_by_table)

    assert [t.id for t in released] == [1, 2]
    assert all(t.table_group_id is None for t in released)
    # Released tables stay seated and keep their guests
    assert all(t.empty is False for t in released)
    assert [t.number_of_guests for t in released] == [3, 4]


def test_ungroup_with_no_orders_succeeds():
    group = TableGroup(id=1, created_at=NOON, table_ids=(1, 2))
    released = group.ungroup([_table(1, False, 1), _table(2, False, 1)], {1: [], 2: []})
    assert all(not t.is_grouped for t in released)
