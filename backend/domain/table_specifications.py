"""
Table Specifications

Concrete specifications over a candidate set of order tables and over the
orders placed against them.
"""

from typing import Iterable, Sequence

from .entities.order import Order
from .entities.order_table import OrderTable
from .specifications import Specification


class HasAtLeastTablesSpec(Specification[Sequence[OrderTable]]):
    """Specification for a table set of a minimum size."""

    def __init__(self, minimum: int):
        """
        Initialize specification.

        Args:
            minimum: Smallest acceptable number of tables
        """
        self.minimum = minimum

    def is_satisfied_by(self, tables: Sequence[OrderTable]) -> bool:
        return tables is not None and len(tables) >= self.minimum


class DistinctTablesSpec(Specification[Sequence[OrderTable]]):
    """Specification for a table set with no repeated table id."""

    def is_satisfied_by(self, tables: Sequence[OrderTable]) -> bool:
        table_ids = [table.id for table in tables]
        return len(set(table_ids)) == len(table_ids)


class AnyTableGroupedSpec(Specification[Sequence[OrderTable]]):
    """Specification for a table set where some table already has a group."""

    def is_satisfied_by(self, tables: Sequence[OrderTable]) -> bool:
        return any(table.is_grouped for table in tables)


class AnyTableSeatedSpec(Specification[Sequence[OrderTable]]):
    """Specification for a table set where some table is not empty."""

    def is_satisfied_by(self, tables: Sequence[OrderTable]) -> bool:
        return any(not table.empty for table in tables)


class OrdersCompletedSpec(Specification[Iterable[Order]]):
    """Specification for an order list where every order is completed."""

    def is_satisfied_by(self, orders: Iterable[Order]) -> bool:
        return all(order.is_completed for order in orders)
