"""
OrderTable Entity

A physical dining table. The table stores the id of the group it belongs
to, never a live reference; the TableGroup aggregate owns membership.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from constants import CountLimits, TableStateReason
from exceptions import InvalidTableStateError
from .order import Order
from ..value_objects.counts import require_count


@dataclass(frozen=True)
class OrderTable:
    """
    Immutable snapshot of a table's state.

    State changes return a new OrderTable; the persistence layer writes the
    new snapshot back.
    """

    id: Optional[int]
    number_of_guests: int
    empty: bool
    table_group_id: Optional[int] = None

    def __post_init__(self):
        require_count("number_of_guests", self.number_of_guests, CountLimits.MAX_GUESTS)

    @property
    def is_grouped(self) -> bool:
        return self.table_group_id is not None

    def grouped_into(self, table_group_id: int) -> "OrderTable":
        """Link this table to a group; a grouped table is seated."""
        return replace(self, table_group_id=table_group_id, empty=False)

    def released(self) -> "OrderTable":
        """
        Detach this table from its group.

        The table stays marked not-empty and keeps its guest count; only the
        group link is cleared.
        """
        return replace(self, table_group_id=None, empty=False)

    def change_empty(self, empty: bool, orders: Iterable[Order]) -> "OrderTable":
        """
        Mark the table empty or seated.

        Args:
            empty: New empty flag
            orders: Orders placed against this table

        Raises:
            InvalidTableStateError: If the table is grouped or has an
                order that is not completed
        """
        if self.is_grouped:
            raise InvalidTableStateError(TableStateReason.GROUPED_TABLE, self.id)
        if any(not order.is_completed for order in orders):
            raise InvalidTableStateError(TableStateReason.ORDERS_IN_PROGRESS, self.id)
        return replace(self, empty=empty)

    def change_number_of_guests(self, number_of_guests: int) -> "OrderTable":
        """
        Update the guest count of a seated table.

        Raises:
            ValidationError: If number_of_guests is negative or too large
            InvalidTableStateError: If the table is empty
        """
        require_count("number_of_guests", number_of_guests, CountLimits.MAX_GUESTS)
        if self.empty:
            raise InvalidTableStateError(TableStateReason.EMPTY_TABLE, self.id)
        return replace(self, number_of_guests=number_of_guests)
