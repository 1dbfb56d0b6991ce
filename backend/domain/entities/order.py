"""
Order Entity

Orders are placed against an order table; their status decides whether
the table may be emptied or its group dissolved.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence, Tuple

from constants import OrderReason
from exceptions import InvalidOrderError
from utils.clock import Clock, utc_now
from ..value_objects.counts import require_count
from ..value_objects.order_status import OrderStatus


@dataclass(frozen=True)
class OrderLineItem:
    """One (menu, quantity) entry of an order."""

    id: Optional[int]
    menu_id: int
    quantity: int

    def __post_init__(self):
        require_count("quantity", self.quantity)


@dataclass(frozen=True)
class Order:
    id: Optional[int]
    order_table_id: int
    status: OrderStatus
    ordered_time: datetime
    line_items: Tuple[OrderLineItem, ...] = ()

    @property
    def is_completed(self) -> bool:
        return self.status.is_terminal()

    @classmethod
    def place(
        cls,
        order_table,
        line_items: Sequence[OrderLineItem],
        clock: Clock = utc_now
    ) -> "Order":
        """
        Place a new order against a table.

        Args:
            order_table: OrderTable the order is for
            line_items: Ordered menus and quantities
            clock: Source of the ordered time

        Returns:
            Unsaved order in COOKING status

        Raises:
            InvalidOrderError: If there are no line items, a menu is listed
                twice, or the table is empty
        """
        if not line_items:
            raise InvalidOrderError(OrderReason.NO_LINE_ITEMS)

        menu_ids = [item.menu_id for item in line_items]
        if len(set(menu_ids)) != len(menu_ids):
            raise InvalidOrderError(OrderReason.DUPLICATE_MENU)

        if order_table.empty:
            raise InvalidOrderError(OrderReason.EMPTY_TABLE)

        return cls(
            id=None,
            order_table_id=order_table.id,
            status=OrderStatus.COOKING,
            ordered_time=clock(),
            line_items=tuple(line_items)
        )

    def change_status(self, status: OrderStatus) -> "Order":
        """
        Move the order to a new status.

        Raises:
            InvalidOrderError: If the order is already completed
        """
        if not self.status.can_transition_to(status):
            raise InvalidOrderError(OrderReason.ALREADY_COMPLETED, self.id)
        return replace(self, status=status)
