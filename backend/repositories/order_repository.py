"""
Order repository.
"""

from typing import Dict, Iterable, List, Optional
from sqlalchemy.orm import Session, selectinload

from domain.entities.order import Order
from domain.interfaces import IOrderLookup
from exceptions import NotFoundError
from models import OrderModel, OrderLineItemModel
from .base_repository import BaseRepository


class OrderRepository(BaseRepository[OrderModel], IOrderLookup):
    """Repository for Order persistence."""

    def __init__(self, db: Session):
        super().__init__(db, OrderModel)

    def find_order_by_id(self, order_id: int) -> Optional[Order]:
        row = self.get_by_id(order_id)
        return row.to_entity() if row else None

    def get_order_or_raise(self, order_id: int) -> Order:
        order = self.find_order_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def orders_for_table(self, order_table_id: int) -> List[Order]:
        rows = self.db.query(self.model).options(
            selectinload(self.model.line_items)
        ).filter(
            self.model.order_table_id == order_table_id
        ).order_by(self.model.id).all()
        return [row.to_entity() for row in rows]

    def orders_for_tables(self, order_table_ids: Iterable[int]) -> Dict[int, List[Order]]:
        """
        Get orders for several tables at once.

        Args:
            order_table_ids: Order table ids

        Returns:
            Mapping of every requested table id to its orders (empty list
            when the table has none)
        """
        table_ids = list(order_table_ids)
        orders_by_table: Dict[int, List[Order]] = {table_id: [] for table_id in table_ids}
        if not table_ids:
            return orders_by_table

        rows = self.db.query(self.model).options(
            selectinload(self.model.line_items)
        ).filter(
            self.model.order_table_id.in_(table_ids)
        ).order_by(self.model.id).all()
        for row in rows:
            orders_by_table[row.order_table_id].append(row.to_entity())
        return orders_by_table

    def save(self, order: Order) -> Order:
        """
        Insert a new order with its line items, or write back the status
        of an existing one.

        Raises:
            NotFoundError: If order has an id that is not stored
        """
        if order.id is None:
            row = OrderModel(
                order_table_id=order.order_table_id,
                order_status=order.status.value,
                ordered_time=order.ordered_time,
                line_items=[
                    OrderLineItemModel(menu_id=item.menu_id, quantity=item.quantity)
                    for item in order.line_items
                ]
            )
            self.add(row)
            return row.to_entity()

        row = self.get_by_id(order.id)
        if row is None:
            raise NotFoundError("Order", order.id)
        row.order_status = order.status.value
        self.db.flush()
        return row.to_entity()

    def list_orders(self, limit: Optional[int] = None, offset: int = 0) -> List[Order]:
        return [row.to_entity() for row in self.get_all(limit=limit, offset=offset)]
