"""
Order table repository.
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from domain.entities.order_table import OrderTable
from domain.interfaces import IOrderTableLookup
from exceptions import NotFoundError
from models import OrderTableModel
from .base_repository import BaseRepository


class OrderTableRepository(BaseRepository[OrderTableModel], IOrderTableLookup):
    """Repository for OrderTable persistence."""

    def __init__(self, db: Session):
        super().__init__(db, OrderTableModel)

    def find_order_table_by_id(self, order_table_id: int) -> Optional[OrderTable]:
        row = self.get_by_id(order_table_id)
        return row.to_entity() if row else None

    def get_order_table_or_raise(self, order_table_id: int) -> OrderTable:
        order_table = self.find_order_table_by_id(order_table_id)
        if order_table is None:
            raise NotFoundError("OrderTable", order_table_id)
        return order_table

    def find_by_table_group_id(self, table_group_id: int) -> List[OrderTable]:
        """
        Get the member tables of a group.

        Args:
            table_group_id: Table group id

        Returns:
            Member tables ordered by id
        """
        rows = self.db.query(self.model).filter(
            self.model.table_group_id == table_group_id
        ).order_by(self.model.id).all()
        return [row.to_entity() for row in rows]

    def save(self, order_table: OrderTable) -> OrderTable:
        """
        Insert a new table or write back the state of an existing one.

        Raises:
            NotFoundError: If order_table has an id that is not stored
        """
        if order_table.id is None:
            row = OrderTableModel()
            row.apply(order_table)
            self.add(row)
            return row.to_entity()

        row = self.get_by_id(order_table.id)
        if row is None:
            raise NotFoundError("OrderTable", order_table.id)
        row.apply(order_table)
        self.db.flush()
        return row.to_entity()

    def save_all(self, order_tables: Iterable[OrderTable]) -> List[OrderTable]:
        return [self.save(order_table) for order_table in order_tables]

    def list_order_tables(self, limit: Optional[int] = None, offset: int = 0) -> List[OrderTable]:
        return [row.to_entity() for row in self.get_all(limit=limit, offset=offset)]
