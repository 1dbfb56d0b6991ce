"""
Order Table Service

Registers tables and applies empty-flag and guest-count changes.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.entities.order_table import OrderTable
from dtos.request.table_request import (
    OrderTableCreateRequest,
    OrderTableEmptyRequest,
    OrderTableGuestsRequest,
)
from repositories.order_repository import OrderRepository
from repositories.order_table_repository import OrderTableRepository
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class OrderTableService:
    """Service for order table state."""

    def __init__(self, db: Session):
        self.db = db
        self.table_repo = OrderTableRepository(db)
        self.order_repo = OrderRepository(db)

    @log_operation("create_order_table")
    def create_order_table(self, request: OrderTableCreateRequest) -> OrderTable:
        """
        Register a table. New tables are never grouped.

        Raises:
            ValidationError: If number_of_guests is negative
        """
        order_table = OrderTable(
            id=None,
            number_of_guests=request.number_of_guests,
            empty=request.empty
        )
        saved = self.table_repo.save(order_table)
        self.db.commit()

        logger.info(f"Created order table {saved.id}", extra={"order_table_id": saved.id})
        return saved

    def list_order_tables(self) -> List[OrderTable]:
        return self.table_repo.list_order_tables()

    @log_operation("change_table_empty")
    def change_empty(self, order_table_id: int, request: OrderTableEmptyRequest) -> OrderTable:
        """
        Mark a table empty or seated.

        Raises:
            NotFoundError: If the table does not exist
            InvalidTableStateError: If the table is grouped or has an order
                that is not completed
        """
        order_table = self.table_repo.get_order_table_or_raise(order_table_id)
        orders = self.order_repo.orders_for_table(order_table_id)
        saved = self.table_repo.save(order_table.change_empty(request.empty, orders))
        self.db.commit()
        return saved

    @log_operation("change_table_guests")
    def change_number_of_guests(self, order_table_id: int, request: OrderTableGuestsRequest) -> OrderTable:
        """
        Change the guest count of a seated table.

        Raises:
            NotFoundError: If the table does not exist
            ValidationError: If the count is negative
            InvalidTableStateError: If the table is empty
        """
        order_table = self.table_repo.get_order_table_or_raise(order_table_id)
        saved = self.table_repo.save(order_table.change_number_of_guests(request.number_of_guests))
        self.db.commit()
        return saved
