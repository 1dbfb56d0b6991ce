"""
Order Service

Places orders against tables and moves them through the kitchen
lifecycle.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.entities.order import Order, OrderLineItem
from dtos.request.order_request import OrderCreateRequest, OrderStatusRequest
from exceptions import NotFoundError
from repositories.menu_repository import MenuRepository
from repositories.order_repository import OrderRepository
from repositories.order_table_repository import OrderTableRepository
from utils.clock import Clock, utc_now
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class OrderService:
    """Service for order placement and status changes."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.db = db
        self.clock = clock
        self.order_repo = OrderRepository(db)
        self.table_repo = OrderTableRepository(db)
        self.menu_repo = MenuRepository(db)

    @log_operation("create_order")
    def create_order(self, request: OrderCreateRequest) -> Order:
        """
        Place an order.

        Raises:
            NotFoundError: If the table or an ordered menu does not exist
            InvalidOrderError: If there are no line items, a menu repeats or
                the table is empty
            ValidationError: If a quantity is negative
        """
        order_table = self.table_repo.get_order_table_or_raise(request.order_table_id)
        line_items = [
            OrderLineItem(id=None, menu_id=item.menu_id, quantity=item.quantity)
            for item in request.order_line_items
        ]
        self._check_menus_exist(line_items)

        saved = self.order_repo.save(Order.place(order_table, line_items, clock=self.clock))
        self.db.commit()

        logger.info(
            f"Placed order {saved.id} on table {saved.order_table_id}",
            extra={"order_id": saved.id, "order_table_id": saved.order_table_id}
        )
        return saved

    def list_orders(self) -> List[Order]:
        return self.order_repo.list_orders()

    @log_operation("change_order_status")
    def change_order_status(self, order_id: int, request: OrderStatusRequest) -> Order:
        """
        Move an order to a new status.

        Raises:
            NotFoundError: If the order does not exist
            InvalidOrderError: If the order is already completed
        """
        order = self.order_repo.get_order_or_raise(order_id)
        saved = self.order_repo.save(order.change_status(request.status()))
        self.db.commit()

        logger.info(f"Order {order_id} is now {saved.status.value}", extra={"order_id": order_id})
        return saved

    def _check_menus_exist(self, line_items: List[OrderLineItem]) -> None:
        # Repeated menu ids are left for Order.place to reject
        menu_ids = list(dict.fromkeys(item.menu_id for item in line_items))
        if self.menu_repo.count_existing(menu_ids) == len(menu_ids):
            return
        for menu_id in menu_ids:
            if self.menu_repo.count_existing([menu_id]) == 0:
                raise NotFoundError("Menu", menu_id)
