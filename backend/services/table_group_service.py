"""
Table Group Service

Coordinates forming and dissolving table groups. The grouping and
ungrouping rules live on the TableGroup aggregate; this service resolves
the tables and orders it needs, and persists the resulting table states in
the same transaction as the group.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.aggregates.table_group import TableGroup
from domain.entities.order_table import OrderTable
from dtos.request.table_request import TableGroupCreateRequest
from repositories.order_repository import OrderRepository
from repositories.order_table_repository import OrderTableRepository
from repositories.table_group_repository import TableGroupRepository
from utils.clock import Clock, utc_now
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class TableGroupService:
    """Service for table group lifecycle."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        """
        Initialize TableGroupService.

        Args:
            db: Database session
            clock: Source of group creation timestamps
        """
        self.db = db
        self.clock = clock
        self.table_repo = OrderTableRepository(db)
        self.table_group_repo = TableGroupRepository(db)
        self.order_repo = OrderRepository(db)

    @log_operation("create_table_group")
    def create_table_group(self, request: TableGroupCreateRequest) -> TableGroup:
        """
        Group tables.

        Every requested id is resolved, in order, before any rule runs.

        Args:
            request: IDs of the tables to group

        Returns:
            Saved table group; its member tables are now linked and not empty

        Raises:
            NotFoundError: If a table id does not exist
            InvalidGroupingError: If the tables cannot be grouped
        """
        tables = [
            self.table_repo.get_order_table_or_raise(order_table_id)
            for order_table_id in request.order_table_ids
        ]
        table_group = self.table_group_repo.save(TableGroup.of(tables, clock=self.clock))
        self.table_repo.save_all(table_group.group_tables(tables))
        self.db.commit()

        logger.info(
            f"Created table group {table_group.id} with tables {list(table_group.table_ids)}",
            extra={"table_group_id": table_group.id}
        )
        return table_group

    @log_operation("ungroup_table_group")
    def ungroup(self, table_group_id: int) -> List[OrderTable]:
        """
        Dissolve a table group.

        Args:
            table_group_id: ID of the group

        Returns:
            The released tables

        Raises:
            NotFoundError: If the group does not exist
            InvalidUngroupingError: If any member table has an order that is
                not completed; no table is changed in that case
        """
        table_group = self.table_group_repo.get_table_group_or_raise(table_group_id)
        tables = self.table_repo.find_by_table_group_id(table_group_id)
        orders_by_table = self.order_repo.orders_for_tables(table.id for table in tables)

        released = self.table_repo.save_all(table_group.ungroup(tables, orders_by_table))
        self.db.commit()

        logger.info(
            f"Ungrouped table group {table_group_id}, released tables {[table.id for table in released]}",
            extra={"table_group_id": table_group_id}
        )
        return released
