"""
TableGroup Aggregate

A table group seats several order tables as one unit. The group owns the
membership relation as a list of table ids; each OrderTable only stores the
id of its group.

Membership of a single table:
    UNGROUPED --(TableGroup.of)--> GROUPED --(TableGroup.ungroup)--> UNGROUPED
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from constants import GroupingReason, TableGroupPolicy, UngroupingReason
from exceptions import InvalidGroupingError, InvalidUngroupingError
from utils.clock import Clock, utc_now
from ..entities.order import Order
from ..entities.order_table import OrderTable
from ..specifications import Specification
from ..table_specifications import (
    AnyTableGroupedSpec,
    AnyTableSeatedSpec,
    DistinctTablesSpec,
    HasAtLeastTablesSpec,
    OrdersCompletedSpec,
)


# Evaluated in order; the first unsatisfied rule is reported.
GROUPING_RULES: Tuple[Tuple[Specification[Sequence[OrderTable]], str], ...] = (
    (HasAtLeastTablesSpec(TableGroupPolicy.MIN_TABLES), GroupingReason.TOO_FEW_TABLES),
    (DistinctTablesSpec(), GroupingReason.DUPLICATE_TABLE),
    (~AnyTableGroupedSpec(), GroupingReason.ALREADY_GROUPED),
    (~AnyTableSeatedSpec(), GroupingReason.NON_EMPTY_TABLE),
)

_ORDERS_COMPLETED = OrdersCompletedSpec()


def check_grouping(tables: Sequence[OrderTable]) -> None:
    """
    Run the grouping rules against a candidate table set.

    Raises:
        InvalidGroupingError: With the reason of the first violated rule
    """
    for rule, reason in GROUPING_RULES:
        if not rule.is_satisfied_by(tables):
            raise InvalidGroupingError(reason, [table.id for table in tables])


@dataclass(frozen=True)
class TableGroup:
    """
    Group of order tables.

    created_at is stamped once by TableGroup.of and never changes.
    table_ids keeps the order the tables were supplied in.
    """

    id: Optional[int]
    created_at: datetime
    table_ids: Tuple[int, ...]

    @classmethod
    def of(cls, tables: Optional[Sequence[OrderTable]], clock: Clock = utc_now) -> "TableGroup":
        """
        Form a new table group.

        Args:
            tables: Candidate tables, in the order they were requested
            clock: Source of the creation timestamp

        Returns:
            Unsaved TableGroup

        Raises:
            InvalidGroupingError: If fewer than two tables are given, a table
                appears twice, a table is already grouped or a table is not empty
        """
        tables = list(tables or [])
        check_grouping(tables)
        return cls(
            id=None,
            created_at=clock(),
            table_ids=tuple(table.id for table in tables)
        )

    def group_tables(self, tables: Iterable[OrderTable]) -> List[OrderTable]:
        """
        New states for the member tables, linked to this group and seated.

        Raises:
            ValueError: If the group has not been persisted yet
        """
        if self.id is None:
            raise ValueError("Table group must be saved before its tables are linked")
        return [table.grouped_into(self.id) for table in tables]

    def ungroup(
        self,
        tables: Iterable[OrderTable],
        orders_by_table: Mapping[int, Iterable[Order]]
    ) -> List[OrderTable]:
        """
        Dissolve the group.

        All tables are checked before any new state is produced, so either
        every member is released or none is.

        Args:
            tables: Current member tables
            orders_by_table: Orders keyed by order table id

        Returns:
            New states for the tables with the group link cleared. Tables
            stay marked not-empty and keep their guest count.

        Raises:
            InvalidUngroupingError: If any order is not in COMPLETION
        """
        for orders in orders_by_table.values():
            if not _ORDERS_COMPLETED.is_satisfied_by(orders):
                raise InvalidUngroupingError(UngroupingReason.ORDERS_IN_PROGRESS, self.id)
        return [table.released() for table in tables]
