"""
Table group repository.

Only the group row is written here; member linkage lives on the order
table rows and is written through OrderTableRepository.
"""

from typing import Optional
from dataclasses import replace
from sqlalchemy.orm import Session

from domain.aggregates.table_group import TableGroup
from exceptions import NotFoundError
from models import TableGroupModel
from .base_repository import BaseRepository


class TableGroupRepository(BaseRepository[TableGroupModel]):
    """Repository for the TableGroup aggregate."""

    def __init__(self, db: Session):
        super().__init__(db, TableGroupModel)

    def save(self, table_group: TableGroup) -> TableGroup:
        """
        Insert a new table group.

        Returns:
            The group with its assigned id; table_ids keep the order the
            group was formed with
        """
        row = self.add(TableGroupModel(created_at=table_group.created_at))
        return replace(table_group, id=row.id)

    def find_table_group_by_id(self, table_group_id: int) -> Optional[TableGroup]:
        row = self.get_by_id(table_group_id)
        return row.to_entity() if row else None

    def get_table_group_or_raise(self, table_group_id: int) -> TableGroup:
        table_group = self.find_table_group_by_id(table_group_id)
        if table_group is None:
            raise NotFoundError("TableGroup", table_group_id)
        return table_group
