"""
Order Table and Table Group Response DTOs
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from domain.aggregates.table_group import TableGroup
from domain.entities.order_table import OrderTable


class OrderTableResponse(BaseModel):
    """Response DTO for an order table."""

    id: int = Field(description="Order table ID")
    number_of_guests: int = Field(description="Seated guests")
    empty: bool = Field(description="Whether the table is free")
    table_group_id: Optional[int] = Field(None, description="Owning table group, null when ungrouped")

    @classmethod
    def from_entity(cls, table: OrderTable) -> "OrderTableResponse":
        return cls(
            id=table.id,
            number_of_guests=table.number_of_guests,
            empty=table.empty,
            table_group_id=table.table_group_id
        )


class TableGroupResponse(BaseModel):
    """Response DTO for a table group."""

    id: int = Field(description="Table group ID")
    created_at: datetime = Field(description="Creation timestamp")
    order_table_ids: List[int] = Field(description="Member table IDs")

    @classmethod
    def from_entity(cls, table_group: TableGroup) -> "TableGroupResponse":
        return cls(
            id=table_group.id,
            created_at=table_group.created_at,
            order_table_ids=list(table_group.table_ids)
        )
