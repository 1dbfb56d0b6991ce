"""
Order Table and Table Group Request DTOs
"""

from pydantic import BaseModel, Field
from typing import List


class OrderTableCreateRequest(BaseModel):
    """Request DTO for registering an order table."""

    number_of_guests: int = Field(0, description="Seated guests, must be non-negative")
    empty: bool = Field(True, description="Whether the table is free")


class OrderTableEmptyRequest(BaseModel):
    """Request DTO for marking a table empty or seated."""

    empty: bool = Field(description="New empty flag")


class OrderTableGuestsRequest(BaseModel):
    """Request DTO for changing the guest count of a table."""

    number_of_guests: int = Field(description="New guest count")


class TableGroupCreateRequest(BaseModel):
    """
    Request DTO for grouping tables.

    Ids are passed to the domain as given; repeated ids are rejected there.
    """

    order_table_ids: List[int] = Field(default_factory=list, description="IDs of the tables to group")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "order_table_ids": [1, 2]
            }
        }
