"""
Order Request DTOs
"""

from pydantic import BaseModel, Field, validator
from typing import List

from domain.value_objects.order_status import OrderStatus


class OrderLineItemRequest(BaseModel):
    """One (menu, quantity) line of an order."""

    menu_id: int = Field(description="ID of the ordered menu")
    quantity: int = Field(description="Number of servings")


class OrderCreateRequest(BaseModel):
    """Request DTO for placing an order."""

    order_table_id: int = Field(description="ID of the table the order is for")
    order_line_items: List[OrderLineItemRequest] = Field(default_factory=list, description="Ordered menus")


class OrderStatusRequest(BaseModel):
    """Request DTO for changing the status of an order."""

    order_status: str = Field(description="COOKING, MEAL or COMPLETION")

    @validator("order_status")
    def validate_order_status(cls, v):
        """Normalise and check the status name."""
        return OrderStatus.from_string(v).value

    def status(self) -> OrderStatus:
        return OrderStatus(self.order_status)
