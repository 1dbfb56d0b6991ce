"""
Order Response DTOs
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from domain.entities.order import Order, OrderLineItem


class OrderLineItemResponse(BaseModel):
    """Response DTO for one order line."""

    id: Optional[int] = Field(None, description="Order line ID")
    menu_id: int = Field(description="ID of the ordered menu")
    quantity: int = Field(description="Number of servings")

    @classmethod
    def from_entity(cls, item: OrderLineItem) -> "OrderLineItemResponse":
        return cls(id=item.id, menu_id=item.menu_id, quantity=item.quantity)


class OrderResponse(BaseModel):
    """Response DTO for an order."""

    id: int = Field(description="Order ID")
    order_table_id: int = Field(description="ID of the table")
    order_status: str = Field(description="COOKING, MEAL or COMPLETION")
    ordered_time: datetime = Field(description="When the order was placed")
    order_line_items: List[OrderLineItemResponse] = Field(description="Ordered menus")

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            order_table_id=order.order_table_id,
            order_status=order.status.value,
            ordered_time=order.ordered_time,
            order_line_items=[OrderLineItemResponse.from_entity(item) for item in order.line_items]
        )
