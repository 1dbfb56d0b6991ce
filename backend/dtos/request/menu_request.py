"""
Menu Request DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional, Tuple


class MenuLineRequest(BaseModel):
    """One (product, quantity) line of a menu."""

    product_id: int = Field(description="ID of the product")
    quantity: int = Field(description="Number of units, must be non-negative")


class MenuCreateRequest(BaseModel):
    """
    Request DTO for creating a menu.

    Lines are assembled in the order given.
    """

    name: str = Field(description="Menu name")
    price: Optional[Decimal] = Field(None, description="Menu price, must be non-negative")
    menu_group_id: int = Field(description="ID of the owning menu group")
    menu_lines: List[MenuLineRequest] = Field(default_factory=list, description="Product lines")

    def line_pairs(self) -> List[Tuple[int, int]]:
        """Lines as (product_id, quantity) pairs."""
        return [(line.product_id, line.quantity) for line in self.menu_lines]

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Two chickens",
                "price": "19000",
                "menu_group_id": 1,
                "menu_lines": [{"product_id": 1, "quantity": 2}]
            }
        }
