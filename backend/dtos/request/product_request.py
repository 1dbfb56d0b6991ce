"""
Product and Menu Group Request DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class ProductCreateRequest(BaseModel):
    """Request DTO for registering a product."""

    name: str = Field(description="Product name")
    price: Optional[Decimal] = Field(None, description="Unit price, must be non-negative")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Fried chicken",
                "price": "16000"
            }
        }


class MenuGroupCreateRequest(BaseModel):
    """Request DTO for registering a menu group."""

    name: str = Field(description="Menu group name")
