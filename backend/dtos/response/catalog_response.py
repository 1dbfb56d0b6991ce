"""
Product, Menu Group and Menu Response DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional

from domain.aggregates.menu import Menu, MenuLine
from domain.entities.menu_group import MenuGroup
from domain.entities.product import Product


class ProductResponse(BaseModel):
    """Response DTO for a product."""

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")
    price: Decimal = Field(description="Unit price")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=product.price.amount)


class MenuGroupResponse(BaseModel):
    """Response DTO for a menu group."""

    id: int = Field(description="Menu group ID")
    name: str = Field(description="Menu group name")

    @classmethod
    def from_entity(cls, menu_group: MenuGroup) -> "MenuGroupResponse":
        return cls(id=menu_group.id, name=menu_group.name)


class MenuLineResponse(BaseModel):
    """Response DTO for one menu line."""

    id: Optional[int] = Field(None, description="Menu line ID")
    product_id: int = Field(description="ID of the product")
    quantity: int = Field(description="Number of units")

    @classmethod
    def from_entity(cls, line: MenuLine) -> "MenuLineResponse":
        return cls(id=line.id, product_id=line.product.id, quantity=line.quantity)


class MenuResponse(BaseModel):
    """Response DTO for a menu and its lines."""

    id: int = Field(description="Menu ID")
    name: str = Field(description="Menu name")
    price: Decimal = Field(description="Menu price")
    menu_group_id: int = Field(description="ID of the owning menu group")
    menu_lines: List[MenuLineResponse] = Field(description="Lines in assembly order")

    @classmethod
    def from_entity(cls, menu: Menu) -> "MenuResponse":
        return cls(
            id=menu.id,
            name=menu.name,
            price=menu.price.amount,
            menu_group_id=menu.menu_group_id,
            menu_lines=[MenuLineResponse.from_entity(line) for line in menu.lines]
        )
