"""
Product Entity
"""

from dataclasses import dataclass
from typing import Optional

from exceptions import ValidationError
from ..value_objects.price import Price


@dataclass(frozen=True)
class Product:
    """A sellable item. Menus reference products through their lines."""

    id: Optional[int]
    name: str
    price: Price

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required", {"name": self.name})

    @classmethod
    def create(cls, name: str, price) -> "Product":
        """Build a not-yet-persisted product."""
        return cls(id=None, name=name, price=Price.of(price))
