"""
Menu Aggregate

A Menu owns its MenuLine entries: lines have no identity usable outside
their menu and are only ever created while a menu is assembled.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from exceptions import ValidationError
from ..entities.menu_group import MenuGroup
from ..entities.product import Product
from ..value_objects.price import Price
from ..value_objects.counts import require_count


@dataclass(frozen=True)
class MenuLine:
    """One (product, quantity) entry of a menu."""

    id: Optional[int]
    product: Product
    quantity: int
    menu_id: Optional[int] = None

    def __post_init__(self):
        require_count("quantity", self.quantity)


@dataclass(frozen=True)
class Menu:
    id: Optional[int]
    name: str
    price: Price
    menu_group: MenuGroup
    lines: Tuple[MenuLine, ...] = ()

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Menu name is required", {"name": self.name})

    @classmethod
    def of(
        cls,
        name: str,
        price,
        menu_group: MenuGroup,
        lines: Sequence[MenuLine]
    ) -> "Menu":
        """Build an unsaved menu; neither the menu nor its lines carry an id."""
        return cls(
            id=None,
            name=name,
            price=Price.of(price),
            menu_group=menu_group,
            lines=tuple(lines)
        )

    @property
    def menu_group_id(self) -> Optional[int]:
        return self.menu_group.id
