"""
Domain Entities

Entities are business objects with identity. Identity is assigned by the
persistence layer, so a freshly built entity carries id=None.

- Product: a sellable item with a unit price
- MenuGroup: a category every menu belongs to
- OrderTable: a physical dining table
- Order: an order placed against a table
"""

from .product import Product
from .menu_group import MenuGroup
from .order_table import OrderTable
from .order import Order, OrderLineItem

__all__ = ["Product", "MenuGroup", "OrderTable", "Order", "OrderLineItem"]
