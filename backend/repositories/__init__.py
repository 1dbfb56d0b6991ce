"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and map ORM rows to domain entities. Repositories flush but never commit;
the calling service owns the transaction.
"""

from .base_repository import BaseRepository
from .product_repository import ProductRepository
from .menu_group_repository import MenuGroupRepository
from .menu_repository import MenuRepository
from .order_table_repository import OrderTableRepository
from .table_group_repository import TableGroupRepository
from .order_repository import OrderRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "MenuGroupRepository",
    "MenuRepository",
    "OrderTableRepository",
    "TableGroupRepository",
    "OrderRepository",
]
