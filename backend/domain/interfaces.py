"""
Lookup Interfaces

Abstract "find by id" contracts the domain depends on. The repository
layer implements them; tests can pass in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities.menu_group import MenuGroup
from .entities.order import Order
from .entities.order_table import OrderTable
from .entities.product import Product


class IMenuGroupLookup(ABC):
    """Resolves menu groups by id."""

    @abstractmethod
    def find_menu_group_by_id(self, menu_group_id: int) -> Optional[MenuGroup]:
        """
        Args:
            menu_group_id: Menu group primary key

        Returns:
            MenuGroup or None if it does not exist
        """
        pass


class IProductLookup(ABC):
    """Resolves products by id."""

    @abstractmethod
    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        """
        Args:
            product_id: Product primary key

        Returns:
            Product or None if it does not exist
        """
        pass


class IOrderTableLookup(ABC):
    """Resolves order tables by id."""

    @abstractmethod
    def find_order_table_by_id(self, order_table_id: int) -> Optional[OrderTable]:
        """
        Args:
            order_table_id: Order table primary key

        Returns:
            OrderTable or None if it does not exist
        """
        pass


class IOrderLookup(ABC):
    """Lists the orders placed against a table."""

    @abstractmethod
    def orders_for_table(self, order_table_id: int) -> List[Order]:
        """
        Args:
            order_table_id: Order table primary key

        Returns:
            Orders for the table, possibly empty
        """
        pass
