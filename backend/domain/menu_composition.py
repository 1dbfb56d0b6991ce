"""
Menu Composition

Assembles a Menu aggregate from a menu group id and (product id, quantity)
lines, resolving every reference through the lookup interfaces.
"""

from typing import Sequence, Tuple

from exceptions import NotFoundError
from .aggregates.menu import Menu, MenuLine
from .entities.menu_group import MenuGroup
from .entities.product import Product
from .interfaces import IMenuGroupLookup, IProductLookup


class MenuComposition:
    """Validates and assembles menus. Persisting the result is the caller's job."""

    def __init__(self, menu_groups: IMenuGroupLookup, products: IProductLookup):
        self.menu_groups = menu_groups
        self.products = products

    def assemble(
        self,
        name: str,
        price,
        menu_group_id: int,
        lines: Sequence[Tuple[int, int]]
    ) -> Menu:
        """
        Build an unsaved menu.

        The menu group is resolved first; products are not looked up at all
        when it is missing. Products are then resolved in input order and the
        first missing one is reported.

        Args:
            name: Menu name
            price: Menu price
            menu_group_id: Id of the owning menu group
            lines: (product_id, quantity) pairs

        Returns:
            Menu whose lines follow the input order and carry no id

        Raises:
            NotFoundError: If the menu group or a product does not exist
        """
        menu_group = self._resolve_menu_group(menu_group_id)
        menu_lines = [
            MenuLine(id=None, product=self._resolve_product(product_id), quantity=quantity)
            for product_id, quantity in lines
        ]
        return Menu.of(name, price, menu_group, menu_lines)

    def _resolve_menu_group(self, menu_group_id: int) -> MenuGroup:
        menu_group = self.menu_groups.find_menu_group_by_id(menu_group_id)
        if menu_group is None:
            raise NotFoundError("MenuGroup", menu_group_id)
        return menu_group

    def _resolve_product(self, product_id: int) -> Product:
        product = self.products.find_product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product
