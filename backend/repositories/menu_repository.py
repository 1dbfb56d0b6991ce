"""
Menu repository.

Menus are written together with their lines; a line row never exists
without its menu.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from domain.aggregates.menu import Menu
from models import MenuModel, MenuLineModel
from .base_repository import BaseRepository


class MenuRepository(BaseRepository[MenuModel]):
    """Repository for the Menu aggregate."""

    def __init__(self, db: Session):
        super().__init__(db, MenuModel)

    def save(self, menu: Menu) -> Menu:
        """
        Insert a menu and its lines.

        Args:
            menu: Unsaved menu produced by MenuComposition

        Returns:
            Menu with ids assigned to the menu and every line
        """
        row = MenuModel(
            name=menu.name,
            price=menu.price.amount,
            menu_group_id=menu.menu_group_id,
            lines=[
                MenuLineModel(product_id=line.product.id, quantity=line.quantity)
                for line in menu.lines
            ]
        )
        self.add(row)
        self.db.refresh(row)
        return row.to_entity()

    def list_menus(self, limit: Optional[int] = None, offset: int = 0) -> List[Menu]:
        query = self.db.query(self.model).options(
            selectinload(self.model.lines).joinedload(MenuLineModel.product),
            selectinload(self.model.menu_group)
        ).order_by(self.model.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return [row.to_entity() for row in query.all()]

    def count_existing(self, menu_ids: List[int]) -> int:
        """
        Count how many of the given ids belong to a stored menu.

        Args:
            menu_ids: Menu ids, expected to be distinct

        Returns:
            Number of ids that exist
        """
        if not menu_ids:
            return 0
        return self.db.query(self.model).filter(self.model.id.in_(menu_ids)).count()
