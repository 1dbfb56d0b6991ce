"""
Menu group repository.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from domain.entities.menu_group import MenuGroup
from domain.interfaces import IMenuGroupLookup
from models import MenuGroupModel
from .base_repository import BaseRepository


class MenuGroupRepository(BaseRepository[MenuGroupModel], IMenuGroupLookup):
    """Repository for MenuGroup persistence."""

    def __init__(self, db: Session):
        super().__init__(db, MenuGroupModel)

    def find_menu_group_by_id(self, menu_group_id: int) -> Optional[MenuGroup]:
        row = self.get_by_id(menu_group_id)
        return row.to_entity() if row else None

    def save(self, menu_group: MenuGroup) -> MenuGroup:
        row = self.add(MenuGroupModel(name=menu_group.name))
        return row.to_entity()

    def list_menu_groups(self, limit: Optional[int] = None, offset: int = 0) -> List[MenuGroup]:
        return [row.to_entity() for row in self.get_all(limit=limit, offset=offset)]
