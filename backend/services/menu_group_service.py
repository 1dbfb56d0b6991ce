"""
Menu Group Service

Registers and lists menu groups.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.entities.menu_group import MenuGroup
from dtos.request.product_request import MenuGroupCreateRequest
from repositories.menu_group_repository import MenuGroupRepository
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class MenuGroupService:
    """Service for menu group registration."""

    def __init__(self, db: Session):
        self.db = db
        self.menu_group_repo = MenuGroupRepository(db)

    @log_operation("create_menu_group")
    def create_menu_group(self, request: MenuGroupCreateRequest) -> MenuGroup:
        saved = self.menu_group_repo.save(MenuGroup(id=None, name=request.name))
        self.db.commit()

        logger.info(f"Created menu group {saved.id} ({saved.name})")
        return saved

    def list_menu_groups(self) -> List[MenuGroup]:
        return self.menu_group_repo.list_menu_groups()
