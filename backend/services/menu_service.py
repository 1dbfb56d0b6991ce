"""
Menu Service

Coordinates menu creation: MenuComposition resolves the menu group and
products and assembles the aggregate, then the menu is persisted with its
lines in one transaction.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.aggregates.menu import Menu
from domain.menu_composition import MenuComposition
from dtos.request.menu_request import MenuCreateRequest
from repositories.menu_group_repository import MenuGroupRepository
from repositories.menu_repository import MenuRepository
from repositories.product_repository import ProductRepository
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class MenuService:
    """Service for menu-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize MenuService.

        Args:
            db: Database session
        """
        self.db = db
        self.menu_repo = MenuRepository(db)
        self.composition = MenuComposition(
            menu_groups=MenuGroupRepository(db),
            products=ProductRepository(db)
        )

    @log_operation("create_menu")
    def create_menu(self, request: MenuCreateRequest) -> Menu:
        """
        Create a menu from a menu group and product lines.

        Args:
            request: Menu name, price, group id and (product id, quantity) lines

        Returns:
            Saved menu with ids assigned to the menu and its lines

        Raises:
            NotFoundError: If the menu group or any product does not exist
            ValidationError: If the name is blank, or the price or a
                quantity is invalid
        """
        menu = self.composition.assemble(
            request.name,
            request.price,
            request.menu_group_id,
            request.line_pairs()
        )
        saved = self.menu_repo.save(menu)
        self.db.commit()

        logger.info(
            f"Created menu {saved.id} ({saved.name}) with {len(saved.lines)} line(s)",
            extra={"menu_id": saved.id, "menu_group_id": saved.menu_group_id}
        )
        return saved

    def list_menus(self) -> List[Menu]:
        return self.menu_repo.list_menus()
