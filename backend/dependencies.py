"""
Dependency injection providers for FastAPI.

Each factory builds a service bound to the request-scoped database session,
so a request runs inside one transaction. Tests override get_db to point
every service at an in-memory database.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.menu_group_service import MenuGroupService
from services.menu_service import MenuService
from services.order_service import OrderService
from services.order_table_service import OrderTableService
from services.product_service import ProductService
from services.table_group_service import TableGroupService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_menu_group_service(db: Session = Depends(get_db)) -> MenuGroupService:
    return MenuGroupService(db)


def get_menu_service(db: Session = Depends(get_db)) -> MenuService:
    """
    Factory function for creating MenuService instances.

    Args:
        db: Database session (injected)

    Returns:
        MenuService bound to the request session
    """
    return MenuService(db)


def get_order_table_service(db: Session = Depends(get_db)) -> OrderTableService:
    return OrderTableService(db)


def get_table_group_service(db: Session = Depends(get_db)) -> TableGroupService:
    """
    Factory function for creating TableGroupService instances.

    Args:
        db: Database session (injected)

    Returns:
        TableGroupService using the system clock
    """
    return TableGroupService(db)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)
