"""
Menus API
"""
from fastapi import APIRouter, Depends
from typing import List

from constants import HTTPStatus
from dependencies import get_menu_service
from dtos.request.menu_request import MenuCreateRequest
from dtos.response.catalog_response import MenuResponse
from services.menu_service import MenuService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/menus", response_model=MenuResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Menu creation")
def create_menu(
    request: MenuCreateRequest,
    service: MenuService = Depends(get_menu_service)
):
    """
    Create a menu.

    Returns 404 when the menu group or a product does not exist.
    """
    return MenuResponse.from_entity(service.create_menu(request))


@router.get("/menus", response_model=List[MenuResponse])
@handle_api_errors("Menu listing")
def list_menus(service: MenuService = Depends(get_menu_service)):
    return [MenuResponse.from_entity(menu) for menu in service.list_menus()]
