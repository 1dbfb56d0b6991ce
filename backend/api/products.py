"""
Products and menu groups API
"""
from fastapi import APIRouter, Depends
from typing import List

from constants import HTTPStatus
from dependencies import get_menu_group_service, get_product_service
from dtos.request.product_request import MenuGroupCreateRequest, ProductCreateRequest
from dtos.response.catalog_response import MenuGroupResponse, ProductResponse
from services.menu_group_service import MenuGroupService
from services.product_service import ProductService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/products", response_model=ProductResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Product creation")
def create_product(
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service)
):
    """Register a product."""
    return ProductResponse.from_entity(service.create_product(request))


@router.get("/products", response_model=List[ProductResponse])
@handle_api_errors("Product listing")
def list_products(service: ProductService = Depends(get_product_service)):
    return [ProductResponse.from_entity(product) for product in service.list_products()]


@router.post("/menu-groups", response_model=MenuGroupResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Menu group creation")
def create_menu_group(
    request: MenuGroupCreateRequest,
    service: MenuGroupService = Depends(get_menu_group_service)
):
    """Register a menu group."""
    return MenuGroupResponse.from_entity(service.create_menu_group(request))


@router.get("/menu-groups", response_model=List[MenuGroupResponse])
@handle_api_errors("Menu group listing")
def list_menu_groups(service: MenuGroupService = Depends(get_menu_group_service)):
    return [MenuGroupResponse.from_entity(menu_group) for menu_group in service.list_menu_groups()]
