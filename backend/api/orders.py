"""
Orders API
"""
from fastapi import APIRouter, Depends
from typing import List

from constants import HTTPStatus
from dependencies import get_order_service
from dtos.request.order_request import OrderCreateRequest, OrderStatusRequest
from dtos.response.order_response import OrderResponse
from services.order_service import OrderService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/orders", response_model=OrderResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Order creation")
def create_order(
    request: OrderCreateRequest,
    service: OrderService = Depends(get_order_service)
):
    return OrderResponse.from_entity(service.create_order(request))


@router.get("/orders", response_model=List[OrderResponse])
@handle_api_errors("Order listing")
def list_orders(service: OrderService = Depends(get_order_service)):
    return [OrderResponse.from_entity(order) for order in service.list_orders()]


@router.put("/orders/{order_id}/order-status", response_model=OrderResponse)
@handle_api_errors("Order status change")
def change_order_status(
    order_id: int,
    request: OrderStatusRequest,
    service: OrderService = Depends(get_order_service)
):
    """Move an order to a new status. A completed order cannot change."""
    return OrderResponse.from_entity(
        service.change_order_status(order_id=order_id, request=request)
    )
