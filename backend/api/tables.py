"""
Order tables API
"""
from fastapi import APIRouter, Depends
from typing import List

from constants import HTTPStatus
from dependencies import get_order_table_service
from dtos.request.table_request import (
    OrderTableCreateRequest,
    OrderTableEmptyRequest,
    OrderTableGuestsRequest,
)
from dtos.response.table_response import OrderTableResponse
from services.order_table_service import OrderTableService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/tables", response_model=OrderTableResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Order table creation")
def create_order_table(
    request: OrderTableCreateRequest,
    service: OrderTableService = Depends(get_order_table_service)
):
    return OrderTableResponse.from_entity(service.create_order_table(request))


@router.get("/tables", response_model=List[OrderTableResponse])
@handle_api_errors("Order table listing")
def list_order_tables(service: OrderTableService = Depends(get_order_table_service)):
    return [OrderTableResponse.from_entity(table) for table in service.list_order_tables()]


@router.put("/tables/{order_table_id}/empty", response_model=OrderTableResponse)
@handle_api_errors("Order table empty change")
def change_empty(
    order_table_id: int,
    request: OrderTableEmptyRequest,
    service: OrderTableService = Depends(get_order_table_service)
):
    """Mark a table empty or seated. Rejected for grouped tables and tables with open orders."""
    return OrderTableResponse.from_entity(
        service.change_empty(order_table_id=order_table_id, request=request)
    )


@router.put("/tables/{order_table_id}/number-of-guests", response_model=OrderTableResponse)
@handle_api_errors("Order table guest change")
def change_number_of_guests(
    order_table_id: int,
    request: OrderTableGuestsRequest,
    service: OrderTableService = Depends(get_order_table_service)
):
    return OrderTableResponse.from_entity(
        service.change_number_of_guests(order_table_id=order_table_id, request=request)
    )
