"""
Request DTOs

DTOs for incoming API requests. Field types are checked here; business
rules (non-negative prices and quantities, grouping rules, order rules) are
enforced by the domain layer so every caller gets the same errors.
"""

from .product_request import ProductCreateRequest, MenuGroupCreateRequest
from .menu_request import MenuCreateRequest, MenuLineRequest
from .table_request import (
    OrderTableCreateRequest,
    OrderTableEmptyRequest,
    OrderTableGuestsRequest,
    TableGroupCreateRequest,
)
from .order_request import OrderCreateRequest, OrderLineItemRequest, OrderStatusRequest

__all__ = [
    "ProductCreateRequest",
    "MenuGroupCreateRequest",
    "MenuCreateRequest",
    "MenuLineRequest",
    "OrderTableCreateRequest",
    "OrderTableEmptyRequest",
    "OrderTableGuestsRequest",
    "TableGroupCreateRequest",
    "OrderCreateRequest",
    "OrderLineItemRequest",
    "OrderStatusRequest",
]
