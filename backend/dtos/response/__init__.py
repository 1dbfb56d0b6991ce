"""
Response DTOs

DTOs for outgoing API responses. Each one is built from a domain entity
with `from_entity`, so the API never exposes ORM rows.
"""

from .catalog_response import ProductResponse, MenuGroupResponse, MenuResponse, MenuLineResponse
from .table_response import OrderTableResponse, TableGroupResponse
from .order_response import OrderResponse, OrderLineItemResponse

__all__ = [
    "ProductResponse",
    "MenuGroupResponse",
    "MenuResponse",
    "MenuLineResponse",
    "OrderTableResponse",
    "TableGroupResponse",
    "OrderResponse",
    "OrderLineItemResponse",
]
