"""
Table groups API
"""
from fastapi import APIRouter, Depends, Response

from constants import HTTPStatus
from dependencies import get_table_group_service
from dtos.request.table_request import TableGroupCreateRequest
from dtos.response.table_response import TableGroupResponse
from services.table_group_service import TableGroupService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/table-groups", response_model=TableGroupResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Table group creation")
def create_table_group(
    request: TableGroupCreateRequest,
    service: TableGroupService = Depends(get_table_group_service)
):
    """
    Group two or more empty, ungrouped tables.

    Returns 400 with the violated rule ("too few tables", "duplicate table",
    "already grouped" or "non-empty table") when grouping is rejected.
    """
    return TableGroupResponse.from_entity(service.create_table_group(request))


@router.delete("/table-groups/{table_group_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Table group ungroup")
def ungroup(
    table_group_id: int,
    service: TableGroupService = Depends(get_table_group_service)
):
    """Dissolve a table group. Returns 400 while any member table has an open order."""
    service.ungroup(table_group_id=table_group_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
