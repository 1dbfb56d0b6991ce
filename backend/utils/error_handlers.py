"""
Error handling decorators for API endpoints.

Centralizes the translation of application exceptions into HTTP responses
so every route reports domain failures the same way.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    InvalidCompositionError,
    InvalidGroupingError,
    InvalidOrderError,
    InvalidTableStateError,
    InvalidUngroupingError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Client errors: the request was understood but a business rule rejected it
_BAD_REQUEST_ERRORS = (
    ValidationError,
    InvalidCompositionError,
    InvalidGroupingError,
    InvalidUngroupingError,
    InvalidTableStateError,
    InvalidOrderError,
)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Table group creation")

    Returns:
        Decorated function that converts application errors to HTTPException

    Example:
        @router.post("/table-groups")
        @handle_api_errors("Table group creation")
        def create_table_group(...):
            return service.create_table_group(request)
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except NotFoundError as e:
                logger.warning(f"{operation_name} - Not found: {e.message}")
                raise HTTPException(
                    status_code=HTTPStatus.NOT_FOUND,
                    detail=e.message
                )
            except _BAD_REQUEST_ERRORS as e:
                logger.warning(f"{operation_name} - {type(e).__name__}: {e.message}")
                raise HTTPException(
                    status_code=HTTPStatus.BAD_REQUEST,
                    detail=e.message
                )
            except ApplicationError as e:
                logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed: {e.message}"
                )
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed. Please check server logs."
                )

        return wrapper

    return decorator
