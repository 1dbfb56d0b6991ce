"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages from the
service layer. The domain layer does not log.
"""

import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments copied into the context by log_operation
_CONTEXT_KEYS = ("product_id", "menu_id", "order_table_id", "table_group_id", "order_id")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Table group created", extra={
            "table_group_id": table_group.id,
            "order_table_ids": list(table_group.table_ids)
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Example:
        set_logging_context(request_id="abc-123", path="/api/orders")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    A rejected operation (any exception) is logged at DEBUG with its context
    and re-raised unchanged; handle_api_errors reports it at WARNING.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("ungroup_table_group")
        def ungroup(self, table_group_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)

            context = {"operation": operation_name}
            for key in _CONTEXT_KEYS:
                if key in kwargs:
                    context[key] = kwargs[key]

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.debug(f"Rejected {operation_name}: {e}", extra=context)
                raise

            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
