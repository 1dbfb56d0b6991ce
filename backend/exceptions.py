"""
Custom exception classes for the application.

The domain layer raises these to signal a rejected operation; it never logs
or formats them. The API layer translates each kind into an HTTP response
in utils.error_handlers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a referenced entity does not exist"""

    def __init__(self, entity_kind: str, entity_id):
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        details = {"entity_kind": entity_kind, "entity_id": entity_id}
        super().__init__(f"{entity_kind} {entity_id} does not exist", details)


class ValidationError(ApplicationError):
    """Raised when a value violates a field-level rule"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidCompositionError(ApplicationError):
    """Raised when a menu violates a menu-level invariant"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason, {"reason": reason})


class InvalidGroupingError(ApplicationError):
    """Raised when tables cannot be formed into a table group"""

    def __init__(self, reason: str, table_ids: list | None = None):
        self.reason = reason
        details = {"reason": reason}
        if table_ids is not None:
            details["table_ids"] = table_ids
        super().__init__(reason, details)


class InvalidUngroupingError(ApplicationError):
    """Raised when a table group cannot be dissolved"""

    def __init__(self, reason: str, table_group_id: int | None = None):
        self.reason = reason
        details = {"reason": reason}
        if table_group_id is not None:
            details["table_group_id"] = table_group_id
        super().__init__(reason, details)


class InvalidTableStateError(ApplicationError):
    """Raised when an order table rejects a state change"""

    def __init__(self, reason: str, order_table_id: int | None = None):
        self.reason = reason
        super().__init__(reason, {"reason": reason, "order_table_id": order_table_id})


class InvalidOrderError(ApplicationError):
    """Raised when an order cannot be placed or its status changed"""

    def __init__(self, reason: str, order_id: int | None = None):
        self.reason = reason
        super().__init__(reason, {"reason": reason, "order_id": order_id})
