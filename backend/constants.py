"""
Application-wide constants.

This module centralizes the magic strings and numbers used by the domain
and API layers so rule messages and status codes stay consistent.
"""
from config.app_config import HOST, PORT


class GroupingReason:
    """Reasons a set of tables cannot be formed into a table group"""

    TOO_FEW_TABLES = "too few tables"
    DUPLICATE_TABLE = "duplicate table"
    ALREADY_GROUPED = "already grouped"
    NON_EMPTY_TABLE = "non-empty table"


class UngroupingReason:
    """Reasons a table group cannot be dissolved"""

    ORDERS_IN_PROGRESS = "orders in progress"


class TableStateReason:
    """Reasons an order table rejects a state change"""

    GROUPED_TABLE = "table belongs to a table group"
    ORDERS_IN_PROGRESS = "table has orders in progress"
    EMPTY_TABLE = "table is empty"


class OrderReason:
    """Reasons an order cannot be placed or changed"""

    NO_LINE_ITEMS = "order has no line items"
    DUPLICATE_MENU = "order lists the same menu more than once"
    EMPTY_TABLE = "order cannot be placed on an empty table"
    ALREADY_COMPLETED = "completed order cannot change status"


class TableGroupPolicy:
    """Table group sizing"""

    MIN_TABLES = 2


class CountLimits:
    """Upper bounds of the integer columns counts are stored in"""

    MAX_QUANTITY = 2 ** 63 - 1  # BigInteger
    MAX_GUESTS = 2 ** 31 - 1  # Integer


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class ServerConfig:
    """Server configuration constants"""

    HOST = HOST
    PORT = PORT

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"
