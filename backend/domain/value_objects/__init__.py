"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

- OrderStatus: closed set of order lifecycle states
- Price: non-negative monetary amount
- require_count: range check for quantities and guest counts
"""

from .order_status import OrderStatus
from .price import Price

__all__ = ["OrderStatus", "Price"]
