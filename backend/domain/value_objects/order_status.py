"""
OrderStatus Value Object

Immutable representation of an order's place in the kitchen lifecycle.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """
    Order lifecycle state.

    COOKING -> MEAL -> COMPLETION. COMPLETION is terminal: an order in that
    state is fully settled and no longer blocks its table.
    """

    COOKING = "COOKING"
    MEAL = "MEAL"
    COMPLETION = "COMPLETION"

    def is_terminal(self) -> bool:
        """Check if this state is terminal (no further transitions)."""
        return self is OrderStatus.COMPLETION

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Any non-terminal status may move to any status, including back to an
        earlier one; a completed order never changes.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return not self.is_terminal()

    @classmethod
    def from_string(cls, value: str) -> "OrderStatus":
        """
        Create OrderStatus from string value.

        Args:
            value: String representation (case-insensitive)

        Returns:
            OrderStatus instance

        Raises:
            ValueError: If value is not a valid status
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid order status: {value}")
