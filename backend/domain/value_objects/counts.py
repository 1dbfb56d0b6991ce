"""
Count checks shared by menu lines, order lines and order tables.
"""

from constants import CountLimits
from exceptions import ValidationError


def require_count(field: str, value: int, maximum: int = CountLimits.MAX_QUANTITY) -> int:
    """
    Check that a count is non-negative and fits its storage column.

    Args:
        field: Name reported in the error
        value: Count to check
        maximum: Largest value the column can hold

    Returns:
        value, unchanged

    Raises:
        ValidationError: If value is negative or above maximum
    """
    if value < 0:
        raise ValidationError(f"{field} cannot be negative: {value}", {field: value})
    if value > maximum:
        raise ValidationError(f"{field} is too large: {value}", {field: value})
    return value
