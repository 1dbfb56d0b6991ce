"""
Price Value Object

Immutable monetary amount used for product and menu prices.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from exceptions import ValidationError


@dataclass(frozen=True)
class Price:
    """
    Immutable non-negative price.

    Amounts are kept as Decimal so values read back from the database
    compare equal to the values that were written.
    """

    amount: Decimal

    def __post_init__(self):
        """Validate price."""
        if self.amount is None:
            raise ValidationError("Price is required", {"price": None})
        if not self.amount.is_finite():
            raise ValidationError(f"Price is not a number: {self.amount}", {"price": str(self.amount)})
        if self.amount < 0:
            raise ValidationError(f"Price cannot be negative: {self.amount}", {"price": str(self.amount)})

    @classmethod
    def of(cls, value) -> "Price":
        """
        Create Price from an int, str, float or Decimal.

        Raises:
            ValidationError: If value is missing, not numeric or negative
        """
        if isinstance(value, Price):
            return value
        if value is None:
            raise ValidationError("Price is required", {"price": None})
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"Price is not a number: {value!r}", {"price": str(value)})
        return cls(amount=amount)

    def __str__(self) -> str:
        return str(self.amount)
