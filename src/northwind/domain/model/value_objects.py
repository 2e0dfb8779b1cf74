"""Validated scalar types used by the order and catalog models.

Each type checks its value on construction and is frozen afterwards, so
holding one is proof the value passed the check.  The models store the
plain ``.amount`` / ``.value`` and use these types only at their edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from northwind.domain.exceptions import ValidationError

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Money:
    """A price or freight charge; never negative, always a Decimal."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Invalid money amount: {self.amount}")
        if self.amount < _ZERO:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Parse user or database input.  Floats go through ``str`` first."""
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """Units of a product on one order line."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity.
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Discount:
    """Fraction of the line price taken off, between 0.0 and 1.0."""

    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise ValidationError(
                f"Discount must be between 0 and 1, got {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.value:.0%}"

    @staticmethod
    def of(value: str | float | int) -> Discount:
        try:
            return Discount(float(value))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid discount: {value!r}") from exc
