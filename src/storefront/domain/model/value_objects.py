"""Money as the shop prices it.

Amounts are Decimals in a single currency (VND unless stated), never
negative. ``Money.of`` is the entry point for numbers coming off the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering

from storefront.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "VND"


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount tagged with its currency."""

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money needs a Decimal amount, not {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Negative price: {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same(other).amount, self.currency)

    def __mul__(self, quantity: int) -> Money:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"Money scales by whole quantities, got {quantity!r}")
        return Money(self.amount * quantity, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same(other).amount

    def __str__(self) -> str:
        if self.currency == "VND":
            # 100.000₫
            return f"{self.amount:,.0f}".replace(",", ".") + "₫"
        return f"{self.amount:,.2f} {self.currency}"

    def to_number(self) -> int | float:
        """JSON number for request bodies; int when the amount is whole."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    def _same(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )
        return other

    @classmethod
    def of(cls, amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return cls(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(Decimal(0), currency)
