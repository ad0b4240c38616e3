"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from wms.domain.exceptions import ValidationError


def canonical_name(name: str) -> str:
    """Upper-case the first character of *name*, leaving the rest as is.

    ``"books"`` and ``"Books"`` share a canonical form; ``"bOOKS"``
    becomes ``"BOOKS"``.
    """
    return name[:1].upper() + name[1:]


@dataclass(frozen=True)
class Money:
    """Exact monetary amount.

    Uses Decimal to avoid floating-point rounding errors. Equality is by
    numeric value and ignores scale, so ``Money.of("5.0") == Money.of("5.00")``
    where a scale-sensitive comparison would tell them apart. The sign is
    not checked: warehouses accept whatever price the caller supplies.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal | Money) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, Money):
            return amount
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))
