"""Fixed-point helpers for currency amounts.

Amounts are persisted as floats but every calculation goes through Decimal,
quantized to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Convert a float, int, str or Decimal into a 2-place Decimal."""
    if value is None:
        return ZERO
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(quantity: int, unit_price) -> Decimal:
    return (to_money(unit_price) * quantity).quantize(CENT, rounding=ROUND_HALF_UP)


def as_amount(value) -> float:
    """Round to cents and return the float stored on aggregates."""
    return float(to_money(value))
