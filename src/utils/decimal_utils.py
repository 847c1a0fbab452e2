"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal


CENTS = Decimal("0.01")
UNITS = Decimal("1")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    """Round a Decimal half-up to two decimal places."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_units(value: Decimal) -> Decimal:
    """Round a Decimal half-up to a whole unit."""
    return value.quantize(UNITS, rounding=ROUND_HALF_UP)


__all__ = ["CENTS", "coerce_decimal", "round_cents", "round_units"]
