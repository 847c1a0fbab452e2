"""Amortization math for fixed-payment payoff projections."""

from decimal import ROUND_CEILING, Decimal
import math


NEVER = math.inf

_HUNDRED = Decimal("100")
_MONTHS_PER_YEAR = Decimal("12")


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage rate into a monthly fraction."""
    return annual_rate_percent / _HUNDRED / _MONTHS_PER_YEAR


def months_to_payoff(
    balance: Decimal,
    payment: Decimal,
    annual_rate_percent: Decimal,
) -> int | float:
    """Return the number of monthly payments needed to clear a balance.

    Args:
        balance: Remaining balance.
        payment: Fixed monthly payment.
        annual_rate_percent: Annual interest rate in percent.

    Returns:
        int | float: Whole months to payoff, or ``NEVER`` (``math.inf``)
        when the payment is zero or does not cover the monthly interest.
    """
    if balance <= 0:
        return 0
    if payment <= 0:
        return NEVER
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return _ceil(balance / payment)
    if payment <= balance * rate:
        return NEVER
    numerator = -(Decimal(1) - rate * balance / payment).ln()
    denominator = (Decimal(1) + rate).ln()
    return _ceil(numerator / denominator)


def months_saved(without_extra: int | float, with_extra: int | float) -> int | float:
    """Return ``max(0, without - with)`` tolerating unbounded terms."""
    if with_extra == NEVER:
        return 0
    if without_extra == NEVER:
        return NEVER
    return max(0, without_extra - with_extra)


def estimate_interest(
    payment: Decimal,
    months: int | float,
    balance: Decimal,
) -> Decimal:
    """Approximate total interest as ``payment * months - balance``.

    This is a deliberate approximation rather than an amortized interest
    sum. Unbounded payoffs yield ``Decimal('Infinity')``.
    """
    if months == NEVER:
        return Decimal("Infinity")
    return max(Decimal("0"), payment * months - balance)


def interest_saved(without_extra: Decimal, with_extra: Decimal) -> Decimal:
    """Return ``max(0, without - with)`` for interest estimates."""
    if with_extra.is_infinite():
        return Decimal("0")
    if without_extra.is_infinite():
        return without_extra
    return max(Decimal("0"), without_extra - with_extra)


def _ceil(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


__all__ = [
    "NEVER",
    "monthly_rate",
    "months_to_payoff",
    "months_saved",
    "estimate_interest",
    "interest_saved",
]
