"""Tests for the amortization calculator."""

from decimal import Decimal

import pytest

from src.domain.services.amortization import (
    NEVER,
    estimate_interest,
    interest_saved,
    monthly_rate,
    months_saved,
    months_to_payoff,
)


def test_zero_balance_needs_no_months() -> None:
    """A cleared balance needs 0 months whatever the payment or rate."""
    assert months_to_payoff(Decimal("0"), Decimal("0"), Decimal("30")) == 0
    assert months_to_payoff(Decimal("0"), Decimal("100"), Decimal("0")) == 0


def test_zero_payment_never_pays_off() -> None:
    """Without a payment the balance never clears."""
    assert months_to_payoff(Decimal("500"), Decimal("0"), Decimal("0")) == NEVER


def test_zero_rate_is_ceiling_division() -> None:
    """With no interest the term is ceil(balance / payment)."""
    assert months_to_payoff(Decimal("1200"), Decimal("100"), Decimal("0")) == 12
    assert months_to_payoff(Decimal("1201"), Decimal("100"), Decimal("0")) == 13


def test_payment_equal_to_interest_never_pays_off() -> None:
    """A payment that only covers the interest is unbounded."""
    # 24% yearly on 1000 accrues exactly 20 a month.
    assert monthly_rate(Decimal("24")) == Decimal("0.02")
    assert months_to_payoff(Decimal("1000"), Decimal("20"), Decimal("24")) == NEVER
    assert months_to_payoff(Decimal("1000"), Decimal("10"), Decimal("24")) == NEVER


def test_amortization_formula_branch() -> None:
    """Interest-bearing balances follow the standard amortization formula."""
    assert months_to_payoff(Decimal("5000"), Decimal("200"), Decimal("20")) == 33
    assert months_to_payoff(Decimal("5000"), Decimal("5000"), Decimal("20")) == 2


@pytest.mark.parametrize(
    ("without", "with_extra", "expected"),
    [
        (33, 2, 31),
        (2, 5, 0),
        (NEVER, 10, NEVER),
        (10, NEVER, 0),
    ],
)
def test_months_saved(without, with_extra, expected) -> None:
    """Months saved never goes negative and tolerates unbounded terms."""
    assert months_saved(without, with_extra) == expected


def test_interest_estimates() -> None:
    """Interest is approximated as payment * months - balance."""
    assert estimate_interest(Decimal("200"), 33, Decimal("5000")) == Decimal("1600")
    assert estimate_interest(Decimal("100"), 12, Decimal("1200")) == Decimal("0")
    assert estimate_interest(Decimal("10"), NEVER, Decimal("1000")).is_infinite()

    assert interest_saved(Decimal("1600"), Decimal("400")) == Decimal("1200")
    assert interest_saved(Decimal("400"), Decimal("1600")) == Decimal("0")
    assert interest_saved(Decimal("Infinity"), Decimal("10")).is_infinite()
    assert interest_saved(Decimal("10"), Decimal("Infinity")) == Decimal("0")
