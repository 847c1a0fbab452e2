"""Tests for the smart suggestion engine."""

from datetime import date
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_FIXED_EXPENSE,
    CATEGORY_INCOME,
    CATEGORY_UTILITY,
)
from src.domain.models import Loan, Period, RecordRow, RevolvingDebt
from src.domain.services.amortization import NEVER
from src.domain.services.suggestion import (
    SUGGESTION_INVEST,
    SUGGESTION_NONE,
    SUGGESTION_PAY_DEBT,
    build_smart_suggestion,
    compute_surplus,
    project_investment,
    rank_payable_debts,
)


PERIOD = Period(2025, 1)


def _debt(
    debt_id: int,
    rate: str,
    balance: str,
    minimum: str = "200",
    name: str = "Card",
) -> RevolvingDebt:
    return RevolvingDebt(
        id=debt_id,
        user_id=1,
        name=name,
        current_balance=Decimal(balance),
        minimum_payment=Decimal(minimum),
        interest_rate=Decimal(rate),
        user_name="Dana",
    )


def test_household_scenario_targets_the_only_debt() -> None:
    """Income 10000 minus expenses, loan and paid minimum leaves 4800."""
    records = [
        RecordRow(1, 1, 1, "Salary", CATEGORY_INCOME, Decimal("10000"), PERIOD),
        RecordRow(2, 1, 2, "Rent", CATEGORY_FIXED_EXPENSE, Decimal("3000"), PERIOD),
        RecordRow(3, 1, 3, "Power", CATEGORY_UTILITY, Decimal("500"), PERIOD),
    ]
    loan = Loan(
        id=4,
        user_id=1,
        name="Car",
        total_principal=Decimal("30000"),
        remaining_balance=Decimal("20000"),
        interest_rate=Decimal("6"),
        monthly_payment=Decimal("1500"),
        start_date=date(2024, 1, 1),
    )
    debt = _debt(5, "20", "5000")

    surplus = compute_surplus(records, [loan], [debt], {5: Decimal("200")})
    suggestion = build_smart_suggestion(surplus, [debt])

    assert surplus == Decimal("4800")
    assert suggestion.has_suggestion is True
    assert suggestion.suggestion_type == SUGGESTION_PAY_DEBT
    assert suggestion.debt.id == 5
    assert suggestion.recommendation.extra_payment == Decimal("4800.00")
    assert suggestion.recommendation.months_to_payoff == 2
    assert suggestion.recommendation.months_saved == 31
    assert suggestion.message == (
        'Pay extra ₪4800 to "Card" (20% APR) to save 31 months!'
    )


def test_no_surplus_returns_none_suggestion() -> None:
    """A non-positive surplus yields no suggestion."""
    suggestion = build_smart_suggestion(Decimal("-10"), [_debt(1, "20", "100")])

    assert suggestion.has_suggestion is False
    assert suggestion.suggestion_type == SUGGESTION_NONE
    assert suggestion.surplus == Decimal("-10.00")
    assert suggestion.debt is None


def test_no_payable_debt_returns_investment_projection() -> None:
    """Without a positive balance the surplus is suggested for investing."""
    suggestion = build_smart_suggestion(
        Decimal("1000"),
        [_debt(1, "20", "0")],
        currency_symbol="$",
    )

    assert suggestion.suggestion_type == SUGGESTION_INVEST
    assert "$1000" in suggestion.message
    assert suggestion.investment.months == 60
    assert suggestion.investment.assumed_return == "7% annually"
    assert suggestion.investment.total_invested == Decimal("60000")
    assert suggestion.investment.projected_value == Decimal("71593")
    assert [option.priority for option in suggestion.options] == [1, 2, 3]
    assert suggestion.options[0].name == "Emergency Fund"


def test_project_investment_matches_annuity_formula() -> None:
    """Future value follows the ordinary annuity formula."""
    future_value, invested, gain = project_investment(Decimal("100"))

    assert invested == Decimal("6000")
    assert round(future_value, 2) == Decimal("7159.29")
    assert gain == future_value - invested


def test_ranking_prefers_highest_rate_then_lowest_id() -> None:
    """Debts are ranked by rate, ties by id, cleared debts dropped."""
    ranked = rank_payable_debts(
        [
            _debt(4, "12", "100"),
            _debt(2, "24", "100"),
            _debt(3, "12", "100"),
            _debt(1, "30", "0"),
        ]
    )

    assert [debt.id for debt in ranked] == [2, 3, 4]


def test_zero_rate_debt_message_and_baseline() -> None:
    """A debt without interest gets the pay-off-faster message."""
    suggestion = build_smart_suggestion(
        Decimal("300"),
        [_debt(1, "0", "1200", minimum="100", name="Friend")],
    )

    assert suggestion.message == 'Pay extra ₪300 to "Friend" to pay it off faster!'
    assert suggestion.recommendation.months_to_payoff == 3
    assert suggestion.recommendation.months_saved == 9


def test_missing_minimum_uses_surplus_as_baseline() -> None:
    """Without a minimum payment the baseline pays the surplus monthly."""
    suggestion = build_smart_suggestion(
        Decimal("500"),
        [_debt(1, "0", "2000", minimum="0")],
    )

    # Baseline 2000 / 500 = 4 months, extra payment of 500 also gives 4.
    assert suggestion.recommendation.extra_payment == Decimal("500.00")
    assert suggestion.recommendation.months_saved == 0


def test_uncovered_interest_reports_unbounded_savings() -> None:
    """When the minimum never covers interest the months saved are infinite."""
    suggestion = build_smart_suggestion(
        Decimal("1000"),
        [_debt(1, "24", "10000", minimum="100")],
    )

    assert suggestion.recommendation.months_saved == NEVER
    assert suggestion.recommendation.interest_saved.is_infinite()
    assert "save ∞ months" in suggestion.message


def test_more_surplus_never_hurts() -> None:
    """Extra payment grows and payoff months shrink as surplus grows."""
    surpluses = [Decimal("100"), Decimal("1000"), Decimal("4800"), Decimal("9000")]
    debt = _debt(1, "20", "5000")
    results = [
        build_smart_suggestion(surplus, [debt]).recommendation
        for surplus in surpluses
    ]

    extras = [result.extra_payment for result in results]
    months = [result.months_to_payoff for result in results]
    assert extras == sorted(extras)
    assert months == sorted(months, reverse=True)
    assert all(extra <= Decimal("5000") for extra in extras)
