"""Smart suggestion engine allocating a period's surplus."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_INCOME,
    INVESTMENT_ANNUAL_RETURN,
    INVESTMENT_PROJECTION_MONTHS,
)
from src.domain.models import (
    InvestmentOption,
    InvestmentProjection,
    Loan,
    PayoffRecommendation,
    RecordRow,
    RevolvingDebt,
    SmartSuggestion,
    SuggestedDebt,
)
from src.domain.services.amortization import (
    NEVER,
    estimate_interest,
    interest_saved,
    months_saved,
    months_to_payoff,
)
from src.utils.decimal_utils import coerce_decimal, round_cents, round_units


SUGGESTION_NONE = "none"
SUGGESTION_INVEST = "invest"
SUGGESTION_PAY_DEBT = "pay_debt"

INVESTMENT_OPTIONS = (
    InvestmentOption(
        name="Emergency Fund",
        description="Build 3-6 months of expenses",
        priority=1,
    ),
    InvestmentOption(
        name="Index Funds",
        description="Low-cost diversified investing",
        priority=2,
    ),
    InvestmentOption(
        name="Retirement Savings",
        description="Tax-advantaged accounts",
        priority=3,
    ),
)


def compute_surplus(
    records: Iterable[RecordRow],
    loans: Iterable[Loan],
    debts: Iterable[RevolvingDebt],
    period_payments: Mapping[int, Decimal],
) -> Decimal:
    """Return income minus expenses, loan payments and actual debt payments.

    Unlike the summary, revolving debts contribute only what was actually
    paid during the period.
    """
    income = Decimal("0")
    expenses = Decimal("0")
    for record in records:
        if record.category_type == CATEGORY_INCOME:
            income += coerce_decimal(record.amount)
        else:
            expenses += coerce_decimal(record.amount)
    for loan in loans:
        expenses += coerce_decimal(loan.monthly_payment)
    for debt in debts:
        expenses += period_payments.get(debt.id, Decimal("0"))
    return income - expenses


def rank_payable_debts(debts: Iterable[RevolvingDebt]) -> list[RevolvingDebt]:
    """Return debts with a positive balance, highest interest rate first.

    Equal rates are ordered by ascending id so the ranking does not depend
    on storage iteration order.
    """
    payable = [
        debt for debt in debts if coerce_decimal(debt.current_balance) > 0
    ]
    return sorted(
        payable,
        key=lambda debt: (
            -coerce_decimal(debt.interest_rate),
            debt.id if debt.id is not None else 0,
        ),
    )


def build_smart_suggestion(
    surplus: Decimal,
    debts: Iterable[RevolvingDebt],
    currency_symbol: str = "₪",
) -> SmartSuggestion:
    """Recommend paying down the costliest debt or investing the surplus.

    Args:
        surplus: Amount left after the period's expenses.
        debts: Revolving debts in scope.
        currency_symbol: Symbol used in the human message.

    Returns:
        SmartSuggestion: ``none`` without surplus, ``invest`` without
        payable debts, otherwise ``pay_debt`` targeting the highest rate.
    """
    if surplus <= 0:
        return SmartSuggestion(
            has_suggestion=False,
            suggestion_type=SUGGESTION_NONE,
            surplus=round_cents(surplus),
            message=(
                "No surplus available. Focus on reducing expenses or "
                "increasing income."
            ),
        )

    ranked = rank_payable_debts(debts)
    if not ranked:
        return _investment_suggestion(surplus, currency_symbol)
    return _payoff_suggestion(surplus, ranked[0], currency_symbol)


def project_investment(
    monthly_amount: Decimal,
    annual_return: Decimal = INVESTMENT_ANNUAL_RETURN,
    months: int = INVESTMENT_PROJECTION_MONTHS,
) -> tuple[Decimal, Decimal, Decimal]:
    """Return (future value, total invested, gain) of a monthly annuity."""
    rate = annual_return / Decimal(12)
    future_value = monthly_amount * (((1 + rate) ** months - 1) / rate)
    total_invested = monthly_amount * months
    return future_value, total_invested, future_value - total_invested


def _investment_suggestion(
    surplus: Decimal,
    currency_symbol: str,
) -> SmartSuggestion:
    future_value, total_invested, gain = project_investment(surplus)
    return_percent = (INVESTMENT_ANNUAL_RETURN * 100).normalize()
    return SmartSuggestion(
        has_suggestion=True,
        suggestion_type=SUGGESTION_INVEST,
        surplus=round_cents(surplus),
        message=(
            "Great news! No debts to pay off. Consider investing your "
            f"{currency_symbol}{round_units(surplus)} surplus."
        ),
        investment=InvestmentProjection(
            monthly_surplus=round_cents(surplus),
            projected_value=round_units(future_value),
            total_invested=round_units(total_invested),
            projected_gain=round_units(gain),
            assumed_return=f"{return_percent:f}% annually",
            months=INVESTMENT_PROJECTION_MONTHS,
        ),
        options=list(INVESTMENT_OPTIONS),
    )


def _payoff_suggestion(
    surplus: Decimal,
    debt: RevolvingDebt,
    currency_symbol: str,
) -> SmartSuggestion:
    balance = coerce_decimal(debt.current_balance)
    rate = coerce_decimal(debt.interest_rate)
    minimum = coerce_decimal(debt.minimum_payment)

    # Without a minimum payment the baseline pays the surplus each month.
    baseline_payment = minimum if minimum > 0 else surplus
    without_extra = months_to_payoff(
        balance,
        baseline_payment,
        rate if minimum > 0 else Decimal("0"),
    )
    extra_payment = min(surplus, balance)
    new_payment = minimum + extra_payment
    with_extra = months_to_payoff(balance, new_payment, rate)
    saved_months = months_saved(without_extra, with_extra)
    saved_interest = interest_saved(
        estimate_interest(baseline_payment, without_extra, balance),
        estimate_interest(new_payment, with_extra, balance),
    )

    if rate > 0:
        message = (
            f"Pay extra {currency_symbol}{round_units(extra_payment)} to "
            f"\"{debt.name}\" ({rate.normalize():f}% APR) to save "
            f"{_format_months(saved_months)} months!"
        )
    else:
        message = (
            f"Pay extra {currency_symbol}{round_units(extra_payment)} to "
            f"\"{debt.name}\" to pay it off faster!"
        )

    return SmartSuggestion(
        has_suggestion=True,
        suggestion_type=SUGGESTION_PAY_DEBT,
        surplus=round_cents(surplus),
        message=message,
        debt=SuggestedDebt(
            id=debt.id,
            name=debt.name,
            interest_rate=rate,
            remaining_balance=balance,
            monthly_payment=minimum,
            user_name=debt.user_name,
        ),
        recommendation=PayoffRecommendation(
            extra_payment=round_cents(extra_payment),
            months_saved=saved_months,
            interest_saved=(
                saved_interest
                if saved_interest.is_infinite()
                else round_cents(saved_interest)
            ),
            months_to_payoff=with_extra,
        ),
    )


def _format_months(months: int | float) -> str:
    return "∞" if months == NEVER else str(months)


__all__ = [
    "SUGGESTION_NONE",
    "SUGGESTION_INVEST",
    "SUGGESTION_PAY_DEBT",
    "INVESTMENT_OPTIONS",
    "compute_surplus",
    "rank_payable_debts",
    "build_smart_suggestion",
    "project_investment",
]
