"""Domain services for debt overview, trends and per-user comparison."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_INCOME,
    LOANS_BUCKET,
    VARIABLE_DEBTS_BUCKET,
)
from src.domain.models import (
    DebtOverview,
    DebtPayment,
    DebtTrendPoint,
    DebtTypeBucket,
    ExpenseBreakdownItem,
    Loan,
    Period,
    RecordRow,
    RevolvingDebt,
    User,
    UserComparison,
)
from src.utils.decimal_utils import coerce_decimal, round_cents


def compute_debt_overview(
    loans: Sequence[Loan],
    debts: Sequence[RevolvingDebt],
) -> DebtOverview:
    """Aggregate loans and revolving debts for the overview widget.

    Loans are visited before revolving debts and the first item reaching
    the highest rate keeps it, so ties resolve to the first seen.

    Args:
        loans: Loans in scope.
        debts: Revolving debts in scope.

    Returns:
        DebtOverview: Totals, highest and average rates, bucket breakdown.
    """
    total_debt = Decimal("0")
    total_payments = Decimal("0")
    highest_rate = Decimal("0")
    highest_item: str | None = None
    rate_sum = Decimal("0")
    rated_items = 0

    # (bucket, name, balance, monthly obligation, rate)
    items: list[tuple[str, str, Decimal, Decimal, Decimal]] = [
        (
            LOANS_BUCKET,
            loan.name,
            coerce_decimal(loan.remaining_balance),
            coerce_decimal(loan.monthly_payment),
            coerce_decimal(loan.interest_rate),
        )
        for loan in loans
    ] + [
        (
            VARIABLE_DEBTS_BUCKET,
            debt.name,
            coerce_decimal(debt.current_balance),
            coerce_decimal(debt.minimum_payment),
            coerce_decimal(debt.interest_rate),
        )
        for debt in debts
    ]

    buckets: dict[str, tuple[int, Decimal, list[str]]] = {
        LOANS_BUCKET: (0, Decimal("0"), []),
        VARIABLE_DEBTS_BUCKET: (0, Decimal("0"), []),
    }
    for bucket, name, balance, payment, rate in items:
        total_debt += balance
        total_payments += payment
        if rate > highest_rate:
            highest_rate = rate
            highest_item = name
        if rate > 0:
            rate_sum += rate
            rated_items += 1
        count, total, names = buckets[bucket]
        buckets[bucket] = (count + 1, total + balance, [*names, name])

    average = (
        round_cents(rate_sum / rated_items) if rated_items else Decimal("0")
    )
    return DebtOverview(
        total_debt=total_debt,
        total_monthly_payments=total_payments,
        loan_count=len(loans),
        debt_count=len(debts),
        highest_interest_rate=highest_rate,
        highest_interest_item=highest_item,
        average_interest_rate=average,
        debts_by_type={
            bucket: DebtTypeBucket(count=count, total=total, names=names)
            for bucket, (count, total, names) in buckets.items()
        },
    )


def compute_debt_trends(
    periods: Sequence[Period],
    loans: Iterable[Loan],
    payments: Iterable[DebtPayment],
) -> list[DebtTrendPoint]:
    """Build per-period loan and revolving-debt payment totals.

    Loan payments are constant across periods; revolving payments are the
    recorded payments whose period matches.

    Args:
        periods: Periods to report, oldest first.
        loans: Loans in scope.
        payments: Debt payments in scope across the periods.

    Returns:
        list[DebtTrendPoint]: One point per period in the given order.
    """
    loan_total = sum(
        (coerce_decimal(loan.monthly_payment) for loan in loans),
        Decimal("0"),
    )
    per_period: dict[Period, Decimal] = {}
    for payment in payments:
        per_period[payment.period] = (
            per_period.get(payment.period, Decimal("0"))
            + coerce_decimal(payment.amount)
        )
    return [
        DebtTrendPoint(
            period=period,
            label=period.short_label(),
            loan_payments=loan_total,
            debt_payments=per_period.get(period, Decimal("0")),
        )
        for period in periods
    ]


def compute_user_comparison(
    users: Iterable[User],
    records: Iterable[RecordRow],
    loans: Iterable[Loan],
    debts: Iterable[RevolvingDebt],
    payments: Iterable[DebtPayment],
) -> list[UserComparison]:
    """Compare income and expenses of each real user for a period.

    Args:
        users: Real users, in display order.
        records: Records of the period.
        loans: Loans of every user.
        debts: Revolving debts of every user, used to map payment owners.
        payments: Debt payments of the period.

    Returns:
        list[UserComparison]: One entry per user.
    """
    income: dict[int, Decimal] = {}
    expenses: dict[int, Decimal] = {}

    def _add(target: dict[int, Decimal], user_id: int, amount) -> None:
        target[user_id] = (
            target.get(user_id, Decimal("0")) + coerce_decimal(amount)
        )

    for record in records:
        if record.category_type == CATEGORY_INCOME:
            _add(income, record.user_id, record.amount)
        else:
            _add(expenses, record.user_id, record.amount)
    for loan in loans:
        _add(expenses, loan.user_id, loan.monthly_payment)
    owner_by_debt = {debt.id: debt.user_id for debt in debts}
    for payment in payments:
        owner = owner_by_debt.get(payment.debt_id)
        if owner is not None:
            _add(expenses, owner, payment.amount)

    return [
        UserComparison(
            user_id=user.id,
            name=user.name,
            income=income.get(user.id, Decimal("0")),
            expenses=expenses.get(user.id, Decimal("0")),
        )
        for user in users
    ]


def compute_expense_breakdown(
    records: Iterable[RecordRow],
    loans: Iterable[Loan],
    debts: Iterable[RevolvingDebt],
    period_payments: Mapping[int, Decimal],
) -> list[ExpenseBreakdownItem]:
    """Aggregate expense amounts by category, loan and debt name.

    Args:
        records: Records of the period (income rows are ignored).
        loans: Loans in scope.
        debts: Revolving debts in scope.
        period_payments: Amount paid per debt id during the period.

    Returns:
        list[ExpenseBreakdownItem]: Non-zero items, largest first.
    """
    totals: dict[str, Decimal] = {}
    types: dict[str, str] = {}

    def _add(name: str, amount: Decimal, item_type: str) -> None:
        if name not in totals:
            totals[name] = Decimal("0")
            types[name] = item_type
        totals[name] += amount

    for record in records:
        if record.category_type == CATEGORY_INCOME:
            continue
        _add(
            record.category_name,
            coerce_decimal(record.amount),
            record.category_type,
        )
    for loan in loans:
        _add(loan.name, coerce_decimal(loan.monthly_payment), "Loan")
    for debt in debts:
        paid = period_payments.get(debt.id, Decimal("0"))
        if paid > 0:
            _add(debt.name, paid, "Debt")

    items = [
        ExpenseBreakdownItem(name=name, value=value, type=types[name])
        for name, value in totals.items()
        if value > 0
    ]
    return sorted(items, key=lambda item: item.value, reverse=True)


__all__ = [
    "compute_debt_overview",
    "compute_debt_trends",
    "compute_user_comparison",
    "compute_expense_breakdown",
]
