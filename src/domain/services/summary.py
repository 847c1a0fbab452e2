"""Domain services for the dashboard summary."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_DEBT_TYPES,
    CATEGORY_FIXED_EXPENSE,
    CATEGORY_INCOME,
    CATEGORY_UTILITY,
)
from src.domain.models import (
    DebtPayment,
    Loan,
    RecordRow,
    RevolvingDebt,
    Summary,
)
from src.utils.decimal_utils import coerce_decimal


def payments_by_debt(payments: Iterable[DebtPayment]) -> dict[int, Decimal]:
    """Map debt ids to the total paid in the given payment rows.

    Args:
        payments: Payments already filtered to a single period.

    Returns:
        dict[int, Decimal]: Amount paid per debt id.
    """
    totals: dict[int, Decimal] = {}
    for payment in payments:
        totals[payment.debt_id] = (
            totals.get(payment.debt_id, Decimal("0"))
            + coerce_decimal(payment.amount)
        )
    return totals


def effective_debt_payment(debt: RevolvingDebt, paid: Decimal) -> Decimal:
    """Return the obligation shown for a revolving debt this period.

    Temporary debts are due in full; regular debts owe at least their
    minimum. An actual payment above the requirement is never understated.
    """
    if debt.is_temporary:
        return max(paid, coerce_decimal(debt.current_balance))
    return max(paid, coerce_decimal(debt.minimum_payment))


def compute_summary(
    records: Iterable[RecordRow],
    loans: Iterable[Loan],
    debts: Iterable[RevolvingDebt],
    period_payments: Mapping[int, Decimal],
) -> Summary:
    """Aggregate records, loans and revolving debts into a summary.

    Args:
        records: Records of the period joined to their category type.
        loans: Loans in scope.
        debts: Revolving debts in scope.
        period_payments: Amount paid per debt id during the period.

    Returns:
        Summary: Category totals, credit utilization and net cash flow.
    """
    income = Decimal("0")
    fixed = Decimal("0")
    utilities = Decimal("0")
    category_debts = Decimal("0")
    for record in records:
        amount = coerce_decimal(record.amount)
        if record.category_type == CATEGORY_INCOME:
            income += amount
        elif record.category_type == CATEGORY_FIXED_EXPENSE:
            fixed += amount
        elif record.category_type == CATEGORY_UTILITY:
            utilities += amount
        elif record.category_type in CATEGORY_DEBT_TYPES:
            category_debts += amount

    loan_payments = Decimal("0")
    loans_remaining = Decimal("0")
    for loan in loans:
        loan_payments += coerce_decimal(loan.monthly_payment)
        loans_remaining += coerce_decimal(loan.remaining_balance)

    debt_payments = Decimal("0")
    one_time = Decimal("0")
    minimums_due = Decimal("0")
    debts_remaining = Decimal("0")
    credit_limit = Decimal("0")
    for debt in debts:
        paid = period_payments.get(debt.id, Decimal("0"))
        debt_payments += effective_debt_payment(debt, paid)
        if debt.is_temporary:
            one_time += coerce_decimal(debt.current_balance)
        else:
            minimums_due += coerce_decimal(debt.minimum_payment)
        debts_remaining += coerce_decimal(debt.current_balance)
        credit_limit += coerce_decimal(debt.credit_limit)

    net_cash_flow = income - (
        fixed + utilities + category_debts + loan_payments + debt_payments
    )
    return Summary(
        total_income=income,
        total_fixed_expenses=fixed,
        total_utilities=utilities,
        total_category_debts=category_debts,
        total_loan_payments=loan_payments,
        total_debt_payments=debt_payments,
        total_loans_remaining=loans_remaining,
        total_debts_remaining=debts_remaining,
        total_minimum_payments_due=minimums_due,
        total_one_time_payments=one_time,
        total_credit_limit=credit_limit,
        total_credit_available=credit_limit - debts_remaining,
        net_cash_flow=net_cash_flow,
    )


__all__ = ["payments_by_debt", "effective_debt_payment", "compute_summary"]
