"""Loading of the ledger rows a period view is computed from."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import (
    DebtPayment,
    Loan,
    RecordRow,
    RevolvingDebt,
    Scope,
)
from src.domain.services import payments_by_debt


@dataclass(frozen=True)
class PeriodSnapshot:
    """Ledger rows of one scope and period.

    Attributes:
        records: Records of the period joined to their category.
        loans: Loans in scope.
        debts: Revolving debts in scope, ordered by id.
        payments: Debt payments recorded in the period.
    """

    records: list[RecordRow]
    loans: list[Loan]
    debts: list[RevolvingDebt]
    payments: list[DebtPayment]

    @property
    def period_payments(self) -> dict[int, Decimal]:
        return payments_by_debt(self.payments)


def load_period_snapshot(
    repository: LedgerRepositoryPort,
    scope: Scope,
) -> PeriodSnapshot:
    """Fetch the records, loans, debts and payments of a scope."""
    return PeriodSnapshot(
        records=repository.fetch_records(scope.period, scope.user_id),
        loans=repository.fetch_loans(scope.user_id),
        debts=repository.fetch_debts(scope.user_id),
        payments=repository.fetch_debt_payments(
            [scope.period],
            scope.user_id,
        ),
    )


__all__ = ["PeriodSnapshot", "load_period_snapshot"]
