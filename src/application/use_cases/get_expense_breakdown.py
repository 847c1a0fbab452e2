"""Use case to break down a period's expenses."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.period_snapshot import load_period_snapshot
from src.domain.models import ExpenseBreakdownItem, Scope
from src.domain.services import compute_expense_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetExpenseBreakdownUseCase:
    """Aggregate expenses by category, loan and debt."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, scope: Scope) -> list[ExpenseBreakdownItem]:
        """Return non-zero expense items of a scope, largest first."""
        snapshot = load_period_snapshot(self._repository, scope)
        items = compute_expense_breakdown(
            snapshot.records,
            snapshot.loans,
            snapshot.debts,
            snapshot.period_payments,
        )
        self._logger.info(
            f"Expense breakdown for period={scope.period} "
            f"user={scope.user_id or 'family'}: {len(items)} items"
        )
        return items


__all__ = ["GetExpenseBreakdownUseCase"]
