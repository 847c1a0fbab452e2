"""Use case to compute the dashboard summary of a period."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.period_snapshot import load_period_snapshot
from src.domain.models import Scope, Summary
from src.domain.services import compute_summary
from src.infrastructure.logging.logger import get_app_logger


class GetSummaryUseCase:
    """Aggregate records, loans and revolving debts into a summary."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, scope: Scope) -> Summary:
        """Return the summary of a scope.

        Args:
            scope: Period and optional user to aggregate.

        Returns:
            Summary: Totals by category type, credit and net cash flow.
        """
        snapshot = load_period_snapshot(self._repository, scope)
        summary = compute_summary(
            snapshot.records,
            snapshot.loans,
            snapshot.debts,
            snapshot.period_payments,
        )
        self._logger.info(
            f"Summary computed for period={scope.period} "
            f"user={scope.user_id or 'family'}: "
            f"income={summary.total_income}, net={summary.net_cash_flow}"
        )
        return summary


__all__ = ["GetSummaryUseCase"]
