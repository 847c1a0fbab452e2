"""Use case to aggregate loans and revolving debts."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import DebtOverview
from src.domain.services import compute_debt_overview
from src.infrastructure.logging.logger import get_app_logger


class GetDebtOverviewUseCase:
    """Summarize outstanding loans and revolving debts."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int | None = None) -> DebtOverview:
        """Return the debt overview of one user or the family.

        Args:
            user_id: Selected user, or None for every user.

        Returns:
            DebtOverview: Totals, rates and per-bucket breakdown.
        """
        loans = self._repository.fetch_loans(user_id)
        debts = self._repository.fetch_debts(user_id)
        overview = compute_debt_overview(loans, debts)
        self._logger.info(
            f"Debt overview for user={user_id or 'family'}: "
            f"total={overview.total_debt}, loans={overview.loan_count}, "
            f"debts={overview.debt_count}"
        )
        return overview


__all__ = ["GetDebtOverviewUseCase"]
