"""Use case to compare real users for a period."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Period, UserComparison
from src.domain.services import compute_user_comparison
from src.infrastructure.logging.logger import get_app_logger


class GetUserComparisonUseCase:
    """Compare income and expenses across real users (family view)."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, period: Period) -> list[UserComparison]:
        users = self._repository.fetch_users()
        comparison = compute_user_comparison(
            users,
            self._repository.fetch_records(period),
            self._repository.fetch_loans(),
            self._repository.fetch_debts(),
            self._repository.fetch_debt_payments([period]),
        )
        self._logger.info(
            f"User comparison for period={period}: {len(comparison)} users"
        )
        return comparison


__all__ = ["GetUserComparisonUseCase"]
