"""Use case to report the setup progress of a period."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import MonthStatus, Scope
from src.domain.services import compute_month_status
from src.infrastructure.logging.logger import get_app_logger


class GetMonthStatusUseCase:
    """Report how many recurring amounts of a period are filled in."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, scope: Scope) -> MonthStatus:
        """Return the month status of a scope.

        The family view counts every user, the Household account included;
        a selected user counts alone.

        Args:
            scope: Period and optional user to inspect.

        Returns:
            MonthStatus: Setup flag, counts and progress percentages.
        """
        categories = self._repository.fetch_categories(recurring_only=True)
        users = self._repository.fetch_users(
            scope.user_id,
            include_system=True,
        )
        records = self._repository.fetch_records(scope.period, scope.user_id)
        status = compute_month_status(scope.period, categories, users, records)
        self._logger.info(
            f"Month status for period={scope.period} "
            f"user={scope.user_id or 'family'}: setup={status.is_setup}, "
            f"overall={status.overall_progress}%"
        )
        return status


__all__ = ["GetMonthStatusUseCase"]
