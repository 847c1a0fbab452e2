"""Use case to build monthly debt payment trends."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import DebtTrendPoint, Period
from src.domain.services import compute_debt_trends
from src.infrastructure.logging.logger import get_app_logger


class GetDebtTrendsUseCase:
    """Report loan and revolving-debt payments over recent periods."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        months: int = DEFAULT_TREND_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            months: Number of periods in the trend, ending at the current one.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._months = months

    def execute(
        self,
        user_id: int | None = None,
        today: date | None = None,
    ) -> list[DebtTrendPoint]:
        """Return one trend point per period, oldest first.

        Args:
            user_id: Selected user, or None for every user.
            today: Reference date of the current period.

        Returns:
            list[DebtTrendPoint]: Payments per period.
        """
        periods = Period.last_n(self._months, today)
        loans = self._repository.fetch_loans(user_id)
        payments = self._repository.fetch_debt_payments(periods, user_id)
        points = compute_debt_trends(periods, loans, payments)
        self._logger.info(
            f"Debt trends built for user={user_id or 'family'}: "
            f"{len(points)} periods, {len(payments)} payments"
        )
        return points


__all__ = ["GetDebtTrendsUseCase"]
