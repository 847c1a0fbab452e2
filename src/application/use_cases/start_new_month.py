"""Use case to seed an empty period from recurring categories."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import PreconditionError
from src.domain.models import Period, StartMonthResult
from src.domain.services import plan_new_month
from src.infrastructure.logging.logger import get_app_logger


class StartNewMonthUseCase:
    """Create the records of a new period in one transaction.

    Static categories start at their default amount, dynamic ones at zero.
    Household categories get one record under the Household account, the
    others one record per real user.
    """

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger reads and atomic writes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, period: Period) -> StartMonthResult:
        """Seed a period.

        Args:
            period: Period to seed; it must not have records yet.

        Returns:
            StartMonthResult: Period and number of records created.

        Raises:
            AlreadyExistsForPeriodError: If the period already has records.
            NoUsersFoundError: If there are no real users.
            NoCategoriesFoundError: If there are no recurring categories.
        """
        household = self._repository.get_or_create_system_account()
        try:
            planned = plan_new_month(
                period,
                household,
                self._repository.fetch_users(),
                self._repository.fetch_categories(recurring_only=True),
                self._repository.count_records(period),
            )
            created = self._repository.insert_records(planned)
        except PreconditionError as exc:
            self._logger.warning(f"Cannot start month {period}: {exc}")
            raise
        result = StartMonthResult(period=period, created_count=created)
        self._logger.info(f"{result.message} ({created} records)")
        return result


__all__ = ["StartNewMonthUseCase"]
