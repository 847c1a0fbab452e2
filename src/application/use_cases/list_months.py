"""Use case to list periods that have records."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Period
from src.infrastructure.logging.logger import get_app_logger


class ListMonthsUseCase:
    """Return the periods with at least one record, newest first."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[Period]:
        periods = self._repository.list_periods()
        self._logger.info(f"Found {len(periods)} periods with records")
        return periods


__all__ = ["ListMonthsUseCase"]
