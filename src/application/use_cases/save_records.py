"""Use case to save several records at once."""

from collections.abc import Iterable
from dataclasses import replace

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import PreconditionError
from src.domain.models import Record
from src.domain.services import parse_amount
from src.infrastructure.logging.logger import get_app_logger


class SaveRecordsUseCase:
    """Upsert records by (user, category, period), all or nothing."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, records: Iterable[Record]) -> int:
        """Validate and upsert records in one transaction.

        Args:
            records: Records to save; amounts may be raw adapter values.

        Returns:
            int: Number of records saved.

        Raises:
            InvalidAmountError: If any amount is not a non-negative number.
        """
        try:
            validated = [
                replace(record, amount=parse_amount(record.amount))
                for record in records
            ]
        except PreconditionError as exc:
            self._logger.warning(f"Record batch rejected: {exc}")
            raise
        saved = self._repository.upsert_records(validated)
        self._logger.info(f"Saved {saved} records")
        return saved


__all__ = ["SaveRecordsUseCase"]
