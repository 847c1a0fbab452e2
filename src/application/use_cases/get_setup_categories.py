"""Use case to list recurring categories for the setup wizard."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Scope, SetupCategories
from src.domain.services import group_setup_categories
from src.infrastructure.logging.logger import get_app_logger


class GetSetupCategoriesUseCase:
    """Group recurring categories with their target users and amounts."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, scope: Scope) -> SetupCategories:
        """Return static and dynamic categories of a scope.

        Args:
            scope: Period and optional user whose entries are listed.

        Returns:
            SetupCategories: Categories with saved or default amounts.
        """
        household = self._repository.get_or_create_system_account()
        categories = self._repository.fetch_categories(recurring_only=True)
        users = self._repository.fetch_users(scope.user_id)
        records = self._repository.fetch_records(scope.period)
        grouped = group_setup_categories(categories, household, users, records)
        self._logger.info(
            f"Setup categories for period={scope.period}: "
            f"static={len(grouped.static)}, dynamic={len(grouped.dynamic)}"
        )
        return grouped


__all__ = ["GetSetupCategoriesUseCase"]
