"""Use case to seed the Household account and default categories."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CATEGORIES
from src.domain.models import Category, User
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedDefaultsResult:
    """Result of a seed_defaults run.

    Attributes:
        household: The Household system account.
        inserted_categories: Number of default categories created.
    """

    household: User
    inserted_categories: int


def default_categories() -> list[Category]:
    """Return the default category set as unsaved categories."""
    return [
        Category(
            id=None,
            name=name,
            type=category_type,
            is_recurring=is_recurring,
            is_static=is_static,
            is_household=is_household,
        )
        for name, category_type, is_recurring, is_static, is_household
        in DEFAULT_CATEGORIES
    ]


class SeedDefaultsUseCase:
    """Create the Household account and missing default categories.

    Running it again only creates what is still missing.
    """

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> SeedDefaultsResult:
        household = self._repository.get_or_create_system_account()
        inserted = self._repository.ensure_categories(default_categories())
        self._logger.info(
            f"Defaults seeded: household_id={household.id}, "
            f"inserted_categories={inserted}"
        )
        return SeedDefaultsResult(
            household=household,
            inserted_categories=inserted,
        )


__all__ = ["SeedDefaultsUseCase", "SeedDefaultsResult", "default_categories"]
