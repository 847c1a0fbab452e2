"""Use cases for category management."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import CATEGORY_TYPES
from src.domain.errors import InvalidCategoryError, PreconditionError
from src.domain.models import Category
from src.domain.services import parse_amount
from src.infrastructure.logging.logger import get_app_logger


class CreateCategoryUseCase:
    """Create a category unique by name and type."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        category_type: str,
        is_recurring: bool = True,
        is_static: bool = False,
        is_household: bool = True,
        default_amount=0,
    ) -> Category:
        """Create a category.

        Args:
            name: Category name.
            category_type: One of the supported category types.
            is_recurring: Whether new months are seeded with it.
            is_static: Whether seeding copies ``default_amount``.
            is_household: Whether it is recorded under the Household account.
            default_amount: Amount used for static seeding.

        Returns:
            Category: Stored category.

        Raises:
            InvalidCategoryError: For an empty name or unknown type.
            InvalidAmountError: For an invalid default amount.
            DuplicateCategoryError: If name and type already exist.
        """
        cleaned = (name or "").strip()
        try:
            if not cleaned or category_type not in CATEGORY_TYPES:
                raise InvalidCategoryError(name, category_type)
            category = self._repository.create_category(
                Category(
                    id=None,
                    name=cleaned,
                    type=category_type,
                    is_recurring=is_recurring,
                    is_static=is_static,
                    is_household=is_household,
                    default_amount=parse_amount(default_amount),
                )
            )
        except PreconditionError as exc:
            self._logger.warning(f"Category creation rejected: {exc}")
            raise
        self._logger.info(
            f"Category created: id={category.id}, name={category.name}, "
            f"type={category.type}"
        )
        return category


class ApplyStaticDefaultUseCase:
    """Store a category's default amount and mark it static."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, category_id: int, amount) -> Category:
        """Apply a static default amount.

        Raises:
            InvalidAmountError: For an invalid amount.
            CategoryNotFoundError: If the category does not exist.
        """
        try:
            category = self._repository.update_category_default(
                category_id,
                parse_amount(amount),
            )
        except PreconditionError as exc:
            self._logger.warning(
                f"Static default rejected for category_id={category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Static default applied: category_id={category_id}, "
            f"amount={category.default_amount}"
        )
        return category


__all__ = ["CreateCategoryUseCase", "ApplyStaticDefaultUseCase"]
