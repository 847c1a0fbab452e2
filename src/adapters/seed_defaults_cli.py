"""CLI adapter to create the schema, Household account and categories."""

from src.application.use_cases.seed_defaults import SeedDefaultsUseCase
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the default seeding use case."""
    logger = get_app_logger()
    use_case = SeedDefaultsUseCase(
        repository=build_ledger_repository(),
        logger=logger,
    )

    result = use_case.execute()

    print(
        f"Household account ready (id={result.household.id}); "
        f"{result.inserted_categories} default categories created."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
