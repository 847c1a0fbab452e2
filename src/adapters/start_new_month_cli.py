"""CLI adapter to seed a new month from recurring categories.

The target period comes from ``TARGET_MONTH`` (``YYYY-MM``) and defaults
to the current month.
"""

import sys

from src.application.use_cases.start_new_month import StartNewMonthUseCase
from src.domain.errors import PreconditionError
from src.domain.models import Period
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the start-new-month use case.

    Returns:
        int: Process exit code, 1 when a precondition failed.
    """
    logger = get_app_logger()
    try:
        settings = build_settings()
        period = settings.target_month or Period.current()
        use_case = StartNewMonthUseCase(
            repository=build_ledger_repository(),
            logger=logger,
        )
        result = use_case.execute(period)
    except PreconditionError as exc:
        logger.warning(f"Start new month aborted: {exc}")
        print(f"Error: {exc}")
        return 1

    print(f"{result.message} ({result.created_count} records created).")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
