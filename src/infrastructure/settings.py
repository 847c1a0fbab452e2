"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import Period
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DATABASE_URL_ENV = "FINANCE_DB_URL"
CURRENCY_SYMBOL_ENV = "FINANCE_CURRENCY_SYMBOL"
TREND_MONTHS_ENV = "FINANCE_TREND_MONTHS"
TARGET_MONTH_ENV = "TARGET_MONTH"

DEFAULT_CURRENCY_SYMBOL = "₪"


def default_database_path() -> Path:
    """Return the SQLite file used when no database URL is configured."""
    return get_project_root() / "data" / "finance.db"


def default_database_url() -> str:
    """Return the SQLite URL of the default database file."""
    path = default_database_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{path}"


@dataclass(frozen=True)
class FinanceSettings:
    """Runtime settings of the finance dashboard.

    Attributes:
        database_url: SQLAlchemy URL of the ledger store.
        currency_symbol: Symbol used in human-readable messages.
        trend_months: Number of periods shown by the trend view.
        target_month: Period seeded by the start-new-month CLI, if set.
    """

    database_url: str
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    trend_months: int = DEFAULT_TREND_MONTHS
    target_month: Period | None = None

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            FinanceSettings: Settings sourced from environment variables.

        Raises:
            InvalidPeriodError: If ``TARGET_MONTH`` is not ``YYYY-MM``.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = os.getenv(DATABASE_URL_ENV) or default_database_url()
        currency_symbol = (
            os.getenv(CURRENCY_SYMBOL_ENV) or DEFAULT_CURRENCY_SYMBOL
        )
        trend_months = cls._parse_positive_int(
            os.getenv(TREND_MONTHS_ENV),
            DEFAULT_TREND_MONTHS,
            logger=logger,
        )
        raw_target = (os.getenv(TARGET_MONTH_ENV) or "").strip()
        target_month = Period.parse(raw_target) if raw_target else None
        return cls(
            database_url=database_url,
            currency_symbol=currency_symbol,
            trend_months=trend_months,
            target_month=target_month,
        )

    @staticmethod
    def _parse_positive_int(raw: str | None, default: int, logger) -> int:
        """Parse a positive integer, falling back to a default.

        Args:
            raw: Raw environment value.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed or default value.
        """
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                f"Invalid {TREND_MONTHS_ENV}={raw!r}, using {default}"
            )
            return default
        if value <= 0:
            logger.warning(
                f"Non-positive {TREND_MONTHS_ENV}={value}, using {default}"
            )
            return default
        return value


__all__ = [
    "FinanceSettings",
    "DATABASE_URL_ENV",
    "default_database_path",
    "default_database_url",
]
