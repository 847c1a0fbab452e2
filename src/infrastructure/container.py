"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.sqlalchemy_ledger_repository import (
    SqlAlchemyLedgerRepository,
)


def build_settings() -> FinanceSettings:
    """Return settings sourced from the environment."""
    return FinanceSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    ensure_schema: bool = True,
) -> LedgerRepositoryPort:
    """Return the ledger repository, creating missing tables first."""
    resolved_db = db_port or build_database_adapter()
    if ensure_schema:
        create_schema(resolved_db.get_engine())
    return SqlAlchemyLedgerRepository(resolved_db, logger=get_app_logger())


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_ledger_repository",
]
