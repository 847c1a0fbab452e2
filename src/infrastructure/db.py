"""Database infrastructure for the finance dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the ledger store. It belongs to the infrastructure
layer because it deals with external systems (SQLite or PostgreSQL).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import FinanceSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the ledger store.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger store.

    The URL comes from ``FinanceSettings.database_url``, so
    ``FINANCE_DB_URL`` and its SQLite fallback are resolved in one place.

    Returns:
        Engine: Lazily initialized engine connected to the ledger store.
    """
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(FinanceSettings.from_env().database_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the ledger store.

        Returns:
            Engine: Injected engine, or the process-wide one.
        """
        if self._engine is not None:
            return self._engine
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
