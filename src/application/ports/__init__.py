"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import (
    AssetUpdateRule,
    LedgerRepositoryPort,
    PaymentAmountRule,
    PaymentBalanceRule,
    RevertBalanceRule,
)

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "PaymentAmountRule",
    "PaymentBalanceRule",
    "RevertBalanceRule",
    "AssetUpdateRule",
]
