"""Domain validation helpers."""

from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.constants import ASSET_TRANSACTION_TYPES
from src.domain.errors import InvalidAmountError, InvalidTransactionTypeError
from src.domain.models import RevolvingDebt
from src.utils.decimal_utils import coerce_decimal


def parse_amount(value, *, allow_negative: bool = False) -> Decimal:
    """Parse a user-supplied amount into a finite Decimal.

    Args:
        value: Raw amount from an adapter (str, int, float or Decimal).
        allow_negative: Whether negative values are accepted.

    Returns:
        Decimal: Parsed amount.

    Raises:
        InvalidAmountError: If the value is missing, non-numeric, not
            finite or negative where disallowed.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, str) and not value.strip():
        raise InvalidAmountError(value)
    try:
        if isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            amount = coerce_decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(value) from exc
    if not amount.is_finite():
        raise InvalidAmountError(value)
    if amount < 0 and not allow_negative:
        raise InvalidAmountError(value)
    return amount


def validate_asset_transaction_type(transaction_type: str) -> str:
    """Return the normalized transaction type or raise.

    Raises:
        InvalidTransactionTypeError: If the type has no update rule.
    """
    normalized = (transaction_type or "").strip().lower()
    if normalized not in ASSET_TRANSACTION_TYPES:
        raise InvalidTransactionTypeError(transaction_type)
    return normalized


def warn_if_over_limit(debt: RevolvingDebt, logger: Logger) -> None:
    """Warn when a debt balance exceeds its credit limit.

    Args:
        debt: Debt after its balance was updated.
        logger: Logger used for warnings.
    """
    limit = coerce_decimal(debt.credit_limit)
    balance = coerce_decimal(debt.current_balance)
    if limit > 0 and balance > limit:
        logger.warning(
            f"Debt balance exceeds credit limit for debt_id={debt.id}: "
            f"{balance} > {limit}"
        )


__all__ = [
    "parse_amount",
    "validate_asset_transaction_type",
    "warn_if_over_limit",
]
