"""Tests for domain validation helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import InvalidAmountError, InvalidTransactionTypeError
from src.domain.models import RevolvingDebt
from src.domain.services.validation import (
    parse_amount,
    validate_asset_transaction_type,
    warn_if_over_limit,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("12.50", Decimal("12.50")),
        (" 7 ", Decimal("7")),
        (3, Decimal("3")),
        (0.1, Decimal("0.1")),
        (Decimal("0"), Decimal("0")),
    ],
)
def test_parse_amount_accepts_numbers(value, expected) -> None:
    """Strings, ints, floats and Decimals are accepted."""
    assert parse_amount(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "abc", "NaN", "Infinity", float("inf"), True, "-1"],
)
def test_parse_amount_rejects_invalid_values(value) -> None:
    """Missing, non-numeric, non-finite and negative values are rejected."""
    with pytest.raises(InvalidAmountError):
        parse_amount(value)


def test_parse_amount_allows_negative_when_asked() -> None:
    """Negative values pass when explicitly allowed."""
    assert parse_amount("-5", allow_negative=True) == Decimal("-5")


def test_validate_asset_transaction_type_normalizes_case() -> None:
    """Types are trimmed and lower-cased."""
    assert validate_asset_transaction_type(" Deposit ") == "deposit"
    with pytest.raises(InvalidTransactionTypeError):
        validate_asset_transaction_type("transfer")


def test_warn_if_over_limit() -> None:
    """Only balances above a positive credit limit are reported."""
    logger = MagicMock()
    over = RevolvingDebt(
        id=1,
        user_id=1,
        name="Card",
        current_balance=Decimal("1200"),
        credit_limit=Decimal("1000"),
    )
    unlimited = RevolvingDebt(
        id=2,
        user_id=1,
        name="Friend",
        current_balance=Decimal("1200"),
    )

    warn_if_over_limit(over, logger)
    warn_if_over_limit(unlimited, logger)

    logger.warning.assert_called_once()
    assert "debt_id=1" in logger.warning.call_args[0][0]
