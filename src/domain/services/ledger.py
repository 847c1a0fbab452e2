"""Balance rules for debt payments and asset transactions."""

from dataclasses import replace
from decimal import Decimal

from src.domain.constants import (
    ASSET_TX_BUY,
    ASSET_TX_CONTRIBUTION,
    ASSET_TX_DEPOSIT,
    ASSET_TX_DIVIDEND,
    ASSET_TX_SELL,
    ASSET_TX_VEST,
    ASSET_TX_WITHDRAW,
)
from src.domain.errors import InvalidTransactionTypeError
from src.domain.models import Asset
from src.utils.decimal_utils import coerce_decimal


def balance_after_payment(
    current_balance: Decimal,
    previous_amount: Decimal | None,
    new_amount: Decimal,
) -> Decimal:
    """Return the debt balance after upserting a period payment.

    Only the difference from the payment previously stored for the same
    period is applied, so re-entering a payment never double-counts it.

    Args:
        current_balance: Balance before the upsert.
        previous_amount: Amount already stored for the period, if any.
        new_amount: Amount being stored.

    Returns:
        Decimal: New balance, floored at zero.
    """
    delta = coerce_decimal(new_amount) - coerce_decimal(previous_amount)
    return max(Decimal("0"), coerce_decimal(current_balance) - delta)


def balance_after_revert(
    current_balance: Decimal,
    payment_amount: Decimal,
) -> Decimal:
    """Return the balance after a deleted payment is added back."""
    return coerce_decimal(current_balance) + coerce_decimal(payment_amount)


def recompute_unvested(asset: Asset) -> Asset:
    """Return the asset with ``unvested_units`` derived from its totals."""
    unvested = coerce_decimal(asset.total_units) - coerce_decimal(
        asset.vested_units
    )
    return replace(asset, unvested_units=max(Decimal("0"), unvested))


def apply_asset_transaction(
    asset: Asset,
    transaction_type: str,
    amount: Decimal,
    units: Decimal | None = None,
) -> Asset:
    """Return the asset updated by one transaction.

    Args:
        asset: Asset before the transaction.
        transaction_type: One of the ``ASSET_TX_*`` constants.
        amount: Money moved by the transaction.
        units: Shares or units moved, when relevant.

    Returns:
        Asset: Copy of the asset with the rule applied.

    Raises:
        InvalidTransactionTypeError: For an unknown transaction type.
    """
    amount = coerce_decimal(amount)
    units = coerce_decimal(units)
    value = coerce_decimal(asset.current_value)
    zero = Decimal("0")

    if transaction_type in (ASSET_TX_DEPOSIT, ASSET_TX_CONTRIBUTION):
        return replace(
            asset,
            current_value=value + amount,
            cost_basis=coerce_decimal(asset.cost_basis) + amount,
        )
    if transaction_type == ASSET_TX_WITHDRAW:
        return replace(asset, current_value=max(zero, value - amount))
    if transaction_type == ASSET_TX_BUY:
        return replace(
            asset,
            shares=coerce_decimal(asset.shares) + units,
            cost_basis=coerce_decimal(asset.cost_basis) + amount,
            current_value=value + amount,
        )
    if transaction_type == ASSET_TX_SELL:
        return replace(
            asset,
            shares=max(zero, coerce_decimal(asset.shares) - units),
            current_value=max(zero, value - amount),
        )
    if transaction_type == ASSET_TX_VEST:
        vested = coerce_decimal(asset.vested_units) + units
        return replace(
            asset,
            vested_units=vested,
            unvested_units=max(zero, coerce_decimal(asset.total_units) - vested),
        )
    if transaction_type == ASSET_TX_DIVIDEND:
        return replace(asset, current_value=value + amount)
    raise InvalidTransactionTypeError(transaction_type)


__all__ = [
    "balance_after_payment",
    "balance_after_revert",
    "recompute_unvested",
    "apply_asset_transaction",
]
