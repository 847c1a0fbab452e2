"""Domain services for asset totals and net worth."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    Asset,
    AssetSummary,
    AssetTypeTotals,
    Loan,
    NetWorthSummary,
    RevolvingDebt,
)
from src.utils.decimal_utils import coerce_decimal, round_cents


def compute_asset_summary(assets: Iterable[Asset]) -> AssetSummary:
    """Aggregate active assets into totals and per-type buckets.

    Args:
        assets: Assets in scope; inactive ones are skipped.

    Returns:
        AssetSummary: Value, cost basis, gain/loss and per-type totals.
    """
    total_value = Decimal("0")
    total_cost = Decimal("0")
    by_type: dict[str, AssetTypeTotals] = {}
    for asset in assets:
        if not asset.is_active:
            continue
        value = coerce_decimal(asset.current_value)
        cost = coerce_decimal(asset.cost_basis)
        total_value += value
        total_cost += cost
        bucket = by_type.get(asset.type, AssetTypeTotals())
        by_type[asset.type] = AssetTypeTotals(
            count=bucket.count + 1,
            total_value=bucket.total_value + value,
            cost_basis=bucket.cost_basis + cost,
        )

    gain_loss = total_value - total_cost
    percent = (
        round_cents(gain_loss / total_cost * 100)
        if total_cost > 0
        else Decimal("0")
    )
    return AssetSummary(
        total_value=total_value,
        total_cost_basis=total_cost,
        total_gain_loss=gain_loss,
        gain_loss_percent=percent,
        by_type=by_type,
    )


def compute_net_worth(
    assets: Iterable[Asset],
    loans: Iterable[Loan],
    debts: Iterable[RevolvingDebt],
) -> NetWorthSummary:
    """Compute net worth as active asset value minus outstanding balances."""
    asset_total = sum(
        (
            coerce_decimal(asset.current_value)
            for asset in assets
            if asset.is_active
        ),
        Decimal("0"),
    )
    liability_total = sum(
        (coerce_decimal(loan.remaining_balance) for loan in loans),
        Decimal("0"),
    ) + sum(
        (coerce_decimal(debt.current_balance) for debt in debts),
        Decimal("0"),
    )
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


__all__ = ["compute_asset_summary", "compute_net_worth"]
