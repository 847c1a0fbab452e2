"""Tests for asset summary and net worth services."""

from datetime import date
from decimal import Decimal

from src.domain.models import Asset, Loan, RevolvingDebt
from src.domain.services.assets import compute_asset_summary, compute_net_worth


ASSETS = [
    Asset(
        id=1,
        user_id=1,
        name="Index fund",
        type="stocks",
        current_value=Decimal("1200"),
        cost_basis=Decimal("1000"),
    ),
    Asset(
        id=2,
        user_id=1,
        name="Tech shares",
        type="stocks",
        current_value=Decimal("300"),
        cost_basis=Decimal("500"),
    ),
    Asset(
        id=3,
        user_id=2,
        name="Savings",
        type="savings",
        current_value=Decimal("5000"),
        cost_basis=Decimal("5000"),
    ),
    Asset(
        id=4,
        user_id=2,
        name="Closed account",
        type="savings",
        current_value=Decimal("999"),
        cost_basis=Decimal("999"),
        is_active=False,
    ),
]


def test_asset_summary_groups_active_assets_by_type() -> None:
    """Inactive assets are ignored and gain is relative to cost basis."""
    summary = compute_asset_summary(ASSETS)

    assert summary.total_value == Decimal("6500")
    assert summary.total_cost_basis == Decimal("6500")
    assert summary.total_gain_loss == Decimal("0")
    assert summary.gain_loss_percent == Decimal("0.00")
    assert summary.by_type["stocks"].count == 2
    assert summary.by_type["stocks"].total_value == Decimal("1500")
    assert summary.by_type["savings"].count == 1


def test_asset_summary_percent_and_empty_cost_basis() -> None:
    """The gain percentage rounds to cents and is zero without cost."""
    summary = compute_asset_summary(ASSETS[:1])
    assert summary.gain_loss_percent == Decimal("20.00")

    gifted = Asset(
        id=9,
        user_id=1,
        name="Gift",
        type="other",
        current_value=Decimal("50"),
    )
    assert compute_asset_summary([gifted]).gain_loss_percent == Decimal("0")


def test_net_worth_subtracts_loans_and_debts() -> None:
    """Net worth is active asset value minus outstanding balances."""
    loan = Loan(
        id=1,
        user_id=1,
        name="Car",
        total_principal=Decimal("10000"),
        remaining_balance=Decimal("4000"),
        interest_rate=Decimal("5"),
        monthly_payment=Decimal("300"),
        start_date=date(2024, 1, 1),
    )
    debt = RevolvingDebt(
        id=2,
        user_id=1,
        name="Card",
        current_balance=Decimal("750.25"),
    )

    summary = compute_net_worth(ASSETS, [loan], [debt])

    assert summary.asset_total == Decimal("6500")
    assert summary.liability_total == Decimal("4750.25")
    assert summary.net_worth == Decimal("1749.75")
