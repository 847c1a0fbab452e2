"""Domain services package."""

from .amortization import (
    NEVER,
    estimate_interest,
    interest_saved,
    monthly_rate,
    months_saved,
    months_to_payoff,
)
from .assets import compute_asset_summary, compute_net_worth
from .debt_overview import (
    compute_debt_overview,
    compute_debt_trends,
    compute_expense_breakdown,
    compute_user_comparison,
)
from .ledger import (
    apply_asset_transaction,
    balance_after_payment,
    balance_after_revert,
    recompute_unvested,
)
from .suggestion import (
    build_smart_suggestion,
    compute_surplus,
    rank_payable_debts,
)
from .summary import compute_summary, effective_debt_payment, payments_by_debt
from .validation import (
    parse_amount,
    validate_asset_transaction_type,
    warn_if_over_limit,
)
from .workflow import (
    compute_month_status,
    group_setup_categories,
    plan_new_month,
)

__all__ = [
    "NEVER",
    "estimate_interest",
    "interest_saved",
    "monthly_rate",
    "months_saved",
    "months_to_payoff",
    "compute_asset_summary",
    "compute_net_worth",
    "compute_debt_overview",
    "compute_debt_trends",
    "compute_expense_breakdown",
    "compute_user_comparison",
    "apply_asset_transaction",
    "balance_after_payment",
    "balance_after_revert",
    "recompute_unvested",
    "build_smart_suggestion",
    "compute_surplus",
    "rank_payable_debts",
    "compute_summary",
    "effective_debt_payment",
    "payments_by_debt",
    "parse_amount",
    "validate_asset_transaction_type",
    "warn_if_over_limit",
    "compute_month_status",
    "group_setup_categories",
    "plan_new_month",
]
