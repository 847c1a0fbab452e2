"""Domain models for derived financial views."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.period import Period


ZERO = Decimal("0")


@dataclass(frozen=True)
class Scope:
    """Selection of a period and either one user or the family view.

    Attributes:
        period: Accounting period being viewed.
        user_id: Selected user, or None for all real users combined.
    """

    period: Period
    user_id: int | None = None

    @property
    def is_family(self) -> bool:
        return self.user_id is None


@dataclass(frozen=True)
class Summary:
    """Dashboard totals for a period and scope."""

    total_income: Decimal = ZERO
    total_fixed_expenses: Decimal = ZERO
    total_utilities: Decimal = ZERO
    total_category_debts: Decimal = ZERO
    total_loan_payments: Decimal = ZERO
    total_debt_payments: Decimal = ZERO
    total_loans_remaining: Decimal = ZERO
    total_debts_remaining: Decimal = ZERO
    total_minimum_payments_due: Decimal = ZERO
    total_one_time_payments: Decimal = ZERO
    total_credit_limit: Decimal = ZERO
    total_credit_available: Decimal = ZERO
    net_cash_flow: Decimal = ZERO

    @property
    def total_expenses(self) -> Decimal:
        """Return the sum of every expense bucket."""
        return (
            self.total_fixed_expenses
            + self.total_utilities
            + self.total_category_debts
            + self.total_loan_payments
            + self.total_debt_payments
        )


@dataclass(frozen=True)
class DebtTypeBucket:
    """Per-bucket aggregate used by the debt overview."""

    count: int = 0
    total: Decimal = ZERO
    names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DebtOverview:
    """Loans and revolving debts aggregated for a scope."""

    total_debt: Decimal
    total_monthly_payments: Decimal
    loan_count: int
    debt_count: int
    highest_interest_rate: Decimal
    highest_interest_item: str | None
    average_interest_rate: Decimal
    debts_by_type: dict[str, DebtTypeBucket]


@dataclass(frozen=True)
class DebtTrendPoint:
    """Loan and revolving-debt payments for one period."""

    period: Period
    label: str
    loan_payments: Decimal
    debt_payments: Decimal

    @property
    def payments(self) -> Decimal:
        return self.loan_payments + self.debt_payments


@dataclass(frozen=True)
class UserComparison:
    """Income versus expenses of one real user for a period."""

    user_id: int
    name: str
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class ExpenseBreakdownItem:
    """Expense total for one category, loan or debt."""

    name: str
    value: Decimal
    type: str


@dataclass(frozen=True)
class SuggestedDebt:
    """Identity of the debt targeted by a payoff suggestion."""

    id: int
    name: str
    interest_rate: Decimal
    remaining_balance: Decimal
    monthly_payment: Decimal
    user_name: str | None
    type: str = "debt"


@dataclass(frozen=True)
class PayoffRecommendation:
    """Impact of paying the surplus towards a debt.

    ``months_saved`` and ``months_to_payoff`` may be ``math.inf`` when a
    payment never covers the accruing interest.
    """

    extra_payment: Decimal
    months_saved: int | float
    interest_saved: Decimal
    months_to_payoff: int | float


@dataclass(frozen=True)
class InvestmentProjection:
    """Future value of investing the surplus every month."""

    monthly_surplus: Decimal
    projected_value: Decimal
    total_invested: Decimal
    projected_gain: Decimal
    assumed_return: str
    months: int


@dataclass(frozen=True)
class InvestmentOption:
    """Educational investment option shown with investment suggestions."""

    name: str
    description: str
    priority: int


@dataclass(frozen=True)
class SmartSuggestion:
    """Recommendation for allocating a period's surplus."""

    has_suggestion: bool
    suggestion_type: str
    surplus: Decimal
    message: str
    debt: SuggestedDebt | None = None
    recommendation: PayoffRecommendation | None = None
    investment: InvestmentProjection | None = None
    options: list[InvestmentOption] = field(default_factory=list)


@dataclass(frozen=True)
class MonthStatus:
    """Setup progress of a period."""

    period: Period
    is_setup: bool
    record_count: int
    dynamic_categories: int
    static_categories: int
    dynamic_set_count: int
    dynamic_total_count: int
    static_set_count: int
    static_total_count: int
    dynamic_progress: int
    static_progress: int
    overall_progress: int


@dataclass(frozen=True)
class SetupUserEntry:
    """Current or default amount of a category for one target user."""

    user_id: int
    user_name: str
    amount: Decimal
    record_id: int | None = None


@dataclass(frozen=True)
class SetupCategory:
    """Recurring category with its target users for the setup wizard."""

    id: int
    name: str
    type: str
    is_static: bool
    is_household: bool
    default_amount: Decimal
    users: list[SetupUserEntry]


@dataclass(frozen=True)
class SetupCategories:
    """Recurring categories grouped into static and dynamic."""

    static: list[SetupCategory]
    dynamic: list[SetupCategory]


@dataclass(frozen=True)
class StartMonthResult:
    """Outcome of seeding a new period."""

    period: Period
    created_count: int

    @property
    def message(self) -> str:
        return f"Created empty month: {self.period.display()}"


@dataclass(frozen=True)
class AssetTypeTotals:
    """Per-type asset totals."""

    count: int = 0
    total_value: Decimal = ZERO
    cost_basis: Decimal = ZERO


@dataclass(frozen=True)
class AssetSummary:
    """Totals of active assets for a scope."""

    total_value: Decimal
    total_cost_basis: Decimal
    total_gain_loss: Decimal
    gain_loss_percent: Decimal
    by_type: dict[str, AssetTypeTotals]


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of active asset values.
        liability_total: Loan and revolving-debt balances.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


__all__ = [
    "Scope",
    "Summary",
    "DebtTypeBucket",
    "DebtOverview",
    "DebtTrendPoint",
    "UserComparison",
    "ExpenseBreakdownItem",
    "SuggestedDebt",
    "PayoffRecommendation",
    "InvestmentProjection",
    "InvestmentOption",
    "SmartSuggestion",
    "MonthStatus",
    "SetupUserEntry",
    "SetupCategory",
    "SetupCategories",
    "StartMonthResult",
    "AssetTypeTotals",
    "AssetSummary",
    "NetWorthSummary",
]
