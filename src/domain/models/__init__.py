"""Domain models package."""

from .finance import (
    AssetSummary,
    AssetTypeTotals,
    DebtOverview,
    DebtTrendPoint,
    DebtTypeBucket,
    ExpenseBreakdownItem,
    InvestmentOption,
    InvestmentProjection,
    MonthStatus,
    NetWorthSummary,
    PayoffRecommendation,
    Scope,
    SetupCategories,
    SetupCategory,
    SetupUserEntry,
    SmartSuggestion,
    StartMonthResult,
    SuggestedDebt,
    Summary,
    UserComparison,
)
from .ledger import (
    Asset,
    AssetTransaction,
    Category,
    DebtPayment,
    Loan,
    Record,
    RecordRow,
    RevolvingDebt,
    User,
)
from .period import Period

__all__ = [
    "Asset",
    "AssetSummary",
    "AssetTransaction",
    "AssetTypeTotals",
    "Category",
    "DebtOverview",
    "DebtPayment",
    "DebtTrendPoint",
    "DebtTypeBucket",
    "ExpenseBreakdownItem",
    "InvestmentOption",
    "InvestmentProjection",
    "Loan",
    "MonthStatus",
    "NetWorthSummary",
    "PayoffRecommendation",
    "Period",
    "Record",
    "RecordRow",
    "RevolvingDebt",
    "Scope",
    "SetupCategories",
    "SetupCategory",
    "SetupUserEntry",
    "SmartSuggestion",
    "StartMonthResult",
    "SuggestedDebt",
    "Summary",
    "User",
    "UserComparison",
]
