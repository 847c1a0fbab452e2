"""Application use cases package."""

from .apply_asset_transaction import ApplyAssetTransactionUseCase
from .debt_payments import (
    DeleteDebtPaymentUseCase,
    PayDebtInFullUseCase,
    RecordDebtPaymentUseCase,
    SetDebtBalanceUseCase,
)
from .get_asset_summary import GetAssetSummaryUseCase
from .get_debt_overview import GetDebtOverviewUseCase
from .get_debt_trends import GetDebtTrendsUseCase
from .get_expense_breakdown import GetExpenseBreakdownUseCase
from .get_month_status import GetMonthStatusUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .get_setup_categories import GetSetupCategoriesUseCase
from .get_smart_suggestion import GetSmartSuggestionUseCase
from .get_summary import GetSummaryUseCase
from .get_user_comparison import GetUserComparisonUseCase
from .list_months import ListMonthsUseCase
from .manage_categories import ApplyStaticDefaultUseCase, CreateCategoryUseCase
from .save_records import SaveRecordsUseCase
from .seed_defaults import SeedDefaultsResult, SeedDefaultsUseCase
from .start_new_month import StartNewMonthUseCase

__all__ = [
    "ApplyAssetTransactionUseCase",
    "DeleteDebtPaymentUseCase",
    "PayDebtInFullUseCase",
    "RecordDebtPaymentUseCase",
    "SetDebtBalanceUseCase",
    "GetAssetSummaryUseCase",
    "GetDebtOverviewUseCase",
    "GetDebtTrendsUseCase",
    "GetExpenseBreakdownUseCase",
    "GetMonthStatusUseCase",
    "GetNetWorthSummaryUseCase",
    "GetSetupCategoriesUseCase",
    "GetSmartSuggestionUseCase",
    "GetSummaryUseCase",
    "GetUserComparisonUseCase",
    "ListMonthsUseCase",
    "ApplyStaticDefaultUseCase",
    "CreateCategoryUseCase",
    "SaveRecordsUseCase",
    "SeedDefaultsResult",
    "SeedDefaultsUseCase",
    "StartNewMonthUseCase",
]
