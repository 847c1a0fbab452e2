"""Domain constants for the household finance engine."""

from decimal import Decimal

CATEGORY_INCOME = "Income"
CATEGORY_FIXED_EXPENSE = "Fixed Expense"
CATEGORY_UTILITY = "Utility"
CATEGORY_STATIC_LOAN = "Static Loan"
CATEGORY_DYNAMIC_DEBT = "Dynamic Debt"

CATEGORY_TYPES = (
    CATEGORY_INCOME,
    CATEGORY_FIXED_EXPENSE,
    CATEGORY_UTILITY,
    CATEGORY_STATIC_LOAN,
    CATEGORY_DYNAMIC_DEBT,
)

CATEGORY_DEBT_TYPES = (CATEGORY_STATIC_LOAN, CATEGORY_DYNAMIC_DEBT)

HOUSEHOLD_ACCOUNT_NAME = "Household"

LOANS_BUCKET = "Loans"
VARIABLE_DEBTS_BUCKET = "Variable Debts"

ASSET_TX_DEPOSIT = "deposit"
ASSET_TX_WITHDRAW = "withdraw"
ASSET_TX_BUY = "buy"
ASSET_TX_SELL = "sell"
ASSET_TX_VEST = "vest"
ASSET_TX_DIVIDEND = "dividend"
ASSET_TX_CONTRIBUTION = "contribution"

ASSET_TRANSACTION_TYPES = (
    ASSET_TX_DEPOSIT,
    ASSET_TX_WITHDRAW,
    ASSET_TX_BUY,
    ASSET_TX_SELL,
    ASSET_TX_VEST,
    ASSET_TX_DIVIDEND,
    ASSET_TX_CONTRIBUTION,
)

INVESTMENT_ANNUAL_RETURN = Decimal("0.07")
INVESTMENT_PROJECTION_MONTHS = 60

DEFAULT_TREND_MONTHS = 12

PAID_IN_FULL_NOTE = "Paid in full"

# (name, type, is_recurring, is_static, is_household)
DEFAULT_CATEGORIES = (
    ("Salary", CATEGORY_INCOME, True, True, False),
    ("Freelance", CATEGORY_INCOME, False, False, False),
    ("Investment Returns", CATEGORY_INCOME, False, False, False),
    ("Rent", CATEGORY_FIXED_EXPENSE, True, True, True),
    ("Property Tax", CATEGORY_FIXED_EXPENSE, True, True, True),
    ("Insurance", CATEGORY_FIXED_EXPENSE, True, True, True),
    ("Groceries", CATEGORY_FIXED_EXPENSE, True, False, True),
    ("Electricity", CATEGORY_UTILITY, True, False, True),
    ("Water", CATEGORY_UTILITY, True, False, True),
    ("Internet", CATEGORY_UTILITY, True, True, True),
    ("Gas", CATEGORY_UTILITY, True, False, True),
)


__all__ = [
    "CATEGORY_INCOME",
    "CATEGORY_FIXED_EXPENSE",
    "CATEGORY_UTILITY",
    "CATEGORY_STATIC_LOAN",
    "CATEGORY_DYNAMIC_DEBT",
    "CATEGORY_TYPES",
    "CATEGORY_DEBT_TYPES",
    "HOUSEHOLD_ACCOUNT_NAME",
    "LOANS_BUCKET",
    "VARIABLE_DEBTS_BUCKET",
    "ASSET_TX_DEPOSIT",
    "ASSET_TX_WITHDRAW",
    "ASSET_TX_BUY",
    "ASSET_TX_SELL",
    "ASSET_TX_VEST",
    "ASSET_TX_DIVIDEND",
    "ASSET_TX_CONTRIBUTION",
    "ASSET_TRANSACTION_TYPES",
    "INVESTMENT_ANNUAL_RETURN",
    "INVESTMENT_PROJECTION_MONTHS",
    "DEFAULT_TREND_MONTHS",
    "PAID_IN_FULL_NOTE",
    "DEFAULT_CATEGORIES",
]
