"""SQLAlchemy Core schema of the ledger store."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
    true,
)
from sqlalchemy.engine import Engine


MONEY = Numeric(14, 2)
RATE = Numeric(7, 4)
UNITS = Numeric(18, 6)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(120), nullable=False),
    Column("is_system_account", Boolean, nullable=False, default=False),
)

# At most one Household account.
Index(
    "uq_users_system_account",
    users.c.is_system_account,
    unique=True,
    sqlite_where=users.c.is_system_account == true(),
    postgresql_where=users.c.is_system_account == true(),
)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(120), nullable=False),
    Column("type", String(32), nullable=False),
    Column("is_recurring", Boolean, nullable=False, default=True),
    Column("is_static", Boolean, nullable=False, default=False),
    Column("is_household", Boolean, nullable=False, default=True),
    Column("default_amount", MONEY, nullable=False, default=0),
    UniqueConstraint("name", "type", name="uq_categories_name_type"),
)

financial_records = Table(
    "financial_records",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("amount", MONEY, nullable=False, default=0),
    Column("month_year", String(7), nullable=False),
    Column("note", Text, nullable=True),
    UniqueConstraint(
        "user_id",
        "category_id",
        "month_year",
        name="uq_records_user_category_month",
    ),
)

loans = Table(
    "loans",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(120), nullable=False),
    Column("total_principal", MONEY, nullable=False, default=0),
    Column("remaining_balance", MONEY, nullable=False, default=0),
    Column("interest_rate", RATE, nullable=False, default=0),
    Column("monthly_payment", MONEY, nullable=False, default=0),
    Column("start_date", Date, nullable=False),
    Column("target_payoff_date", Date, nullable=True),
)

debts = Table(
    "debts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(120), nullable=False),
    Column("current_balance", MONEY, nullable=False, default=0),
    Column("credit_limit", MONEY, nullable=False, default=0),
    Column("minimum_payment", MONEY, nullable=False, default=0),
    Column("interest_rate", RATE, nullable=False, default=0),
    Column("is_temporary", Boolean, nullable=False, default=False),
)

debt_payments = Table(
    "debt_payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "debt_id",
        Integer,
        ForeignKey("debts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("amount", MONEY, nullable=False),
    Column("month_year", String(7), nullable=False),
    Column("note", Text, nullable=True),
    UniqueConstraint("debt_id", "month_year", name="uq_debt_payments_month"),
)

assets = Table(
    "assets",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(120), nullable=False),
    Column("type", String(32), nullable=False),
    Column("current_value", MONEY, nullable=False, default=0),
    Column("cost_basis", MONEY, nullable=False, default=0),
    Column("target_amount", MONEY, nullable=True),
    Column("monthly_contribution", MONEY, nullable=False, default=0),
    Column("shares", UNITS, nullable=False, default=0),
    Column("total_units", UNITS, nullable=False, default=0),
    Column("vested_units", UNITS, nullable=False, default=0),
    Column("unvested_units", UNITS, nullable=False, default=0),
    Column("is_active", Boolean, nullable=False, default=True),
)

asset_transactions = Table(
    "asset_transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "asset_id",
        Integer,
        ForeignKey("assets.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(16), nullable=False),
    Column("amount", MONEY, nullable=False, default=0),
    Column("units", UNITS, nullable=True),
    Column("date", Date, nullable=False),
    Column("note", Text, nullable=True),
)


def create_schema(engine: Engine) -> None:
    """Create every ledger table that does not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "users",
    "categories",
    "financial_records",
    "loans",
    "debts",
    "debt_payments",
    "assets",
    "asset_transactions",
    "create_schema",
]
