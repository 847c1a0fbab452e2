"""Domain models for ledger entities owned by the repository."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.period import Period


@dataclass(frozen=True)
class User:
    """A profile owning records, loans, debts and assets.

    Attributes:
        id: Repository identifier.
        name: Display name.
        is_system_account: True only for the shared Household account.
    """

    id: int | None
    name: str
    is_system_account: bool = False


@dataclass(frozen=True)
class Category:
    """Ledger category metadata driving month seeding.

    Attributes:
        id: Repository identifier.
        name: Category name, unique together with ``type``.
        type: One of the ``CATEGORY_TYPES`` constants.
        is_recurring: Whether the category is seeded every period.
        is_static: Whether seeding copies ``default_amount``.
        is_household: Whether the category is recorded once under the
            Household account instead of once per real user.
        default_amount: Amount applied to static categories at seed time.
    """

    id: int | None
    name: str
    type: str
    is_recurring: bool = True
    is_static: bool = False
    is_household: bool = True
    default_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class Record:
    """Amount recorded by a user for a category in a period."""

    id: int | None
    user_id: int
    category_id: int
    amount: Decimal
    period: Period
    note: str | None = None


@dataclass(frozen=True)
class RecordRow:
    """Record joined to its category for aggregation."""

    id: int
    user_id: int
    category_id: int
    category_name: str
    category_type: str
    amount: Decimal
    period: Period


@dataclass(frozen=True)
class Loan:
    """Fixed-payment amortizing loan."""

    id: int | None
    user_id: int
    name: str
    total_principal: Decimal
    remaining_balance: Decimal
    interest_rate: Decimal
    monthly_payment: Decimal
    start_date: date
    target_payoff_date: date | None = None


@dataclass(frozen=True)
class RevolvingDebt:
    """Credit-card-like liability paid down by variable amounts.

    Attributes:
        is_temporary: When true the full balance is due every period.
        user_name: Owner display name, filled by repository joins.
    """

    id: int | None
    user_id: int
    name: str
    current_balance: Decimal
    credit_limit: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")
    interest_rate: Decimal = Decimal("0")
    is_temporary: bool = False
    user_name: str | None = None


@dataclass(frozen=True)
class DebtPayment:
    """Single payment recorded against a revolving debt for a period."""

    id: int | None
    debt_id: int
    amount: Decimal
    period: Period
    note: str | None = None


@dataclass(frozen=True)
class Asset:
    """Investment or savings asset. Soft-deleted through ``is_active``."""

    id: int | None
    user_id: int
    name: str
    type: str
    current_value: Decimal = Decimal("0")
    cost_basis: Decimal = Decimal("0")
    target_amount: Decimal | None = None
    monthly_contribution: Decimal = Decimal("0")
    shares: Decimal = Decimal("0")
    total_units: Decimal = Decimal("0")
    vested_units: Decimal = Decimal("0")
    unvested_units: Decimal = Decimal("0")
    is_active: bool = True


@dataclass(frozen=True)
class AssetTransaction:
    """Movement applied to an asset."""

    id: int | None
    asset_id: int
    type: str
    amount: Decimal
    date: date
    units: Decimal | None = None
    note: str | None = None


__all__ = [
    "User",
    "Category",
    "Record",
    "RecordRow",
    "Loan",
    "RevolvingDebt",
    "DebtPayment",
    "Asset",
    "AssetTransaction",
]
