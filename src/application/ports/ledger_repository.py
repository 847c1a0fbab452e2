"""Port for ledger storage used by the finance use cases.

Implementations own persistence of users, categories, records, loans,
revolving debts, debt payments and assets. Multi-row writes must be
atomic, and read-modify-write sequences on a debt or asset balance must be
serialized by the store.
"""

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    Asset,
    AssetTransaction,
    Category,
    DebtPayment,
    Loan,
    Period,
    Record,
    RecordRow,
    RevolvingDebt,
    User,
)


# (current balance, previous payment amount or None) -> new balance
PaymentBalanceRule = Callable[[Decimal, Decimal | None], Decimal]
# locked current balance -> payment amount
PaymentAmountRule = Callable[[Decimal], Decimal]
# (current balance, deleted payment amount) -> new balance
RevertBalanceRule = Callable[[Decimal, Decimal], Decimal]
AssetUpdateRule = Callable[[Asset], Asset]


class LedgerRepositoryPort(Protocol):
    """Port exposing ledger reads and transactional writes."""

    def get_or_create_system_account(self) -> User:
        """Return the Household account, creating it once if missing."""

    def fetch_users(
        self,
        user_id: int | None = None,
        include_system: bool = False,
    ) -> list[User]:
        """Return users ordered by id.

        Args:
            user_id: Restrict to one user when provided.
            include_system: Whether the Household account is included.
        """

    def add_user(self, name: str) -> User:
        """Create a real (non-system) user."""

    def fetch_categories(self, recurring_only: bool = False) -> list[Category]:
        """Return categories ordered by type then name."""

    def create_category(self, category: Category) -> Category:
        """Insert a category.

        Raises:
            DuplicateCategoryError: If name and type already exist.
        """

    def update_category_default(
        self,
        category_id: int,
        default_amount: Decimal,
    ) -> Category:
        """Set a category default amount and mark it static.

        Raises:
            CategoryNotFoundError: If the category does not exist.
        """

    def ensure_categories(self, categories: Iterable[Category]) -> int:
        """Insert categories missing by (name, type); return inserted count."""

    def fetch_records(
        self,
        period: Period,
        user_id: int | None = None,
    ) -> list[RecordRow]:
        """Return records of a period joined to their category."""

    def count_records(self, period: Period) -> int:
        """Return the number of records stored for a period."""

    def list_periods(self) -> list[Period]:
        """Return distinct record periods, newest first."""

    def insert_records(self, records: Sequence[Record]) -> int:
        """Insert records in one transaction.

        Raises:
            AlreadyExistsForPeriodError: If a record key already exists.
        """

    def upsert_records(self, records: Sequence[Record]) -> int:
        """Upsert records by (user, category, period) in one transaction."""

    def fetch_loans(self, user_id: int | None = None) -> list[Loan]:
        """Return loans ordered by id."""

    def add_loan(self, loan: Loan) -> Loan:
        """Insert a loan."""

    def fetch_debts(self, user_id: int | None = None) -> list[RevolvingDebt]:
        """Return revolving debts ordered by id, with owner names."""

    def get_debt(self, debt_id: int) -> RevolvingDebt | None:
        """Return one revolving debt."""

    def add_debt(self, debt: RevolvingDebt) -> RevolvingDebt:
        """Insert a revolving debt."""

    def set_debt_balance(self, debt_id: int, balance: Decimal) -> RevolvingDebt:
        """Overwrite a debt balance.

        Raises:
            DebtNotFoundError: If the debt does not exist.
        """

    def fetch_debt_payments(
        self,
        periods: Sequence[Period],
        user_id: int | None = None,
    ) -> list[DebtPayment]:
        """Return payments recorded in the given periods."""

    def upsert_debt_payment(
        self,
        debt_id: int,
        period: Period,
        amount: Decimal | None,
        note: str | None = None,
        balance_rule: PaymentBalanceRule | None = None,
        amount_rule: PaymentAmountRule | None = None,
    ) -> tuple[DebtPayment, RevolvingDebt]:
        """Upsert the payment keyed by (debt, period) in one transaction.

        When ``amount_rule`` is given, the stored amount is its result for
        the locked balance and ``amount`` is ignored. When ``balance_rule``
        is given, the debt balance is replaced by its result, computed from
        the locked balance and the amount previously stored for the period.

        Raises:
            DebtNotFoundError: If the debt does not exist.
        """

    def delete_debt_payment(
        self,
        debt_id: int,
        payment_id: int,
        revert_rule: RevertBalanceRule | None = None,
    ) -> RevolvingDebt:
        """Delete a payment, optionally adjusting the debt balance first.

        Raises:
            DebtNotFoundError: If the debt does not exist.
            PaymentNotFoundError: If the payment does not belong to it.
        """

    def fetch_assets(
        self,
        user_id: int | None = None,
        active_only: bool = True,
    ) -> list[Asset]:
        """Return assets ordered by id."""

    def get_asset(self, asset_id: int) -> Asset | None:
        """Return one asset."""

    def add_asset(self, asset: Asset) -> Asset:
        """Insert an asset."""

    def add_asset_transaction(
        self,
        transaction: AssetTransaction,
        update_rule: AssetUpdateRule,
    ) -> tuple[AssetTransaction, Asset]:
        """Insert a transaction and apply its rule to the asset atomically.

        Raises:
            AssetNotFoundError: If the asset does not exist.
        """


__all__ = [
    "LedgerRepositoryPort",
    "PaymentAmountRule",
    "PaymentBalanceRule",
    "RevertBalanceRule",
    "AssetUpdateRule",
]
