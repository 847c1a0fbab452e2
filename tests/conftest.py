"""Shared fixtures for the test suite."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from src.domain.constants import HOUSEHOLD_ACCOUNT_NAME
from src.domain.errors import (
    AlreadyExistsForPeriodError,
    AssetNotFoundError,
    CategoryNotFoundError,
    DebtNotFoundError,
    DuplicateCategoryError,
    PaymentNotFoundError,
)
from src.domain.models import (
    Category,
    DebtPayment,
    RecordRow,
    User,
)


class FakeLedgerRepository:
    """In-memory stand-in for the ledger repository port."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.categories: list[Category] = []
        self.records = []
        self.loans = []
        self.debts = []
        self.payments: list[DebtPayment] = []
        self.assets = []
        self.asset_transactions = []
        self._next_id = 1

    def _new_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    # Users

    def get_or_create_system_account(self) -> User:
        for user in self.users:
            if user.is_system_account:
                return user
        household = User(
            id=self._new_id(),
            name=HOUSEHOLD_ACCOUNT_NAME,
            is_system_account=True,
        )
        self.users.append(household)
        return household

    def fetch_users(self, user_id=None, include_system=False):
        return [
            user
            for user in self.users
            if (user_id is None or user.id == user_id)
            and (include_system or not user.is_system_account)
        ]

    def add_user(self, name: str) -> User:
        user = User(id=self._new_id(), name=name)
        self.users.append(user)
        return user

    # Categories

    def fetch_categories(self, recurring_only=False):
        return [
            category
            for category in self.categories
            if category.is_recurring or not recurring_only
        ]

    def create_category(self, category: Category) -> Category:
        for existing in self.categories:
            if (existing.name, existing.type) == (category.name, category.type):
                raise DuplicateCategoryError(category.name, category.type)
        saved = replace(category, id=self._new_id())
        self.categories.append(saved)
        return saved

    def update_category_default(self, category_id, default_amount):
        for index, category in enumerate(self.categories):
            if category.id == category_id:
                updated = replace(
                    category,
                    default_amount=default_amount,
                    is_static=True,
                )
                self.categories[index] = updated
                return updated
        raise CategoryNotFoundError(category_id)

    def ensure_categories(self, items) -> int:
        inserted = 0
        for category in items:
            known = {(c.name, c.type) for c in self.categories}
            if (category.name, category.type) in known:
                continue
            self.categories.append(replace(category, id=self._new_id()))
            inserted += 1
        return inserted

    # Records

    def fetch_records(self, period, user_id=None):
        by_id = {category.id: category for category in self.categories}
        return [
            RecordRow(
                id=record.id,
                user_id=record.user_id,
                category_id=record.category_id,
                category_name=by_id[record.category_id].name,
                category_type=by_id[record.category_id].type,
                amount=record.amount,
                period=record.period,
            )
            for record in self.records
            if record.period == period
            and (user_id is None or record.user_id == user_id)
        ]

    def count_records(self, period) -> int:
        return sum(1 for record in self.records if record.period == period)

    def list_periods(self):
        return sorted(
            {record.period for record in self.records},
            reverse=True,
        )

    def insert_records(self, records) -> int:
        keys = {(r.user_id, r.category_id, r.period) for r in self.records}
        for record in records:
            if (record.user_id, record.category_id, record.period) in keys:
                raise AlreadyExistsForPeriodError(record.period)
        for record in records:
            self.records.append(replace(record, id=self._new_id()))
        return len(records)

    def upsert_records(self, records) -> int:
        for record in records:
            key = (record.user_id, record.category_id, record.period)
            for index, existing in enumerate(self.records):
                if (
                    existing.user_id,
                    existing.category_id,
                    existing.period,
                ) == key:
                    self.records[index] = replace(
                        existing,
                        amount=record.amount,
                        note=record.note,
                    )
                    break
            else:
                self.records.append(replace(record, id=self._new_id()))
        return len(records)

    # Loans

    def fetch_loans(self, user_id=None):
        return [
            loan
            for loan in self.loans
            if user_id is None or loan.user_id == user_id
        ]

    def add_loan(self, loan):
        saved = replace(loan, id=self._new_id())
        self.loans.append(saved)
        return saved

    # Revolving debts

    def fetch_debts(self, user_id=None):
        return [
            debt
            for debt in self.debts
            if user_id is None or debt.user_id == user_id
        ]

    def get_debt(self, debt_id):
        for debt in self.debts:
            if debt.id == debt_id:
                return debt
        return None

    def add_debt(self, debt):
        saved = replace(debt, id=self._new_id())
        self.debts.append(saved)
        return saved

    def _replace_debt(self, debt_id, **changes):
        for index, debt in enumerate(self.debts):
            if debt.id == debt_id:
                self.debts[index] = replace(debt, **changes)
                return self.debts[index]
        raise DebtNotFoundError(debt_id)

    def set_debt_balance(self, debt_id, balance):
        return self._replace_debt(debt_id, current_balance=balance)

    def fetch_debt_payments(self, periods, user_id=None):
        owners = {debt.id: debt.user_id for debt in self.debts}
        return [
            payment
            for payment in self.payments
            if payment.period in periods
            and (user_id is None or owners.get(payment.debt_id) == user_id)
        ]

    def upsert_debt_payment(
        self,
        debt_id,
        period,
        amount,
        note=None,
        balance_rule=None,
        amount_rule=None,
    ):
        debt = self.get_debt(debt_id)
        if debt is None:
            raise DebtNotFoundError(debt_id)
        if amount_rule is not None:
            amount = amount_rule(debt.current_balance)
        previous = None
        for index, payment in enumerate(self.payments):
            if payment.debt_id == debt_id and payment.period == period:
                previous = payment.amount
                saved = replace(payment, amount=amount, note=note)
                self.payments[index] = saved
                break
        else:
            saved = DebtPayment(
                id=self._new_id(),
                debt_id=debt_id,
                amount=amount,
                period=period,
                note=note,
            )
            self.payments.append(saved)
        if balance_rule is not None:
            debt = self._replace_debt(
                debt_id,
                current_balance=balance_rule(debt.current_balance, previous),
            )
        return saved, debt

    def delete_debt_payment(self, debt_id, payment_id, revert_rule=None):
        debt = self.get_debt(debt_id)
        if debt is None:
            raise DebtNotFoundError(debt_id)
        for payment in self.payments:
            if payment.id == payment_id and payment.debt_id == debt_id:
                break
        else:
            raise PaymentNotFoundError(payment_id)
        if revert_rule is not None:
            debt = self._replace_debt(
                debt_id,
                current_balance=revert_rule(
                    debt.current_balance,
                    payment.amount,
                ),
            )
        self.payments.remove(payment)
        return debt

    # Assets

    def fetch_assets(self, user_id=None, active_only=True):
        return [
            asset
            for asset in self.assets
            if (user_id is None or asset.user_id == user_id)
            and (asset.is_active or not active_only)
        ]

    def get_asset(self, asset_id):
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        return None

    def add_asset(self, asset):
        saved = replace(asset, id=self._new_id())
        self.assets.append(saved)
        return saved

    def add_asset_transaction(self, transaction, update_rule):
        for index, asset in enumerate(self.assets):
            if asset.id == transaction.asset_id:
                updated = update_rule(asset)
                self.assets[index] = updated
                saved = replace(transaction, id=self._new_id())
                self.asset_transactions.append(saved)
                return saved, updated
        raise AssetNotFoundError(transaction.asset_id)


@pytest.fixture
def repository() -> FakeLedgerRepository:
    """Return an empty in-memory ledger repository."""
    return FakeLedgerRepository()


@pytest.fixture
def logger() -> MagicMock:
    """Return a logger double recording calls."""
    return MagicMock()
