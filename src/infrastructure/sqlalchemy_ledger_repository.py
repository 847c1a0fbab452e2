"""SQLAlchemy-backed repository for the household ledger."""

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace
from decimal import Decimal

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    AssetUpdateRule,
    LedgerRepositoryPort,
    PaymentAmountRule,
    PaymentBalanceRule,
    RevertBalanceRule,
)
from src.domain.constants import HOUSEHOLD_ACCOUNT_NAME
from src.domain.errors import (
    AlreadyExistsForPeriodError,
    AssetNotFoundError,
    CategoryNotFoundError,
    DebtNotFoundError,
    DuplicateCategoryError,
    PaymentNotFoundError,
    StorageError,
)
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
from src.domain.services.ledger import recompute_unvested
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import (
    asset_transactions,
    assets,
    categories,
    debt_payments,
    debts,
    financial_records,
    loans,
    users,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger repository backed by SQLAlchemy Core tables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    # Users

    def get_or_create_system_account(self) -> User:
        """Return the Household account, creating it once if missing."""
        with self._storage_errors("get_or_create_system_account"):
            existing = self._find_system_account()
            if existing is not None:
                return existing
            try:
                with self._engine().begin() as conn:
                    conn.execute(
                        insert(users).values(
                            name=HOUSEHOLD_ACCOUNT_NAME,
                            is_system_account=True,
                        )
                    )
                self._logger.info("Created Household system account")
            except IntegrityError:
                # Created concurrently; the unique index kept a single row.
                self._logger.info("Household account created concurrently")
            created = self._find_system_account()
        if created is None:
            raise StorageError(
                "get_or_create_system_account",
                "Household account missing after insert",
            )
        return created

    def fetch_users(
        self,
        user_id: int | None = None,
        include_system: bool = False,
    ) -> list[User]:
        """Return users ordered by id."""
        query = select(users).order_by(users.c.id)
        if user_id is not None:
            query = query.where(users.c.id == user_id)
        if not include_system:
            query = query.where(users.c.is_system_account.is_(False))
        with self._storage_errors("fetch_users"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_user(row) for row in rows]

    def add_user(self, name: str) -> User:
        """Create a real (non-system) user."""
        with self._storage_errors("add_user"):
            with self._engine().begin() as conn:
                result = conn.execute(
                    insert(users).values(name=name, is_system_account=False)
                )
        return User(id=result.inserted_primary_key[0], name=name)

    # Categories

    def fetch_categories(self, recurring_only: bool = False) -> list[Category]:
        """Return categories ordered by type then name."""
        query = select(categories).order_by(categories.c.type, categories.c.name)
        if recurring_only:
            query = query.where(categories.c.is_recurring.is_(True))
        with self._storage_errors("fetch_categories"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_category(row) for row in rows]

    def create_category(self, category: Category) -> Category:
        """Insert a category, rejecting a duplicate name and type."""
        with self._storage_errors("create_category"):
            try:
                with self._engine().begin() as conn:
                    result = conn.execute(
                        insert(categories).values(
                            **self._category_values(category)
                        )
                    )
            except IntegrityError as exc:
                if not self._is_unique_violation(
                    exc,
                    "categories",
                    "uq_categories_name_type",
                ):
                    raise
                raise DuplicateCategoryError(
                    category.name, category.type
                ) from exc
        return replace(category, id=result.inserted_primary_key[0])

    def update_category_default(
        self,
        category_id: int,
        default_amount: Decimal,
    ) -> Category:
        """Set a category default amount and mark it static."""
        with self._storage_errors("update_category_default"):
            with self._engine().begin() as conn:
                result = conn.execute(
                    update(categories)
                    .where(categories.c.id == category_id)
                    .values(default_amount=default_amount, is_static=True)
                )
                if result.rowcount == 0:
                    raise CategoryNotFoundError(category_id)
                row = conn.execute(
                    select(categories).where(categories.c.id == category_id)
                ).one()
        return self._to_category(row)

    def ensure_categories(self, items: Iterable[Category]) -> int:
        """Insert categories missing by (name, type); return inserted count."""
        inserted = 0
        with self._storage_errors("ensure_categories"):
            with self._engine().begin() as conn:
                for category in items:
                    exists = conn.execute(
                        select(categories.c.id).where(
                            categories.c.name == category.name,
                            categories.c.type == category.type,
                        )
                    ).first()
                    if exists is not None:
                        continue
                    conn.execute(
                        insert(categories).values(
                            **self._category_values(category)
                        )
                    )
                    inserted += 1
        return inserted

    # Records

    def fetch_records(
        self,
        period: Period,
        user_id: int | None = None,
    ) -> list[RecordRow]:
        """Return records of a period joined to their category."""
        query = (
            select(
                financial_records,
                categories.c.name.label("category_name"),
                categories.c.type.label("category_type"),
            )
            .join(
                categories,
                categories.c.id == financial_records.c.category_id,
            )
            .where(financial_records.c.month_year == period.key)
            .order_by(financial_records.c.id)
        )
        if user_id is not None:
            query = query.where(financial_records.c.user_id == user_id)
        with self._storage_errors("fetch_records"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [
            RecordRow(
                id=row.id,
                user_id=row.user_id,
                category_id=row.category_id,
                category_name=row.category_name,
                category_type=row.category_type,
                amount=coerce_decimal(row.amount),
                period=Period.parse(row.month_year),
            )
            for row in rows
        ]

    def count_records(self, period: Period) -> int:
        """Return the number of records stored for a period."""
        query = select(func.count()).select_from(financial_records).where(
            financial_records.c.month_year == period.key
        )
        with self._storage_errors("count_records"):
            with self._engine().connect() as conn:
                return int(conn.execute(query).scalar_one())

    def list_periods(self) -> list[Period]:
        """Return distinct record periods, newest first."""
        query = (
            select(financial_records.c.month_year)
            .distinct()
            .order_by(financial_records.c.month_year.desc())
        )
        with self._storage_errors("list_periods"):
            with self._engine().connect() as conn:
                keys = conn.execute(query).scalars().all()
        return [Period.parse(key) for key in keys]

    def insert_records(self, records: Sequence[Record]) -> int:
        """Insert records in one transaction."""
        if not records:
            return 0
        with self._storage_errors("insert_records"):
            try:
                with self._engine().begin() as conn:
                    conn.execute(
                        insert(financial_records),
                        [self._record_values(record) for record in records],
                    )
            except IntegrityError as exc:
                if not self._is_unique_violation(
                    exc,
                    "financial_records",
                    "uq_records_user_category_month",
                ):
                    raise
                raise AlreadyExistsForPeriodError(records[0].period) from exc
        return len(records)

    def upsert_records(self, records: Sequence[Record]) -> int:
        """Upsert records by (user, category, period) in one transaction."""
        with self._storage_errors("upsert_records"):
            with self._engine().begin() as conn:
                for record in records:
                    existing = conn.execute(
                        select(financial_records.c.id)
                        .where(
                            financial_records.c.user_id == record.user_id,
                            financial_records.c.category_id
                            == record.category_id,
                            financial_records.c.month_year == record.period.key,
                        )
                        .with_for_update()
                    ).first()
                    if existing is None:
                        conn.execute(
                            insert(financial_records).values(
                                **self._record_values(record)
                            )
                        )
                    else:
                        conn.execute(
                            update(financial_records)
                            .where(financial_records.c.id == existing.id)
                            .values(amount=record.amount, note=record.note)
                        )
        return len(records)

    # Loans

    def fetch_loans(self, user_id: int | None = None) -> list[Loan]:
        """Return loans ordered by id."""
        query = select(loans).order_by(loans.c.id)
        if user_id is not None:
            query = query.where(loans.c.user_id == user_id)
        with self._storage_errors("fetch_loans"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [
            Loan(
                id=row.id,
                user_id=row.user_id,
                name=row.name,
                total_principal=coerce_decimal(row.total_principal),
                remaining_balance=coerce_decimal(row.remaining_balance),
                interest_rate=coerce_decimal(row.interest_rate),
                monthly_payment=coerce_decimal(row.monthly_payment),
                start_date=row.start_date,
                target_payoff_date=row.target_payoff_date,
            )
            for row in rows
        ]

    def add_loan(self, loan: Loan) -> Loan:
        """Insert a loan."""
        with self._storage_errors("add_loan"):
            with self._engine().begin() as conn:
                result = conn.execute(
                    insert(loans).values(
                        user_id=loan.user_id,
                        name=loan.name,
                        total_principal=loan.total_principal,
                        remaining_balance=loan.remaining_balance,
                        interest_rate=loan.interest_rate,
                        monthly_payment=loan.monthly_payment,
                        start_date=loan.start_date,
                        target_payoff_date=loan.target_payoff_date,
                    )
                )
        return replace(loan, id=result.inserted_primary_key[0])

    # Revolving debts

    def fetch_debts(self, user_id: int | None = None) -> list[RevolvingDebt]:
        """Return revolving debts ordered by id, with owner names."""
        query = self._debt_query().order_by(debts.c.id)
        if user_id is not None:
            query = query.where(debts.c.user_id == user_id)
        with self._storage_errors("fetch_debts"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_debt(row) for row in rows]

    def get_debt(self, debt_id: int) -> RevolvingDebt | None:
        """Return one revolving debt."""
        with self._storage_errors("get_debt"):
            with self._engine().connect() as conn:
                return self._load_debt(conn, debt_id)

    def add_debt(self, debt: RevolvingDebt) -> RevolvingDebt:
        """Insert a revolving debt."""
        with self._storage_errors("add_debt"):
            with self._engine().begin() as conn:
                result = conn.execute(
                    insert(debts).values(
                        user_id=debt.user_id,
                        name=debt.name,
                        current_balance=debt.current_balance,
                        credit_limit=debt.credit_limit,
                        minimum_payment=debt.minimum_payment,
                        interest_rate=debt.interest_rate,
                        is_temporary=debt.is_temporary,
                    )
                )
                return self._load_debt(conn, result.inserted_primary_key[0])

    def set_debt_balance(self, debt_id: int, balance: Decimal) -> RevolvingDebt:
        """Overwrite a debt balance."""
        with self._storage_errors("set_debt_balance"):
            with self._engine().begin() as conn:
                result = conn.execute(
                    update(debts)
                    .where(debts.c.id == debt_id)
                    .values(current_balance=balance)
                )
                if result.rowcount == 0:
                    raise DebtNotFoundError(debt_id)
                return self._load_debt(conn, debt_id)

    def fetch_debt_payments(
        self,
        periods: Sequence[Period],
        user_id: int | None = None,
    ) -> list[DebtPayment]:
        """Return payments recorded in the given periods."""
        if not periods:
            return []
        query = (
            select(debt_payments)
            .join(debts, debts.c.id == debt_payments.c.debt_id)
            .where(
                debt_payments.c.month_year.in_(
                    [period.key for period in periods]
                )
            )
            .order_by(debt_payments.c.id)
        )
        if user_id is not None:
            query = query.where(debts.c.user_id == user_id)
        with self._storage_errors("fetch_debt_payments"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_payment(row) for row in rows]

    def upsert_debt_payment(
        self,
        debt_id: int,
        period: Period,
        amount: Decimal | None,
        note: str | None = None,
        balance_rule: PaymentBalanceRule | None = None,
        amount_rule: PaymentAmountRule | None = None,
    ) -> tuple[DebtPayment, RevolvingDebt]:
        """Upsert the payment keyed by (debt, period) in one transaction."""
        with self._storage_errors("upsert_debt_payment"):
            with self._engine().begin() as conn:
                debt_row = self._lock_debt(conn, debt_id)
                locked_balance = coerce_decimal(debt_row.current_balance)
                if amount_rule is not None:
                    amount = amount_rule(locked_balance)
                existing = conn.execute(
                    select(debt_payments)
                    .where(
                        debt_payments.c.debt_id == debt_id,
                        debt_payments.c.month_year == period.key,
                    )
                    .with_for_update()
                ).first()
                previous = (
                    coerce_decimal(existing.amount)
                    if existing is not None
                    else None
                )
                if existing is None:
                    result = conn.execute(
                        insert(debt_payments).values(
                            debt_id=debt_id,
                            amount=amount,
                            month_year=period.key,
                            note=note,
                        )
                    )
                    payment_id = result.inserted_primary_key[0]
                else:
                    payment_id = existing.id
                    conn.execute(
                        update(debt_payments)
                        .where(debt_payments.c.id == payment_id)
                        .values(amount=amount, note=note)
                    )
                if balance_rule is not None:
                    conn.execute(
                        update(debts)
                        .where(debts.c.id == debt_id)
                        .values(
                            current_balance=balance_rule(
                                locked_balance,
                                previous,
                            )
                        )
                    )
                payment_row = conn.execute(
                    select(debt_payments).where(
                        debt_payments.c.id == payment_id
                    )
                ).one()
                debt = self._load_debt(conn, debt_id)
        return self._to_payment(payment_row), debt

    def delete_debt_payment(
        self,
        debt_id: int,
        payment_id: int,
        revert_rule: RevertBalanceRule | None = None,
    ) -> RevolvingDebt:
        """Delete a payment, optionally adjusting the debt balance first."""
        with self._storage_errors("delete_debt_payment"):
            with self._engine().begin() as conn:
                debt_row = self._lock_debt(conn, debt_id)
                payment = conn.execute(
                    select(debt_payments).where(
                        debt_payments.c.id == payment_id,
                        debt_payments.c.debt_id == debt_id,
                    )
                ).first()
                if payment is None:
                    raise PaymentNotFoundError(payment_id)
                if revert_rule is not None:
                    conn.execute(
                        update(debts)
                        .where(debts.c.id == debt_id)
                        .values(
                            current_balance=revert_rule(
                                coerce_decimal(debt_row.current_balance),
                                coerce_decimal(payment.amount),
                            )
                        )
                    )
                conn.execute(
                    delete(debt_payments).where(
                        debt_payments.c.id == payment_id
                    )
                )
                return self._load_debt(conn, debt_id)

    # Assets

    def fetch_assets(
        self,
        user_id: int | None = None,
        active_only: bool = True,
    ) -> list[Asset]:
        """Return assets ordered by id."""
        query = select(assets).order_by(assets.c.id)
        if user_id is not None:
            query = query.where(assets.c.user_id == user_id)
        if active_only:
            query = query.where(assets.c.is_active.is_(True))
        with self._storage_errors("fetch_assets"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_asset(row) for row in rows]

    def get_asset(self, asset_id: int) -> Asset | None:
        """Return one asset."""
        with self._storage_errors("get_asset"):
            with self._engine().connect() as conn:
                row = conn.execute(
                    select(assets).where(assets.c.id == asset_id)
                ).first()
        return self._to_asset(row) if row is not None else None

    def add_asset(self, asset: Asset) -> Asset:
        """Insert an asset."""
        asset = recompute_unvested(asset)
        values = self._asset_values(asset)
        values["user_id"] = asset.user_id
        values["name"] = asset.name
        values["type"] = asset.type
        values["target_amount"] = asset.target_amount
        values["monthly_contribution"] = asset.monthly_contribution
        values["total_units"] = asset.total_units
        values["is_active"] = asset.is_active
        with self._storage_errors("add_asset"):
            with self._engine().begin() as conn:
                result = conn.execute(insert(assets).values(**values))
        return replace(asset, id=result.inserted_primary_key[0])

    def add_asset_transaction(
        self,
        transaction: AssetTransaction,
        update_rule: AssetUpdateRule,
    ) -> tuple[AssetTransaction, Asset]:
        """Insert a transaction and apply its rule to the asset atomically."""
        with self._storage_errors("add_asset_transaction"):
            with self._engine().begin() as conn:
                row = conn.execute(
                    select(assets)
                    .where(assets.c.id == transaction.asset_id)
                    .with_for_update()
                ).first()
                if row is None:
                    raise AssetNotFoundError(transaction.asset_id)
                updated = recompute_unvested(update_rule(self._to_asset(row)))
                conn.execute(
                    update(assets)
                    .where(assets.c.id == transaction.asset_id)
                    .values(**self._asset_values(updated))
                )
                result = conn.execute(
                    insert(asset_transactions).values(
                        asset_id=transaction.asset_id,
                        type=transaction.type,
                        amount=transaction.amount,
                        units=transaction.units,
                        date=transaction.date,
                        note=transaction.note,
                    )
                )
        saved = replace(transaction, id=result.inserted_primary_key[0])
        return saved, updated

    # Helpers

    def _engine(self):
        return self._db_port.get_engine()

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Log and wrap unexpected SQLAlchemy failures as StorageError."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Ledger storage failure during {operation}: {exc}"
            )
            raise StorageError(operation, str(exc)) from exc

    @staticmethod
    def _is_unique_violation(
        exc: IntegrityError,
        table: str,
        constraint: str,
    ) -> bool:
        """Tell a unique-key conflict apart from other integrity failures.

        PostgreSQL and MySQL name the violated constraint; SQLite names
        the table of a failed UNIQUE check.
        """
        message = str(exc.orig)
        return (
            constraint in message
            or f"UNIQUE constraint failed: {table}." in message
        )

    def _find_system_account(self) -> User | None:
        with self._engine().connect() as conn:
            row = conn.execute(
                select(users)
                .where(users.c.is_system_account.is_(True))
                .order_by(users.c.id)
            ).first()
        return self._to_user(row) if row is not None else None

    @staticmethod
    def _debt_query():
        return select(debts, users.c.name.label("user_name")).join(
            users, users.c.id == debts.c.user_id
        )

    def _load_debt(self, conn: Connection, debt_id: int) -> RevolvingDebt | None:
        row = conn.execute(
            self._debt_query().where(debts.c.id == debt_id)
        ).first()
        return self._to_debt(row) if row is not None else None

    @staticmethod
    def _lock_debt(conn: Connection, debt_id: int):
        row = conn.execute(
            select(debts).where(debts.c.id == debt_id).with_for_update()
        ).first()
        if row is None:
            raise DebtNotFoundError(debt_id)
        return row

    @staticmethod
    def _category_values(category: Category) -> dict:
        return {
            "name": category.name,
            "type": category.type,
            "is_recurring": category.is_recurring,
            "is_static": category.is_static,
            "is_household": category.is_household,
            "default_amount": coerce_decimal(category.default_amount),
        }

    @staticmethod
    def _record_values(record: Record) -> dict:
        return {
            "user_id": record.user_id,
            "category_id": record.category_id,
            "amount": coerce_decimal(record.amount),
            "month_year": record.period.key,
            "note": record.note,
        }

    @staticmethod
    def _asset_values(asset: Asset) -> dict:
        return {
            "current_value": coerce_decimal(asset.current_value),
            "cost_basis": coerce_decimal(asset.cost_basis),
            "shares": coerce_decimal(asset.shares),
            "vested_units": coerce_decimal(asset.vested_units),
            "unvested_units": coerce_decimal(asset.unvested_units),
        }

    @staticmethod
    def _to_user(row) -> User:
        return User(
            id=row.id,
            name=row.name,
            is_system_account=bool(row.is_system_account),
        )

    @staticmethod
    def _to_category(row) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            type=row.type,
            is_recurring=bool(row.is_recurring),
            is_static=bool(row.is_static),
            is_household=bool(row.is_household),
            default_amount=coerce_decimal(row.default_amount),
        )

    @staticmethod
    def _to_debt(row) -> RevolvingDebt:
        return RevolvingDebt(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            current_balance=coerce_decimal(row.current_balance),
            credit_limit=coerce_decimal(row.credit_limit),
            minimum_payment=coerce_decimal(row.minimum_payment),
            interest_rate=coerce_decimal(row.interest_rate),
            is_temporary=bool(row.is_temporary),
            user_name=row.user_name,
        )

    @staticmethod
    def _to_payment(row) -> DebtPayment:
        return DebtPayment(
            id=row.id,
            debt_id=row.debt_id,
            amount=coerce_decimal(row.amount),
            period=Period.parse(row.month_year),
            note=row.note,
        )

    @staticmethod
    def _to_asset(row) -> Asset:
        return Asset(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            type=row.type,
            current_value=coerce_decimal(row.current_value),
            cost_basis=coerce_decimal(row.cost_basis),
            target_amount=(
                coerce_decimal(row.target_amount)
                if row.target_amount is not None
                else None
            ),
            monthly_contribution=coerce_decimal(row.monthly_contribution),
            shares=coerce_decimal(row.shares),
            total_units=coerce_decimal(row.total_units),
            vested_units=coerce_decimal(row.vested_units),
            unvested_units=coerce_decimal(row.unvested_units),
            is_active=bool(row.is_active),
        )


__all__ = ["SqlAlchemyLedgerRepository"]
