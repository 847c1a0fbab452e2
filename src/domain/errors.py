"""Error taxonomy for the finance engine.

Precondition errors are user-correctable and map to client errors in
outer layers. ``StorageError`` wraps unexpected persistence failures.
"""


class FinanceError(Exception):
    """Base class for every error raised by the finance engine."""


class PreconditionError(FinanceError):
    """A state or input precondition of an operation was not met."""


class AlreadyExistsForPeriodError(PreconditionError):
    """Records already exist for the period being seeded."""

    def __init__(self, period, existing_count: int | None = None) -> None:
        self.period = period
        self.existing_count = existing_count
        super().__init__(
            f"Records already exist for {period}"
            + (f" ({existing_count} found)" if existing_count else "")
        )


class NoUsersFoundError(PreconditionError):
    """No real (non-system) users exist."""

    def __init__(self) -> None:
        super().__init__(
            "No users found. Add at least one user profile first."
        )


class NoCategoriesFoundError(PreconditionError):
    """No recurring categories exist."""

    def __init__(self) -> None:
        super().__init__(
            "No recurring categories found. Add categories first."
        )


class DebtNotFoundError(PreconditionError):
    """The requested revolving debt does not exist."""

    def __init__(self, debt_id: int) -> None:
        self.debt_id = debt_id
        super().__init__(f"Debt not found: {debt_id}")


class PaymentNotFoundError(PreconditionError):
    """The requested debt payment does not exist for the debt."""

    def __init__(self, payment_id: int) -> None:
        self.payment_id = payment_id
        super().__init__(f"Payment not found: {payment_id}")


class CategoryNotFoundError(PreconditionError):
    """The requested category does not exist."""

    def __init__(self, category_id: int) -> None:
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


class AssetNotFoundError(PreconditionError):
    """The requested asset does not exist or is inactive."""

    def __init__(self, asset_id: int) -> None:
        self.asset_id = asset_id
        super().__init__(f"Asset not found: {asset_id}")


class InvalidAmountError(PreconditionError):
    """An amount is non-numeric, not finite or negative where disallowed."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Invalid amount: {value!r}")


class InvalidPeriodError(PreconditionError):
    """A period key is not a valid ``YYYY-MM`` value."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Invalid period {value!r}, expected YYYY-MM")


class InvalidTransactionTypeError(PreconditionError):
    """An asset transaction type is not one of the supported rules."""

    def __init__(self, transaction_type) -> None:
        self.transaction_type = transaction_type
        super().__init__(f"Invalid transaction type: {transaction_type!r}")


class InvalidCategoryError(PreconditionError):
    """A category has an empty name or an unknown type."""

    def __init__(self, name: str, category_type: str) -> None:
        self.name = name
        self.category_type = category_type
        super().__init__(
            f"Invalid category name={name!r} type={category_type!r}"
        )


class DuplicateCategoryError(PreconditionError):
    """A category with the same name and type already exists."""

    def __init__(self, name: str, category_type: str) -> None:
        self.name = name
        self.category_type = category_type
        super().__init__(
            f"Category with name={name} and type={category_type} "
            "already exists"
        )


class StorageError(FinanceError):
    """Unexpected failure raised by the ledger store."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {detail}")


__all__ = [
    "FinanceError",
    "PreconditionError",
    "AlreadyExistsForPeriodError",
    "NoUsersFoundError",
    "NoCategoriesFoundError",
    "DebtNotFoundError",
    "PaymentNotFoundError",
    "AssetNotFoundError",
    "CategoryNotFoundError",
    "InvalidAmountError",
    "InvalidPeriodError",
    "InvalidTransactionTypeError",
    "InvalidCategoryError",
    "DuplicateCategoryError",
    "StorageError",
]
