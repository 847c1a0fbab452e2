"""Monthly workflow rules: setup progress, wizard grouping and seeding."""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import HOUSEHOLD_ACCOUNT_NAME
from src.domain.errors import (
    AlreadyExistsForPeriodError,
    NoCategoriesFoundError,
    NoUsersFoundError,
)
from src.domain.models import (
    Category,
    MonthStatus,
    Period,
    Record,
    RecordRow,
    SetupCategories,
    SetupCategory,
    SetupUserEntry,
    User,
)
from src.domain.policies import HOUSEHOLD, ownership_scope, resolve_target_users
from src.utils.decimal_utils import coerce_decimal


def progress_percent(done: int, total: int) -> int:
    """Return ``done / total`` as a whole percentage, 100 when empty."""
    if total <= 0:
        return 100
    ratio = Decimal(done) * 100 / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_month_status(
    period: Period,
    categories: Sequence[Category],
    users: Sequence[User],
    records: Sequence[RecordRow],
) -> MonthStatus:
    """Report how far the recurring categories of a period are filled in.

    Every (user, category) pair counts once; it is set when a record with
    a positive amount exists for it.

    Args:
        period: Period being inspected.
        categories: Recurring categories.
        users: Users counted for progress.
        records: Records of the period in scope.

    Returns:
        MonthStatus: Set/total counts and progress percentages.
    """
    amounts = {
        (record.user_id, record.category_id): coerce_decimal(record.amount)
        for record in records
    }
    static = [category for category in categories if category.is_static]
    dynamic = [category for category in categories if not category.is_static]

    def _count(group: list[Category]) -> tuple[int, int]:
        set_count = 0
        total = 0
        for user in users:
            for category in group:
                total += 1
                if amounts.get((user.id, category.id), Decimal("0")) > 0:
                    set_count += 1
        return set_count, total

    dynamic_set, dynamic_total = _count(dynamic)
    static_set, static_total = _count(static)
    dynamic_progress = progress_percent(dynamic_set, dynamic_total)
    static_progress = progress_percent(static_set, static_total)
    overall = int(
        (Decimal(dynamic_progress + static_progress) / 2).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
    )
    return MonthStatus(
        period=period,
        is_setup=len(records) > 0,
        record_count=len(records),
        dynamic_categories=len(dynamic),
        static_categories=len(static),
        dynamic_set_count=dynamic_set,
        dynamic_total_count=dynamic_total,
        static_set_count=static_set,
        static_total_count=static_total,
        dynamic_progress=dynamic_progress,
        static_progress=static_progress,
        overall_progress=overall,
    )


def default_amount_for(category: Category) -> Decimal:
    """Return the amount a new record of the category starts with."""
    if category.is_static:
        return coerce_decimal(category.default_amount)
    return Decimal("0")


def group_setup_categories(
    categories: Iterable[Category],
    household: User,
    users: list[User],
    records: Iterable[RecordRow],
) -> SetupCategories:
    """Group recurring categories for the setup wizard.

    Args:
        categories: Recurring categories in display order.
        household: The Household system account.
        users: Real users in scope.
        records: Records already saved for the period.

    Returns:
        SetupCategories: Static and dynamic categories, each listing its
        target users with their saved or default amount.
    """
    by_pair = {(record.user_id, record.category_id): record for record in records}
    static: list[SetupCategory] = []
    dynamic: list[SetupCategory] = []
    for category in categories:
        is_household = ownership_scope(category) == HOUSEHOLD
        entries = []
        for user in resolve_target_users(category, household, users):
            record = by_pair.get((user.id, category.id))
            entries.append(
                SetupUserEntry(
                    user_id=user.id,
                    user_name=HOUSEHOLD_ACCOUNT_NAME if is_household else user.name,
                    amount=(
                        coerce_decimal(record.amount)
                        if record is not None
                        else default_amount_for(category)
                    ),
                    record_id=record.id if record is not None else None,
                )
            )
        item = SetupCategory(
            id=category.id,
            name=category.name,
            type=category.type,
            is_static=category.is_static,
            is_household=category.is_household,
            default_amount=coerce_decimal(category.default_amount),
            users=entries,
        )
        (static if category.is_static else dynamic).append(item)
    return SetupCategories(static=static, dynamic=dynamic)


def plan_new_month(
    period: Period,
    household: User,
    users: list[User],
    categories: Iterable[Category],
    existing_count: int,
) -> list[Record]:
    """Build the records that seed an empty period.

    Args:
        period: Period to seed.
        household: The Household system account.
        users: Real (non-system) users.
        categories: Recurring categories.
        existing_count: Records already stored for the period.

    Returns:
        list[Record]: One record per household category and one per real
        user for every other category.

    Raises:
        AlreadyExistsForPeriodError: If the period already has records.
        NoUsersFoundError: If there are no real users.
        NoCategoriesFoundError: If there are no recurring categories.
    """
    if existing_count > 0:
        raise AlreadyExistsForPeriodError(period, existing_count)
    if not users:
        raise NoUsersFoundError()
    recurring = [category for category in categories if category.is_recurring]
    if not recurring:
        raise NoCategoriesFoundError()

    planned: list[Record] = []
    for category in recurring:
        amount = default_amount_for(category)
        for user in resolve_target_users(category, household, users):
            planned.append(
                Record(
                    id=None,
                    user_id=user.id,
                    category_id=category.id,
                    amount=amount,
                    period=period,
                )
            )
    return planned


__all__ = [
    "progress_percent",
    "compute_month_status",
    "default_amount_for",
    "group_setup_categories",
    "plan_new_month",
]
