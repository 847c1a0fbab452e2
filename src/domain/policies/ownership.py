"""Ownership policy deciding which users a category is recorded for."""

from typing import Literal

from src.domain.models.ledger import Category, User


OwnershipScope = Literal["household", "per_user"]

HOUSEHOLD: OwnershipScope = "household"
PER_USER: OwnershipScope = "per_user"


def ownership_scope(category: Category) -> OwnershipScope:
    """Return the ownership scope of a category."""
    return HOUSEHOLD if category.is_household else PER_USER


def resolve_target_users(
    category: Category,
    household: User,
    users: list[User],
) -> list[User]:
    """Return the users a category produces one record for.

    Args:
        category: Category being recorded.
        household: The Household system account.
        users: Real (non-system) users in scope.

    Returns:
        list[User]: ``[household]`` for household categories, otherwise
        every real user.
    """
    if ownership_scope(category) == HOUSEHOLD:
        return [household]
    return list(users)


__all__ = [
    "OwnershipScope",
    "HOUSEHOLD",
    "PER_USER",
    "ownership_scope",
    "resolve_target_users",
]
