"""Domain policies package."""

from .ownership import (
    HOUSEHOLD,
    PER_USER,
    OwnershipScope,
    ownership_scope,
    resolve_target_users,
)

__all__ = [
    "HOUSEHOLD",
    "PER_USER",
    "OwnershipScope",
    "ownership_scope",
    "resolve_target_users",
]
