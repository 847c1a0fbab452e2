"""Domain package for business rules and core models."""

from .errors import FinanceError, PreconditionError, StorageError
from .models import Period, Scope

__all__ = [
    "FinanceError",
    "PreconditionError",
    "StorageError",
    "Period",
    "Scope",
]
