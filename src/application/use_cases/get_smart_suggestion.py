"""Use case to suggest how to allocate a period's surplus."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.period_snapshot import load_period_snapshot
from src.domain.models import Scope, SmartSuggestion
from src.domain.services import build_smart_suggestion, compute_surplus
from src.infrastructure.logging.logger import get_app_logger


class GetSmartSuggestionUseCase:
    """Recommend paying down the costliest debt or investing the surplus."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        currency_symbol: str = "₪",
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_symbol: Symbol used in the suggestion message.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_symbol = currency_symbol

    def execute(self, scope: Scope) -> SmartSuggestion:
        """Return the suggestion for a scope.

        Args:
            scope: Period and optional user to evaluate.

        Returns:
            SmartSuggestion: ``none``, ``invest`` or ``pay_debt`` payload.
        """
        snapshot = load_period_snapshot(self._repository, scope)
        surplus = compute_surplus(
            snapshot.records,
            snapshot.loans,
            snapshot.debts,
            snapshot.period_payments,
        )
        suggestion = build_smart_suggestion(
            surplus,
            snapshot.debts,
            currency_symbol=self._currency_symbol,
        )
        self._logger.info(
            f"Smart suggestion for period={scope.period} "
            f"user={scope.user_id or 'family'}: "
            f"type={suggestion.suggestion_type}, surplus={surplus}"
        )
        return suggestion


__all__ = ["GetSmartSuggestionUseCase"]
