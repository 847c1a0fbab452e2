"""Use case to compute net worth from assets, loans and debts."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import NetWorthSummary
from src.domain.services import compute_net_worth
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth as active assets minus outstanding balances."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int | None = None) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            user_id: Selected user, or None for every user.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        summary = compute_net_worth(
            self._repository.fetch_assets(user_id),
            self._repository.fetch_loans(user_id),
            self._repository.fetch_debts(user_id),
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase"]
