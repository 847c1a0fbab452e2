"""Use case to summarize active assets."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import AssetSummary
from src.domain.services import compute_asset_summary
from src.infrastructure.logging.logger import get_app_logger


class GetAssetSummaryUseCase:
    """Aggregate active assets by type."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int | None = None) -> AssetSummary:
        summary = compute_asset_summary(self._repository.fetch_assets(user_id))
        self._logger.info(
            f"Asset summary for user={user_id or 'family'}: "
            f"value={summary.total_value}, "
            f"gain_loss={summary.total_gain_loss}"
        )
        return summary


__all__ = ["GetAssetSummaryUseCase"]
