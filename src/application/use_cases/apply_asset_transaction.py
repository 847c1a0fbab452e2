"""Use case to record an asset transaction."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import PreconditionError
from src.domain.models import AssetTransaction
from src.domain.services import (
    apply_asset_transaction,
    parse_amount,
    validate_asset_transaction_type,
)
from src.infrastructure.logging.logger import get_app_logger


class ApplyAssetTransactionUseCase:
    """Insert a transaction and update its asset in one transaction."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        asset_id: int,
        transaction_type: str,
        amount,
        units=None,
        on_date: date | None = None,
        note: str | None = None,
    ) -> AssetTransaction:
        """Apply a transaction to an asset.

        Args:
            asset_id: Asset receiving the transaction.
            transaction_type: deposit, withdraw, buy, sell, vest, dividend
                or contribution.
            amount: Money moved; must be a non-negative number.
            units: Shares or units moved, for buy, sell and vest.
            on_date: Transaction date, defaults to today.
            note: Optional free-text note.

        Returns:
            AssetTransaction: Stored transaction.

        Raises:
            InvalidTransactionTypeError: For an unsupported type.
            InvalidAmountError: If amount or units are not valid.
            AssetNotFoundError: If the asset does not exist.
        """
        try:
            tx_type = validate_asset_transaction_type(transaction_type)
            parsed_amount = parse_amount(amount)
            parsed_units = parse_amount(units) if units is not None else None
            draft = AssetTransaction(
                id=None,
                asset_id=asset_id,
                type=tx_type,
                amount=parsed_amount,
                date=on_date or date.today(),
                units=parsed_units,
                note=note,
            )
            saved, asset = self._repository.add_asset_transaction(
                draft,
                lambda current: apply_asset_transaction(
                    current,
                    tx_type,
                    parsed_amount,
                    parsed_units,
                ),
            )
        except PreconditionError as exc:
            self._logger.warning(
                f"Asset transaction rejected for asset_id={asset_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Asset transaction applied: asset_id={asset_id}, type={tx_type}, "
            f"amount={parsed_amount}, value={asset.current_value}"
        )
        return saved


__all__ = ["ApplyAssetTransactionUseCase"]
