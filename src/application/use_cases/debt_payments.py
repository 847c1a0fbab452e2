"""Use cases for the revolving debt payment ledger."""

from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import PAID_IN_FULL_NOTE
from src.domain.errors import PreconditionError
from src.domain.models import DebtPayment, Period, RevolvingDebt
from src.domain.services import (
    balance_after_payment,
    balance_after_revert,
    parse_amount,
    warn_if_over_limit,
)
from src.infrastructure.logging.logger import get_app_logger


class RecordDebtPaymentUseCase:
    """Upsert a debt payment for a period.

    Re-entering the payment of a period only moves the balance by the
    difference from the amount stored before.
    """

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        debt_id: int,
        period: Period,
        amount,
        update_balance: bool = True,
        note: str | None = None,
    ) -> DebtPayment:
        """Record the payment of a debt for a period.

        Args:
            debt_id: Debt being paid.
            period: Period the payment belongs to.
            amount: Paid amount; must be a non-negative number.
            update_balance: Whether the debt balance follows the payment.
            note: Optional free-text note.

        Returns:
            DebtPayment: Stored payment.

        Raises:
            InvalidAmountError: If the amount is not valid.
            DebtNotFoundError: If the debt does not exist.
        """
        try:
            parsed = parse_amount(amount)
            balance_rule = (
                self._delta_rule(parsed) if update_balance else None
            )
            payment, debt = self._repository.upsert_debt_payment(
                debt_id,
                period,
                parsed,
                note=note,
                balance_rule=balance_rule,
            )
        except PreconditionError as exc:
            self._logger.warning(
                f"Debt payment rejected for debt_id={debt_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Debt payment saved: debt_id={debt_id}, period={period}, "
            f"amount={parsed}, balance={debt.current_balance}"
        )
        return payment

    @staticmethod
    def _delta_rule(amount: Decimal):
        def _rule(current: Decimal, previous: Decimal | None) -> Decimal:
            return balance_after_payment(current, previous, amount)

        return _rule


class PayDebtInFullUseCase:
    """Pay a debt's whole balance for a period and zero the balance."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, debt_id: int, period: Period) -> DebtPayment:
        """Record a full payoff.

        Raises:
            DebtNotFoundError: If the debt does not exist.
        """
        try:
            payment, _ = self._repository.upsert_debt_payment(
                debt_id,
                period,
                None,
                note=PAID_IN_FULL_NOTE,
                balance_rule=lambda current, previous: Decimal("0"),
                amount_rule=lambda balance: balance,
            )
        except PreconditionError as exc:
            self._logger.warning(
                f"Pay in full rejected for debt_id={debt_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Debt paid in full: debt_id={debt_id}, period={period}, "
            f"amount={payment.amount}"
        )
        return payment


class SetDebtBalanceUseCase:
    """Overwrite a debt balance, e.g. from a new statement."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, debt_id: int, balance) -> RevolvingDebt:
        """Set the balance without touching payment history.

        Raises:
            InvalidAmountError: If the balance is not a non-negative number.
            DebtNotFoundError: If the debt does not exist.
        """
        try:
            parsed = parse_amount(balance)
            debt = self._repository.set_debt_balance(debt_id, parsed)
        except PreconditionError as exc:
            self._logger.warning(
                f"Balance update rejected for debt_id={debt_id}: {exc}"
            )
            raise
        warn_if_over_limit(debt, self._logger)
        self._logger.info(
            f"Debt balance set: debt_id={debt_id}, balance={parsed}"
        )
        return debt


class DeleteDebtPaymentUseCase:
    """Delete a debt payment, optionally adding it back to the balance."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        debt_id: int,
        payment_id: int,
        revert_balance: bool = False,
    ) -> RevolvingDebt:
        """Delete a payment.

        Raises:
            DebtNotFoundError: If the debt does not exist.
            PaymentNotFoundError: If the payment does not belong to it.
        """
        try:
            debt = self._repository.delete_debt_payment(
                debt_id,
                payment_id,
                revert_rule=balance_after_revert if revert_balance else None,
            )
        except PreconditionError as exc:
            self._logger.warning(
                f"Payment deletion rejected for debt_id={debt_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Debt payment deleted: debt_id={debt_id}, "
            f"payment_id={payment_id}, reverted={revert_balance}"
        )
        return debt


__all__ = [
    "RecordDebtPaymentUseCase",
    "PayDebtInFullUseCase",
    "SetDebtBalanceUseCase",
    "DeleteDebtPaymentUseCase",
]
