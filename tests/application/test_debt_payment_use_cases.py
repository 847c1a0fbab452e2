"""Tests for the revolving debt payment use cases."""

from decimal import Decimal

import pytest

from src.application.use_cases.debt_payments import (
    DeleteDebtPaymentUseCase,
    PayDebtInFullUseCase,
    RecordDebtPaymentUseCase,
    SetDebtBalanceUseCase,
)
from src.domain.constants import PAID_IN_FULL_NOTE
from src.domain.errors import (
    DebtNotFoundError,
    InvalidAmountError,
    PaymentNotFoundError,
)
from src.domain.models import Period, RevolvingDebt


PERIOD = Period(2025, 2)


@pytest.fixture
def debt(repository):
    user = repository.add_user("Dana")
    return repository.add_debt(
        RevolvingDebt(
            id=None,
            user_id=user.id,
            name="Visa",
            current_balance=Decimal("1000"),
            credit_limit=Decimal("1100"),
            minimum_payment=Decimal("50"),
            interest_rate=Decimal("18"),
        )
    )


def test_reentering_a_payment_applies_the_delta(repository, logger, debt):
    """100 then 150 for the same period leaves 850, not 750."""
    use_case = RecordDebtPaymentUseCase(repository, logger=logger)

    use_case.execute(debt.id, PERIOD, "100")
    assert repository.get_debt(debt.id).current_balance == Decimal("900")

    payment = use_case.execute(debt.id, PERIOD, "150")

    assert payment.amount == Decimal("150")
    assert repository.get_debt(debt.id).current_balance == Decimal("850")
    assert len(repository.payments) == 1


def test_payment_without_balance_update(repository, logger, debt):
    """The balance is untouched when no update is requested."""
    RecordDebtPaymentUseCase(repository, logger=logger).execute(
        debt.id,
        PERIOD,
        Decimal("200"),
        update_balance=False,
        note="statement",
    )

    assert repository.get_debt(debt.id).current_balance == Decimal("1000")
    assert repository.payments[0].note == "statement"


def test_invalid_payment_amount_is_rejected(repository, logger, debt):
    """Negative amounts are rejected and logged as warnings."""
    with pytest.raises(InvalidAmountError):
        RecordDebtPaymentUseCase(repository, logger=logger).execute(
            debt.id,
            PERIOD,
            "-5",
        )

    assert repository.payments == []
    logger.warning.assert_called_once()


def test_payment_for_unknown_debt(repository, logger):
    """Unknown debts raise DebtNotFoundError."""
    with pytest.raises(DebtNotFoundError):
        RecordDebtPaymentUseCase(repository, logger=logger).execute(
            404,
            PERIOD,
            "10",
        )


def test_pay_in_full_zeroes_the_balance(repository, logger, debt):
    """Paying in full records the whole balance and sets it to zero."""
    payment = PayDebtInFullUseCase(repository, logger=logger).execute(
        debt.id,
        PERIOD,
    )

    assert payment.amount == Decimal("1000")
    assert payment.note == PAID_IN_FULL_NOTE
    assert repository.get_debt(debt.id).current_balance == Decimal("0")


def test_pay_in_full_for_unknown_debt(repository, logger):
    """The repository rejects unknown debts and nothing is stored."""
    with pytest.raises(DebtNotFoundError):
        PayDebtInFullUseCase(repository, logger=logger).execute(404, PERIOD)

    assert repository.payments == []
    logger.warning.assert_called_once()


def test_set_balance_warns_over_credit_limit(repository, logger, debt):
    """Setting a balance overwrites it and flags an exceeded limit."""
    updated = SetDebtBalanceUseCase(repository, logger=logger).execute(
        debt.id,
        "1250",
    )

    assert updated.current_balance == Decimal("1250")
    assert repository.payments == []
    logger.warning.assert_called_once()


def test_delete_payment_with_and_without_revert(repository, logger, debt):
    """Reverting adds the payment back, otherwise the balance stays."""
    record = RecordDebtPaymentUseCase(repository, logger=logger)
    delete = DeleteDebtPaymentUseCase(repository, logger=logger)
    first = record.execute(debt.id, PERIOD, "300")
    second = record.execute(debt.id, PERIOD.next(), "100")

    after_revert = delete.execute(debt.id, first.id, revert_balance=True)
    after_plain = delete.execute(debt.id, second.id)

    assert after_revert.current_balance == Decimal("900")
    assert after_plain.current_balance == Decimal("900")
    assert repository.payments == []


def test_delete_unknown_payment(repository, logger, debt):
    """A payment id that does not belong to the debt is rejected."""
    with pytest.raises(PaymentNotFoundError):
        DeleteDebtPaymentUseCase(repository, logger=logger).execute(
            debt.id,
            999,
        )
    logger.warning.assert_called_once()
