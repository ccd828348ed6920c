"""Payment generator for the banking domain."""

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

from banking_mock.generators.base import CENTS, BaseGenerator
from banking_mock.models.banking import Payment, PaymentStatus, PaymentType, Urgency


class PaymentGenerator(BaseGenerator):
    """Generate synthetic payments.

    When no status is given one is picked at random from PENDING,
    PROCESSING, COMPLETED and FAILED. COMPLETED payments carry a
    completion time and a settlement transaction ID.
    """

    ID_PREFIX = "pmt-"

    RANDOM_STATUSES = [
        PaymentStatus.PENDING,
        PaymentStatus.PROCESSING,
        PaymentStatus.COMPLETED,
        PaymentStatus.FAILED,
    ]

    CURRENCY = "GBP"

    def generate(
        self,
        from_account_id: str,
        to_beneficiary_id: str,
        amount: Decimal,
        payment_id: str | None = None,
        status: PaymentStatus | str | None = None,
    ) -> Payment:
        """Generate a single payment.

        Parameters
        ----------
        from_account_id : str
            Debited account.
        to_beneficiary_id : str
            Receiving beneficiary (not checked against any store).
        amount : Decimal
            Payment amount.
        payment_id : str | None
            Explicit ID to reuse verbatim.
        status : PaymentStatus | str | None
            Fixed status; random otherwise.

        Returns
        -------
        Payment
            Generated payment.
        """
        payment_id = payment_id or self.new_id()
        status = PaymentStatus(status) if status is not None else self.rng.choice(self.RANDOM_STATUSES)
        now = self.clock()
        completed = status == PaymentStatus.COMPLETED

        return Payment(
            payment_id=payment_id,
            status=status,
            from_account_id=from_account_id,
            to_beneficiary_id=to_beneficiary_id,
            amount=Decimal(amount).quantize(CENTS),
            currency=self.CURRENCY,
            payment_type=PaymentType.DOMESTIC,
            reference=f"Payment {payment_id[:8]}",
            scheduled_date=now.date(),
            urgency=Urgency.NORMAL,
            created_at=now,
            estimated_completion_date=(now + timedelta(days=1)).date(),
            completed_at=now if completed else None,
            transaction_id=self.new_id("txn-") if completed else None,
        )

    def with_overrides(self, payment: Payment, **changes) -> Payment:
        """Return a copy of ``payment`` with caller supplied fields replaced."""
        return replace(payment, **changes)
