"""Payment model for the banking domain."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from banking_mock.models.banking.enums import PaymentStatus, PaymentType, Urgency


@dataclass
class Payment:
    """Outgoing payment from an account to a beneficiary.

    Lifecycle: created PENDING, may be moved to CANCELLED. COMPLETED is
    terminal.
    """

    payment_id: str
    status: PaymentStatus
    from_account_id: str
    to_beneficiary_id: str
    amount: Decimal
    currency: str  # ISO 4217
    payment_type: PaymentType
    reference: str
    scheduled_date: date
    urgency: Urgency
    created_at: datetime
    estimated_completion_date: date
    completed_at: datetime | None = None
    cancelled_at: datetime | None = None
    transaction_id: str | None = None
    cancellation_reason: str | None = None
