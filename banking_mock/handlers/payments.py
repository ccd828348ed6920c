"""Payment resource handlers."""

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from banking_mock.clock import Clock, utcnow
from banking_mock.config import MockBankConfig
from banking_mock.exceptions import UnprocessableEntityError, ValidationError
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.generators.base import CENTS
from banking_mock.handlers.base import (
    ApiResponse,
    FieldErrors,
    check_id,
    json_response,
    lookup,
    request_body,
)
from banking_mock.models.banking import Payment, PaymentStatus, PaymentType, Urgency
from banking_mock.serialization import dataclass_to_dict
from banking_mock.store.memory import BankingDataStore

logger = logging.getLogger(__name__)

PAYMENT_ID_RE = re.compile(r"^pmt-[A-Za-z0-9-]+$")
CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

MAX_REFERENCE_LENGTH = 140
MIN_REASON_LENGTH = 5

PAYMENT_TYPES = {t.value for t in PaymentType}
URGENCIES = {u.value for u in Urgency}


def _parse_amount(value: Any) -> Decimal | None:
    """Return ``value`` as a finite Decimal, or None if it is not a number."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


class PaymentHandler:
    """Payment creation, lookup and cancellation."""

    def __init__(
        self,
        store: BankingDataStore,
        generators: MockDataGenerators,
        config: MockBankConfig,
        clock: Clock | None = None,
    ) -> None:
        self.store = store
        self.generators = generators
        self.config = config
        self.clock = clock or utcnow

    def create_payment(self, body: Mapping[str, Any] | None) -> ApiResponse:
        """POST /payments

        All field problems are reported together as VALIDATION_ERROR. A
        well formed but non-positive amount is INVALID_AMOUNT (422).
        """
        body = request_body(body)
        errors = FieldErrors()
        max_amount = self.config.payments.max_amount

        from_account_id = errors.required_text(body, "fromAccountId", "From account ID is required")
        to_beneficiary_id = errors.required_text(
            body, "toBeneficiaryId", "To beneficiary ID is required"
        )

        amount = None
        if body.get("amount") is None:
            errors.add("amount", "Amount is required")
        else:
            amount = _parse_amount(body["amount"])
            if amount is None:
                errors.add("amount", "Amount must be a number")
            elif amount > max_amount:
                errors.add("amount", f"Amount must not exceed {max_amount}")
            elif amount.as_tuple().exponent < -2 and amount != amount.quantize(CENTS):
                errors.add("amount", "Amount must have at most 2 decimal places")

        currency = errors.required_text(body, "currency", "Currency is required")
        if currency is not None and not CURRENCY_RE.fullmatch(currency):
            errors.add("currency", "Currency must be a 3-letter ISO 4217 code")
            currency = None

        payment_type = errors.required_text(body, "paymentType", "Payment type is required")
        if payment_type is not None and payment_type not in PAYMENT_TYPES:
            errors.add("paymentType", f"Payment type must be one of {', '.join(sorted(PAYMENT_TYPES))}")
            payment_type = None

        reference = errors.required_text(
            body, "reference", "Reference is required", max_length=MAX_REFERENCE_LENGTH
        )

        scheduled_date = None
        scheduled_raw = errors.optional_text(
            body, "scheduledDate", DATE_RE, "Scheduled date must be in YYYY-MM-DD format"
        )
        if scheduled_raw is not None:
            try:
                scheduled_date = date.fromisoformat(scheduled_raw)
            except ValueError:
                errors.add("scheduledDate", "Scheduled date is not a valid calendar date")

        urgency = errors.optional_text(body, "urgency") or Urgency.NORMAL.value
        if urgency not in URGENCIES:
            errors.add("urgency", f"Urgency must be one of {', '.join(sorted(URGENCIES))}")

        errors.raise_if_any()

        if amount <= 0:
            raise UnprocessableEntityError("Amount must be greater than zero", code="INVALID_AMOUNT")

        status = None if self.config.payments.randomize_status else PaymentStatus.PENDING
        payment = self.generators.payments.generate(
            from_account_id, to_beneficiary_id, amount, status=status
        )
        payment = self.generators.payments.with_overrides(
            payment,
            currency=currency,
            payment_type=PaymentType(payment_type),
            reference=reference,
            scheduled_date=scheduled_date or self.clock().date(),
            urgency=Urgency(urgency),
        )
        self.store.payments.add(payment)
        logger.info("Created payment %s (%s)", payment.payment_id, payment.status.value)

        return json_response(dataclass_to_dict(payment), status_code=201)

    def get_payment(self, payment_id: str) -> ApiResponse:
        """GET /payments/{paymentId}"""
        return json_response(dataclass_to_dict(self._payment(payment_id)))

    def cancel_payment(self, payment_id: str, body: Mapping[str, Any] | None = None) -> ApiResponse:
        """PUT /payments/{paymentId}/cancel

        COMPLETED payments cannot be cancelled. Cancelling an already
        CANCELLED payment returns it unchanged.
        """
        payment = self._payment(payment_id)

        if payment.status == PaymentStatus.COMPLETED:
            raise UnprocessableEntityError(
                "Cannot cancel a completed payment", code="PAYMENT_ALREADY_COMPLETED"
            )
        if payment.status == PaymentStatus.CANCELLED:
            return json_response(dataclass_to_dict(payment))

        reason = request_body(body).get("reason")
        if not isinstance(reason, str) or len(reason.strip()) < MIN_REASON_LENGTH:
            raise ValidationError(
                [
                    {
                        "field": "reason",
                        "message": f"Cancellation reason must be at least {MIN_REASON_LENGTH} characters",
                    }
                ]
            )

        payment.status = PaymentStatus.CANCELLED
        payment.cancelled_at = self.clock()
        payment.cancellation_reason = reason
        logger.info("Cancelled payment %s", payment.payment_id)

        return json_response(dataclass_to_dict(payment))

    def _payment(self, payment_id: str) -> Payment:
        check_id(
            payment_id,
            PAYMENT_ID_RE,
            "INVALID_PAYMENT_ID",
            "Invalid payment ID format. Expected prefix: pmt-",
        )
        return lookup(self.store.payments, payment_id, "PAYMENT_NOT_FOUND")
