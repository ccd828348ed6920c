"""Beneficiary model for the banking domain."""

from dataclasses import dataclass
from datetime import datetime

from banking_mock.models.base import BankAddress
from banking_mock.models.banking.enums import BeneficiaryStatus, BeneficiaryType


@dataclass
class Beneficiary:
    """Saved payee. ``nickname``, ``email`` and ``phone`` are updatable."""

    beneficiary_id: str
    beneficiary_type: BeneficiaryType
    name: str
    nickname: str
    account_number: str  # 8 digits
    routing_number: str  # 6 digit sort code
    bank_name: str
    bank_address: BankAddress
    email: str
    phone: str
    status: BeneficiaryStatus
    created_at: datetime
    last_used: datetime
