"""Transaction model for the banking domain."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from banking_mock.models.banking.enums import Channel, TransactionStatus, TransactionType


@dataclass(frozen=True)
class Merchant:
    name: str
    category: str
    location: str


@dataclass(frozen=True)
class TransactionMetadata:
    channel: Channel
    card_last4: str
    authorization_code: str


@dataclass(frozen=True)
class Transaction:
    """Posted account transaction.

    ``amount`` is negative for DEBIT and positive for every other type.
    """

    transaction_id: str
    account_id: str
    transaction_type: TransactionType
    amount: Decimal
    currency: str
    description: str
    transaction_date: datetime
    value_date: datetime
    status: TransactionStatus
    balance: Decimal  # running balance snapshot
    merchant: Merchant
    metadata: TransactionMetadata
