"""Banking domain models."""

from banking_mock.models.banking.account import Account, Branch
from banking_mock.models.banking.beneficiary import Beneficiary
from banking_mock.models.banking.enums import (
    AccountStatus,
    AccountType,
    BeneficiaryStatus,
    BeneficiaryType,
    Channel,
    PaymentStatus,
    PaymentType,
    StatementFormat,
    StatementStatus,
    TransactionStatus,
    TransactionType,
    Urgency,
)
from banking_mock.models.banking.payment import Payment
from banking_mock.models.banking.statement import Statement, StatementPeriod
from banking_mock.models.banking.transaction import Merchant, Transaction, TransactionMetadata

__all__ = [
    "Account",
    "AccountStatus",
    "AccountType",
    "Beneficiary",
    "BeneficiaryStatus",
    "BeneficiaryType",
    "Branch",
    "Channel",
    "Merchant",
    "Payment",
    "PaymentStatus",
    "PaymentType",
    "Statement",
    "StatementFormat",
    "StatementPeriod",
    "StatementStatus",
    "Transaction",
    "TransactionMetadata",
    "TransactionStatus",
    "TransactionType",
    "Urgency",
]
