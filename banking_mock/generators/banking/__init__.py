"""Banking domain generators."""

from banking_mock.generators.banking.account import AccountGenerator
from banking_mock.generators.banking.beneficiary import BeneficiaryGenerator
from banking_mock.generators.banking.factory import MockDataGenerators
from banking_mock.generators.banking.payment import PaymentGenerator
from banking_mock.generators.banking.statement import StatementGenerator
from banking_mock.generators.banking.transaction import TransactionGenerator

__all__ = [
    "AccountGenerator",
    "BeneficiaryGenerator",
    "MockDataGenerators",
    "PaymentGenerator",
    "StatementGenerator",
    "TransactionGenerator",
]
