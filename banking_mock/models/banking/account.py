"""Account model for the banking domain."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from banking_mock.models.banking.enums import AccountStatus, AccountType


@dataclass
class Branch:
    """Branch that holds the account."""

    branch_id: str
    branch_name: str
    branch_code: str


@dataclass
class Account:
    """Bank account entity.

    Account types:
    - CHECKING: current account with a 1000 overdraft
    - SAVINGS: interest bearing savings account
    - BUSINESS: business current account
    """

    account_id: str
    account_number: str  # masked, ****NNNN
    full_account_number: str
    account_type: AccountType
    currency: str
    status: AccountStatus
    nickname: str
    opened_date: date
    branch: Branch
    available_balance: Decimal
    current_balance: Decimal
    overdraft_limit: Decimal
    interest_rate: Decimal
    last_transaction_date: datetime
