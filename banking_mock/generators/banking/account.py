"""Account generator for the banking domain."""

from decimal import Decimal

from banking_mock.generators.base import BaseGenerator
from banking_mock.models.banking import Account, AccountStatus, AccountType, Branch


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts.

    Balances fall in ``[1000, 51000)``. CHECKING accounts carry a 1000
    overdraft, SAVINGS accounts a 2.5% rate, everything else 0.1%.
    """

    ID_PREFIX = "acc-"

    NICKNAMES = {
        AccountType.CHECKING: "Main Account",
        AccountType.SAVINGS: "Savings Account",
        AccountType.BUSINESS: "Business Account",
    }

    BRANCH_NAME = "London Main Branch"
    BRANCH_CODE = "LMB001"
    CURRENCY = "GBP"

    def generate(
        self,
        account_id: str | None = None,
        account_type: AccountType | str = AccountType.CHECKING,
    ) -> Account:
        """Generate a single account.

        Parameters
        ----------
        account_id : str | None
            Explicit ID to reuse verbatim; a new ``acc-`` ID otherwise.
        account_type : AccountType | str
            Account type (default CHECKING).

        Returns
        -------
        Account
            Generated account.
        """
        account_type = AccountType(account_type)

        return Account(
            account_id=account_id or self.new_id(),
            account_number=f"****{self.digits(4)}",
            full_account_number=f"GB{self.digits(8)}{self.digits(8)}",
            account_type=account_type,
            currency=self.CURRENCY,
            status=AccountStatus.ACTIVE,
            nickname=self.NICKNAMES[account_type],
            opened_date=self.past(365).date(),
            branch=Branch(
                branch_id=f"br-{self.new_id('')[:8]}",
                branch_name=self.BRANCH_NAME,
                branch_code=self.BRANCH_CODE,
            ),
            available_balance=self.money(1000, 51000),
            current_balance=self.money(1000, 51000),
            overdraft_limit=Decimal("1000") if account_type == AccountType.CHECKING else Decimal("0"),
            interest_rate=Decimal("2.5") if account_type == AccountType.SAVINGS else Decimal("0.1"),
            last_transaction_date=self.past(7),
        )
