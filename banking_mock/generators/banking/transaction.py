"""Transaction generator for the banking domain."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from banking_mock.generators.base import CENTS, BaseGenerator
from banking_mock.models.banking import (
    Channel,
    Merchant,
    Transaction,
    TransactionMetadata,
    TransactionStatus,
    TransactionType,
)


def signed_amount(transaction_type: TransactionType, magnitude: Decimal) -> Decimal:
    """Return ``magnitude`` with the sign its transaction type requires."""
    magnitude = abs(magnitude).quantize(CENTS)
    return -magnitude if transaction_type == TransactionType.DEBIT else magnitude


class TransactionGenerator(BaseGenerator):
    """Generate synthetic account transactions.

    Amounts are drawn from ``[10, 510)`` and dated within the last 30 days.
    """

    ID_PREFIX = "txn-"

    TRANSACTION_TYPES = list(TransactionType)

    MERCHANTS = [
        Merchant("Amazon UK", "Shopping", "Online"),
        Merchant("Tesco Superstore", "Groceries", "London, UK"),
        Merchant("Shell Petrol Station", "Fuel", "Manchester, UK"),
        Merchant("Netflix", "Entertainment", "Online"),
        Merchant("Starbucks", "Food & Drink", "Birmingham, UK"),
    ]

    CURRENCY = "GBP"

    def generate(
        self,
        account_id: str,
        transaction_id: str | None = None,
        transaction_type: TransactionType | str | None = None,
        amount: Decimal | None = None,
        transaction_date: datetime | None = None,
    ) -> Transaction:
        """Generate a single transaction for an account.

        Parameters
        ----------
        account_id : str
            Owning account.
        transaction_id : str | None
            Explicit ID to reuse verbatim.
        transaction_type : TransactionType | str | None
            Fixed type; random otherwise.
        amount : Decimal | None
            Magnitude to use; the sign always follows the type.
        transaction_date : datetime | None
            Fixed posting date; within the last 30 days otherwise.

        Returns
        -------
        Transaction
            Generated transaction.
        """
        if transaction_type is None:
            tx_type = self.rng.choice(self.TRANSACTION_TYPES)
        else:
            tx_type = TransactionType(transaction_type)

        magnitude = amount if amount is not None else self.money(10, 510)
        merchant = self.rng.choice(self.MERCHANTS)

        return Transaction(
            transaction_id=transaction_id or self.new_id(),
            account_id=account_id,
            transaction_type=tx_type,
            amount=signed_amount(tx_type, magnitude),
            currency=self.CURRENCY,
            description=f"{merchant.name} - {merchant.category}",
            transaction_date=transaction_date or self.past(30),
            value_date=transaction_date or self.past(30),
            status=TransactionStatus.COMPLETED,
            balance=self.money(1000, 11000),
            merchant=merchant,
            metadata=TransactionMetadata(
                channel=Channel.ONLINE if self.rng.random() > 0.5 else Channel.POS,
                card_last4=self.digits(4),
                authorization_code=f"AUTH{self.digits(6)}",
            ),
        )

    def generate_for_account(self, account_id: str, count: int) -> Iterator[Transaction]:
        """Generate ``count`` transactions for one account."""
        for _ in range(count):
            yield self.generate(account_id)

    def generate_between(
        self,
        account_id: str,
        start: datetime,
        end: datetime,
        count: int,
    ) -> list[Transaction]:
        """Generate ``count`` transactions dated within ``[start, end]``, oldest first."""
        span = (end - start).total_seconds()
        dates = sorted(start + timedelta(seconds=self.rng.uniform(0, span)) for _ in range(count))
        return [self.generate(account_id, transaction_date=when) for when in dates]
