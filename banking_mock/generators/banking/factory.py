"""Bundle of generators sharing one pool, seed and clock."""

from dataclasses import dataclass

from banking_mock.clock import Clock
from banking_mock.generators.banking.account import AccountGenerator
from banking_mock.generators.banking.beneficiary import BeneficiaryGenerator
from banking_mock.generators.banking.payment import PaymentGenerator
from banking_mock.generators.banking.statement import StatementGenerator
from banking_mock.generators.banking.transaction import TransactionGenerator
from banking_mock.generators.pool import FakerPool


@dataclass
class MockDataGenerators:
    """One generator per entity kind."""

    accounts: AccountGenerator
    transactions: TransactionGenerator
    payments: PaymentGenerator
    beneficiaries: BeneficiaryGenerator
    statements: StatementGenerator

    @classmethod
    def create(
        cls,
        seed: int | None = None,
        locale: str = "en_GB",
        clock: Clock | None = None,
    ) -> "MockDataGenerators":
        """Build all generators over a single FakerPool.

        Each generator gets its own random source derived from ``seed`` so
        that adding entities of one kind does not shift the values of
        another.
        """
        pool = FakerPool(locale=locale, seed=seed)

        def sub_seed(offset: int) -> int | None:
            return None if seed is None else seed * 10 + offset

        return cls(
            accounts=AccountGenerator(sub_seed(1), locale, pool, clock),
            transactions=TransactionGenerator(sub_seed(2), locale, pool, clock),
            payments=PaymentGenerator(sub_seed(3), locale, pool, clock),
            beneficiaries=BeneficiaryGenerator(sub_seed(4), locale, pool, clock),
            statements=StatementGenerator(sub_seed(5), locale, pool, clock),
        )
