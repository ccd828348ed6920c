"""Startup seed data for the in-memory stores."""

import logging

from banking_mock.config import SeedDataConfig
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.generators.banking.statement import month_period
from banking_mock.models.banking import StatementPeriod
from banking_mock.store.memory import BankingDataStore

logger = logging.getLogger(__name__)


def seed_store(
    config: SeedDataConfig,
    generators: MockDataGenerators,
    store: BankingDataStore | None = None,
) -> BankingDataStore:
    """Populate a store with the fixed startup data set.

    Accounts, the fixed transactions and statements keep their configured
    IDs so clients can rely on them; random transactions are spread over
    the seeded accounts and beneficiaries get generated IDs. No payments are
    seeded.

    Parameters
    ----------
    config : SeedDataConfig
        Seed set definition.
    generators : MockDataGenerators
        Generators to draw entities from.
    store : BankingDataStore | None
        Store to fill; a new one is created when omitted.

    Returns
    -------
    BankingDataStore
        The populated store.
    """
    store = store or BankingDataStore()

    for account_id, account_type in config.accounts:
        store.accounts.add(generators.accounts.generate(account_id, account_type))

    for transaction_id, account_id in config.transactions:
        store.transactions.add(
            generators.transactions.generate(account_id, transaction_id=transaction_id)
        )

    account_ids = [account_id for account_id, _ in config.accounts]
    if account_ids:
        for _ in range(config.random_transactions):
            account_id = generators.transactions.rng.choice(account_ids)
            store.transactions.add(generators.transactions.generate(account_id))

    for _ in range(config.beneficiaries):
        store.beneficiaries.add(generators.beneficiaries.generate())

    for statement_id, account_id in config.statements:
        store.statements.add(
            generators.statements.generate(
                account_id,
                statement_id=statement_id,
                period=_period_from_id(statement_id),
            )
        )

    logger.info("Seeded mock data: %s", store.summary())
    return store


def _period_from_id(statement_id: str) -> StatementPeriod | None:
    """Read the ``YYYYMM`` month out of IDs like ``stmt-202401-001``."""
    parts = statement_id.split("-")
    if len(parts) >= 2 and len(parts[1]) == 6 and parts[1].isdigit():
        year, month = int(parts[1][:4]), int(parts[1][4:])
        if 1 <= month <= 12:
            return month_period(year, month)
    return None
