"""In-memory data stores for the mock banking API."""

from banking_mock.store.memory import BankingDataStore, EntityStore
from banking_mock.store.seed import seed_store

__all__ = ["BankingDataStore", "EntityStore", "seed_store"]
