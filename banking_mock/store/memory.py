"""In-memory entity stores for the mock banking API."""

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from banking_mock.exceptions import EntityNotFoundError
from banking_mock.models.banking import Account, Beneficiary, Payment, Statement, Transaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityStore(Generic[T]):
    """Mapping from entity ID to entity for one entity kind.

    Parameters
    ----------
    kind : str
        Entity kind, used in error messages (e.g. ``"Account"``).
    id_attribute : str
        Name of the attribute holding the entity ID.
    """

    def __init__(self, kind: str, id_attribute: str) -> None:
        self.kind = kind
        self.id_attribute = id_attribute
        self._entities: dict[str, T] = {}

    def add(self, entity: T) -> T:
        """Insert or replace an entity."""
        entity_id = getattr(entity, self.id_attribute)
        self._entities[entity_id] = entity
        return entity

    def get(self, entity_id: str) -> T:
        """Return the entity with ``entity_id`` or raise EntityNotFoundError."""
        try:
            return self._entities[entity_id]
        except KeyError:
            raise EntityNotFoundError(f"{self.kind} {entity_id} not found") from None

    def find(self, entity_id: str) -> T | None:
        return self._entities.get(entity_id)

    def list(self) -> list[T]:
        """Return all entities in insertion order."""
        return list(self._entities.values())

    def delete(self, entity_id: str) -> T:
        """Remove and return the entity with ``entity_id``."""
        try:
            return self._entities.pop(entity_id)
        except KeyError:
            raise EntityNotFoundError(f"{self.kind} {entity_id} not found") from None

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)


@dataclass
class BankingDataStore:
    """Process-lifetime stores, one per entity kind.

    No referential integrity is enforced between kinds: a payment's
    beneficiary is never looked up.
    """

    accounts: EntityStore[Account] = field(
        default_factory=lambda: EntityStore("Account", "account_id")
    )
    transactions: EntityStore[Transaction] = field(
        default_factory=lambda: EntityStore("Transaction", "transaction_id")
    )
    payments: EntityStore[Payment] = field(
        default_factory=lambda: EntityStore("Payment", "payment_id")
    )
    beneficiaries: EntityStore[Beneficiary] = field(
        default_factory=lambda: EntityStore("Beneficiary", "beneficiary_id")
    )
    statements: EntityStore[Statement] = field(
        default_factory=lambda: EntityStore("Statement", "statement_id")
    )

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "accounts": len(self.accounts),
            "transactions": len(self.transactions),
            "payments": len(self.payments),
            "beneficiaries": len(self.beneficiaries),
            "statements": len(self.statements),
        }
