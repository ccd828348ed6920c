"""Base generator class for all mock data generators."""

from __future__ import annotations

import random
from abc import ABC
from datetime import datetime, timedelta
from decimal import Decimal

from banking_mock.clock import Clock, utcnow
from banking_mock.generators.pool import FakerPool

CENTS = Decimal("0.01")


class BaseGenerator(ABC):
    """Base class for all mock data generators.

    Provides common initialization: a private seedable random source,
    a FakerPool for names and addresses, and an injectable clock.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_GB``).
    pool : FakerPool | None
        Pre-generated value pool. Generators built for the same service
        share one pool.
    clock : Clock | None
        Returns "now"; defaults to UTC wall clock.
    """

    ID_PREFIX = ""

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_GB",
        pool: FakerPool | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.rng = random.Random(seed)
        self.pool = pool or FakerPool(locale=locale, seed=seed)
        self.clock = clock or utcnow

    def new_id(self, prefix: str | None = None) -> str:
        """Return a fresh ``<prefix>xxxxxxxx-xxxx`` identifier."""
        token = f"{self.rng.getrandbits(48):012x}"
        return f"{self.ID_PREFIX if prefix is None else prefix}{token[:8]}-{token[8:]}"

    def money(self, low: float, high: float) -> Decimal:
        """Return a two-decimal amount in ``[low, high)``."""
        value = Decimal(str(self.rng.uniform(low, high))).quantize(CENTS)
        # quantize may round up onto the open bound
        if value >= Decimal(str(high)):
            value -= CENTS
        return value

    def past(self, days: float) -> datetime:
        """Return a moment within the last ``days`` days."""
        return self.clock() - timedelta(seconds=self.rng.uniform(0, days * 86400))

    def digits(self, count: int) -> str:
        """Return ``count`` random digits without a leading zero."""
        return str(self.rng.randint(10 ** (count - 1), 10**count - 1))
