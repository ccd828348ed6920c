"""Pre-generated value pools for fast, reproducible data generation.

Replaces per-call Faker invocations with ``rng.choice()`` lookups from
pools populated once at construction.  Both the Faker instance and the
selection RNG are seeded from the same value, so a seeded pool always
yields the same sequence.

Usage::

    pool = FakerPool(seed=42)
    name = pool.name()          # rng.choice from 200 names
    company = pool.company()
"""

from __future__ import annotations

import random

from faker import Faker


class FakerPool:
    """Pre-generated pools of Faker values for fast random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_GB``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    DEFAULT_SIZES: dict[str, int] = {
        "name": 200,
        "company": 100,
        "street": 100,
        "city": 50,
        "postcode": 100,
    }

    REGIONS = [
        "Greater London",
        "Greater Manchester",
        "West Midlands",
        "West Yorkshire",
        "Merseyside",
        "Lothian",
    ]

    EMAIL_DOMAINS = [
        "example.com",
        "example.co.uk",
        "example.org",
    ]

    def __init__(
        self,
        locale: str = "en_GB",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
        self.rng = random.Random(seed)

        self._names: list[str] = [fake.name() for _ in range(sizes["name"])]
        self._companies: list[str] = [fake.company() for _ in range(sizes["company"])]
        self._streets: list[str] = [fake.street_address() for _ in range(sizes["street"])]
        self._cities: list[str] = [fake.city() for _ in range(sizes["city"])]
        self._postcodes: list[str] = [fake.postcode() for _ in range(sizes["postcode"])]

    # --- Public accessors ---

    def name(self) -> str:
        """Return a random full name."""
        return self.rng.choice(self._names)

    def company(self) -> str:
        """Return a random company name."""
        return self.rng.choice(self._companies)

    def street(self) -> str:
        """Return a random street address line."""
        return self.rng.choice(self._streets)

    def city(self) -> str:
        return self.rng.choice(self._cities)

    def region(self) -> str:
        return self.rng.choice(self.REGIONS)

    def postcode(self) -> str:
        return self.rng.choice(self._postcodes)

    def email_for(self, name: str) -> str:
        """Return an email address derived from ``name``."""
        local = ".".join(part for part in name.lower().replace(",", "").split() if part)
        local = "".join(ch for ch in local if ch.isalnum() or ch == ".") or "user"
        return f"{local}@{self.rng.choice(self.EMAIL_DOMAINS)}"

    def uk_phone(self) -> str:
        """Return a ``+44`` number with a 10 digit subscriber part."""
        return f"+44{self.rng.randint(1000000000, 9999999999)}"
