"""Configuration management for banking-mock."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from banking_mock.exceptions import ConfigurationError

DEFAULT_SEEDED_ACCOUNTS: list[tuple[str, str]] = [
    ("acc-123456789", "CHECKING"),
    ("acc-987654321", "SAVINGS"),
    ("acc-111222333", "BUSINESS"),
    ("acc-444555666", "CHECKING"),
    ("acc-777888999", "SAVINGS"),
]

DEFAULT_SEEDED_TRANSACTIONS: list[tuple[str, str]] = [
    ("txn-20260109-001", "acc-123456789"),
    ("txn-20260109-002", "acc-987654321"),
    ("txn-20260109-003", "acc-111222333"),
]

DEFAULT_SEEDED_STATEMENTS: list[tuple[str, str]] = [
    ("stmt-202401-001", "acc-123456789"),
    ("stmt-202401-002", "acc-987654321"),
    ("stmt-202312-001", "acc-123456789"),
    ("stmt-202312-002", "acc-987654321"),
    ("stmt-202311-001", "acc-123456789"),
]


@dataclass
class PaginationConfig:
    """Defaults and bounds for collection queries."""

    default_page: int = 1
    default_limit: int = 20
    max_limit: int = 1000

    def __post_init__(self) -> None:
        if self.max_limit < 1:
            raise ConfigurationError(f"max_limit must be >= 1, got {self.max_limit}")
        if not 1 <= self.default_limit <= self.max_limit:
            raise ConfigurationError(
                f"default_limit must be within [1, {self.max_limit}], got {self.default_limit}"
            )
        if self.default_page < 1:
            raise ConfigurationError(f"default_page must be >= 1, got {self.default_page}")


@dataclass
class PaymentConfig:
    """Payment creation rules."""

    max_amount: Decimal = Decimal("1000000")
    default_currency: str = "GBP"
    randomize_status: bool = False

    def __post_init__(self) -> None:
        if not self.max_amount.is_finite() or self.max_amount <= 0:
            raise ConfigurationError(f"max_amount must be positive, got {self.max_amount}")


@dataclass
class SeedDataConfig:
    """Startup seed set and per-request generation sizes."""

    accounts: list[tuple[str, str]] = field(default_factory=lambda: list(DEFAULT_SEEDED_ACCOUNTS))
    transactions: list[tuple[str, str]] = field(
        default_factory=lambda: list(DEFAULT_SEEDED_TRANSACTIONS)
    )
    statements: list[tuple[str, str]] = field(
        default_factory=lambda: list(DEFAULT_SEEDED_STATEMENTS)
    )
    random_transactions: int = 17
    beneficiaries: int = 10
    transactions_per_account: int = 50
    statements_per_account: int = 12


@dataclass
class OutputConfig:
    """Fixture export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("fixtures"))
    pretty_json: bool = False


@dataclass
class MockBankConfig:
    """Main configuration for banking-mock."""

    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    payments: PaymentConfig = field(default_factory=PaymentConfig)
    seed_data: SeedDataConfig = field(default_factory=SeedDataConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    locale: str = "en_GB"
    log_level: str = "INFO"
    log_format: str = "standard"
    api_version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> "MockBankConfig":
        """Create config from environment variables."""
        import os

        pagination = PaginationConfig(
            default_limit=_env_int("DEFAULT_LIMIT", 20),
            max_limit=_env_int("MAX_LIMIT", 1000),
        )

        max_amount_str = os.getenv("MAX_PAYMENT_AMOUNT", "1000000")
        try:
            max_amount = Decimal(max_amount_str)
        except InvalidOperation as exc:
            raise ConfigurationError(
                f"MAX_PAYMENT_AMOUNT must be a number, got {max_amount_str!r}"
            ) from exc
        if not max_amount.is_finite():
            raise ConfigurationError(
                f"MAX_PAYMENT_AMOUNT must be a finite number, got {max_amount_str!r}"
            )

        payments = PaymentConfig(
            max_amount=max_amount,
            randomize_status=os.getenv("RANDOMIZE_PAYMENT_STATUS", "false").lower() == "true",
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "fixtures")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            pagination=pagination,
            payments=payments,
            output=output,
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
