"""Statement model for the banking domain."""

from dataclasses import dataclass
from datetime import date, datetime

from banking_mock.models.banking.enums import StatementFormat, StatementStatus


@dataclass(frozen=True)
class StatementPeriod:
    start_date: date
    end_date: date


@dataclass
class Statement:
    """Account statement covering one period."""

    statement_id: str
    account_id: str
    period: StatementPeriod
    generated_date: datetime
    format: StatementFormat
    size: int  # bytes
    status: StatementStatus
