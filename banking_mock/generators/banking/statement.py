"""Statement generator for the banking domain."""

from datetime import date, timedelta

from banking_mock.generators.base import BaseGenerator
from banking_mock.models.banking import (
    Statement,
    StatementFormat,
    StatementPeriod,
    StatementStatus,
)


def month_period(year: int, month: int) -> StatementPeriod:
    """Return the calendar month ``year``-``month`` as a period."""
    start = date(year, month, 1)
    next_month = date(year + month // 12, month % 12 + 1, 1)
    return StatementPeriod(start_date=start, end_date=next_month - timedelta(days=1))


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return ``(year, month)`` moved by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


class StatementGenerator(BaseGenerator):
    """Generate synthetic account statements."""

    ID_PREFIX = "stmt-"

    def generate(
        self,
        account_id: str,
        statement_id: str | None = None,
        period: StatementPeriod | None = None,
    ) -> Statement:
        """Generate a single statement.

        Without an explicit period the statement covers the 30 days up to
        today.
        """
        now = self.clock()
        if period is None:
            period = StatementPeriod(
                start_date=(now - timedelta(days=30)).date(),
                end_date=now.date(),
            )

        return Statement(
            statement_id=statement_id or self.new_id(),
            account_id=account_id,
            period=period,
            generated_date=now,
            format=StatementFormat.PDF,
            size=self.rng.randint(100000, 999999),
            status=StatementStatus.AVAILABLE,
        )

    def generate_monthly(self, account_id: str, months: int) -> list[Statement]:
        """Generate one statement per completed month, most recent first."""
        today = self.clock().date()
        statements = []
        for back in range(1, months + 1):
            year, month = shift_month(today.year, today.month, -back)
            statements.append(self.generate(account_id, period=month_period(year, month)))
        return statements
