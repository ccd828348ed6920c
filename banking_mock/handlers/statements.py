"""Statement download handler."""

import csv
import io
import re
from datetime import datetime, time, timezone
from decimal import Decimal
from typing import Any, Mapping

from banking_mock.exceptions import InvalidFormatError
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.handlers.base import ApiResponse, check_id, lookup
from banking_mock.models.banking import Statement
from banking_mock.query.params import query_value
from banking_mock.store.memory import BankingDataStore

STATEMENT_ID_RE = re.compile(r"^stmt-[A-Za-z0-9-]+$")

CSV_HEADER = ["Date", "Description", "Amount", "Balance"]

MEDIA_TYPES = {
    "pdf": "application/pdf",
    "csv": "text/csv",
}


class StatementHandler:
    """Renders stored statements as PDF or CSV downloads."""

    CSV_ROWS = 10

    def __init__(self, store: BankingDataStore, generators: MockDataGenerators) -> None:
        self.store = store
        self.generators = generators

    def download_statement(
        self, statement_id: str, query: Mapping[str, Any] | None = None
    ) -> ApiResponse:
        """GET /statements/{statementId}/download?format=pdf|csv"""
        check_id(
            statement_id,
            STATEMENT_ID_RE,
            "INVALID_STATEMENT_ID",
            "Invalid statement ID format",
        )
        statement = lookup(self.store.statements, statement_id, "STATEMENT_NOT_FOUND")

        fmt = str(query_value(query or {}, "format") or "pdf").lower()
        if fmt not in MEDIA_TYPES:
            raise InvalidFormatError("Format must be either pdf or csv")

        content = self._render_pdf(statement) if fmt == "pdf" else self._render_csv(statement)
        return ApiResponse(
            status_code=200,
            media_type=MEDIA_TYPES[fmt],
            content=content,
            headers={
                "Content-Type": MEDIA_TYPES[fmt],
                "Content-Disposition": f'attachment; filename="statement-{statement_id}.{fmt}"',
            },
        )

    def _render_pdf(self, statement: Statement) -> bytes:
        period = statement.period
        lines = [
            "%PDF-1.4",
            f"% Mock PDF content for statement {statement.statement_id}",
            f"% Account {statement.account_id}",
            f"% Period {period.start_date.isoformat()} to {period.end_date.isoformat()}",
            "%%EOF",
        ]
        return ("\n".join(lines) + "\n").encode("ascii")

    def _render_csv(self, statement: Statement) -> bytes:
        """One row per transaction in the period with a running balance."""
        generator = self.generators.transactions
        start = datetime.combine(statement.period.start_date, time.min, tzinfo=timezone.utc)
        end = datetime.combine(statement.period.end_date, time.max, tzinfo=timezone.utc)
        transactions = generator.generate_between(statement.account_id, start, end, self.CSV_ROWS)

        balance: Decimal = generator.money(1000, 5000)
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for txn in transactions:
            balance += txn.amount
            writer.writerow(
                [
                    txn.transaction_date.date().isoformat(),
                    txn.merchant.name,
                    f"{txn.amount:.2f}",
                    f"{balance:.2f}",
                ]
            )
        return buffer.getvalue().encode("utf-8")
