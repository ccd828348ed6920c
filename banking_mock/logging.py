"""Logging setup for banking-mock.

Request handling logs through module loggers with the request's correlation
ID attached as ``extra={"extra": {...}}``; see :func:`request_extra`.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | [%(correlation_id)s] %(message)s"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """Configure the root logger for banking-mock.

    Parameters
    ----------
    level : str
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
        names fall back to INFO.
    format_type : str
        ``"standard"`` for one line per record or ``"json"`` for one JSON
        object per record.
    stream : IO[str] | None
        Destination; stdout when omitted.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    root_logger.addHandler(handler)

    logging.getLogger("banking_mock").setLevel(log_level)
    # Faker logs locale fallbacks at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def request_extra(correlation_id: str, operation: str, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` argument for a request-scoped log call."""
    return {"extra": {"correlation_id": correlation_id, "operation": operation, **fields}}


class CorrelationIdFilter(logging.Filter):
    """Expose the request correlation ID as ``record.correlation_id``.

    Records logged outside a request get ``-``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        extra = getattr(record, "extra", None)
        correlation_id = extra.get("correlation_id") if isinstance(extra, dict) else None
        record.correlation_id = correlation_id or "-"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with request extras merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_data.update(extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
