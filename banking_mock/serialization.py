"""Shared serialization of models into JSON response bodies."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any


def camel_case(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO 8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def to_dict(obj: Any) -> dict:
    """Convert a model to a camelCase JSON-ready dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {key: serialize_value(value) for key, value in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass, including nested dataclasses, field by field."""
    return {camel_case(f.name): serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def pick(obj: Any, *names: str) -> dict:
    """Serialize only the listed fields of a dataclass, in the given order."""
    return {camel_case(name): serialize_value(getattr(obj, name)) for name in names}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Money is stored as Decimal and rendered as a JSON number.
    """
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return format_timestamp(value)
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
