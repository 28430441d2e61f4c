"""Conversion of domain results to JSON-safe primitives."""

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_primitive(obj: Any) -> Any:
    """Recursively convert dataclasses and values to JSON-safe primitives.

    Decimals become strings so no precision is lost, dates and datetimes
    become ISO strings and enums become their values. Mapping keys are
    converted to strings.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: to_primitive(getattr(obj, field.name))
            for field in dataclasses.fields(obj)
        }
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {str(key): to_primitive(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_primitive(item) for item in obj]
    return obj
