"""Utility functions for tabuledge."""

from tabuledge.utils.date_parser import parse_date, coerce_date
from tabuledge.utils.amount_parser import parse_amount, to_decimal
from tabuledge.utils.serialization import to_primitive

__all__ = ["parse_date", "coerce_date", "parse_amount", "to_decimal", "to_primitive"]
