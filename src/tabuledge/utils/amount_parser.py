"""Amount parsing utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
import re
from typing import Any

CENT = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    return -amount if is_negative else amount


def to_decimal(value: Any) -> Decimal:
    """Coerce a loosely typed amount to Decimal, defaulting to zero.

    Missing, empty, unparseable and NaN values all become ``Decimal(0)``.
    Infinities are kept so that callers can detect non-finite input.

    Args:
        value: Decimal, int, float, string or None

    Returns:
        Decimal amount
    """
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = parse_amount(value)
        except ValueError:
            return Decimal(0)
    else:
        return Decimal(0)

    if result.is_nan():
        return Decimal(0)
    return result


def round_amount(
    amount: Decimal, places: int = 2, rounding: str = ROUND_HALF_UP
) -> Decimal:
    """Round to a fixed number of decimal places, however large the amount.

    Non-finite amounts are returned unchanged.
    """
    if not amount.is_finite():
        return amount
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return amount.quantize(Decimal(1).scaleb(-places), rounding=rounding)


def format_money(amount: Decimal) -> str:
    """Format an amount with thousands separators and two decimals."""
    return f"{round_amount(amount):,.2f}"
