"""Financial ratios with health banding.

The ratio set is fixed. Undefined ratios (zero or non-finite denominator,
non-finite numerator) have a value of None, display as "N/A" and always
band as warning.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from tabuledge.domain.entities import HealthBand, RatioResult, RatioTotals
from tabuledge.utils.amount_parser import round_amount, to_decimal

NOT_AVAILABLE = "N/A"

_TOTAL_FIELDS = {
    "current_assets": "currentAssets",
    "inventory": "inventory",
    "current_liabilities": "currentLiabilities",
    "total_liabilities": "totalLiabilities",
    "total_equity": "totalEquity",
    "total_assets": "totalAssets",
    "net_income": "netIncome",
    "revenue": "revenue",
}


def coerce_totals(raw: RatioTotals | Mapping[str, Any]) -> RatioTotals:
    """Build RatioTotals from a mapping with snake_case or camelCase keys.

    Missing or invalid fields become zero. ``quick_assets`` stays None
    unless supplied.
    """
    if isinstance(raw, RatioTotals):
        return raw

    values = {}
    for field_name, camel in _TOTAL_FIELDS.items():
        value = raw.get(field_name)
        if value is None:
            value = raw.get(camel)
        values[field_name] = to_decimal(value)

    quick = raw.get("quick_assets")
    if quick is None:
        quick = raw.get("quickAssets")
    return RatioTotals(
        **values, quick_assets=to_decimal(quick) if quick is not None else None
    )


def safe_divide(
    numerator: Optional[Decimal], denominator: Optional[Decimal]
) -> Optional[Decimal]:
    """Divide, returning None for a missing, zero or non-finite operand."""
    if numerator is None or denominator is None:
        return None
    if not numerator.is_finite() or not denominator.is_finite() or denominator == 0:
        return None
    return numerator / denominator


def safe_subtract(
    minuend: Decimal, subtrahend: Decimal
) -> Optional[Decimal]:
    """Subtract, returning None for a non-finite operand."""
    if not minuend.is_finite() or not subtrahend.is_finite():
        return None
    return minuend - subtrahend


def format_ratio(value: Optional[Decimal], digits: int = 2) -> str:
    if value is None or not value.is_finite():
        return NOT_AVAILABLE
    return f"{round_amount(value, digits)}x"


def format_percent(value: Optional[Decimal], digits: int = 1) -> str:
    if value is None or not value.is_finite():
        return NOT_AVAILABLE
    return f"{round_amount(value * 100, digits)}%"


def format_amount(value: Optional[Decimal], digits: int = 2) -> str:
    if value is None or not value.is_finite():
        return NOT_AVAILABLE
    return f"{round_amount(value, digits):,.{digits}f}"


def band_higher_is_better(
    value: Optional[Decimal], good_min: Decimal, warn_min: Decimal
) -> HealthBand:
    if value is None or not value.is_finite():
        return HealthBand.WARNING
    if value >= good_min:
        return HealthBand.GOOD
    if value >= warn_min:
        return HealthBand.WARNING
    return HealthBand.BAD


def band_lower_is_better(
    value: Optional[Decimal], good_max: Decimal, warn_max: Decimal
) -> HealthBand:
    if value is None or not value.is_finite():
        return HealthBand.WARNING
    if value <= good_max:
        return HealthBand.GOOD
    if value <= warn_max:
        return HealthBand.WARNING
    return HealthBand.BAD


def band_sign(value: Optional[Decimal]) -> HealthBand:
    """Positive is good, negative is bad, zero or undefined is a warning."""
    if value is None or not value.is_finite():
        return HealthBand.WARNING
    if value > 0:
        return HealthBand.GOOD
    if value < 0:
        return HealthBand.BAD
    return HealthBand.WARNING


def compute_ratios(raw: RatioTotals | Mapping[str, Any]) -> list[RatioResult]:
    """Compute the fixed set of financial ratios from statement totals.

    Args:
        raw: RatioTotals, or a mapping with the eight named totals and an
            optional quick assets override

    Returns:
        Ratio results in fixed order: current ratio, quick ratio,
        debt-to-equity, net profit margin, return on assets, working capital
    """
    totals = coerce_totals(raw)

    quick_assets = (
        totals.quick_assets
        if totals.quick_assets is not None
        else safe_subtract(totals.current_assets, totals.inventory)
    )

    current_ratio = safe_divide(totals.current_assets, totals.current_liabilities)
    quick_ratio = safe_divide(quick_assets, totals.current_liabilities)
    debt_to_equity = safe_divide(totals.total_liabilities, totals.total_equity)
    net_margin = safe_divide(totals.net_income, totals.revenue)
    return_on_assets = safe_divide(totals.net_income, totals.total_assets)

    working_capital = safe_subtract(
        totals.current_assets, totals.current_liabilities
    )

    return [
        RatioResult(
            key="currentRatio",
            label="Current Ratio",
            formula="Current Assets ÷ Current Liabilities",
            value=current_ratio,
            formatted=format_ratio(current_ratio),
            status=band_higher_is_better(current_ratio, Decimal("2.0"), Decimal("1.5")),
        ),
        RatioResult(
            key="quickRatio",
            label="Quick Ratio",
            formula="Quick Assets ÷ Current Liabilities",
            value=quick_ratio,
            formatted=format_ratio(quick_ratio),
            status=band_higher_is_better(quick_ratio, Decimal("1.0"), Decimal("0.7")),
        ),
        RatioResult(
            key="debtToEquity",
            label="Debt-to-Equity",
            formula="Total Liabilities ÷ Total Equity",
            value=debt_to_equity,
            formatted=format_ratio(debt_to_equity),
            status=band_lower_is_better(debt_to_equity, Decimal("1.0"), Decimal("2.0")),
        ),
        RatioResult(
            key="netMargin",
            label="Net Profit Margin",
            formula="Net Income ÷ Revenue",
            value=net_margin,
            formatted=format_percent(net_margin),
            status=band_higher_is_better(net_margin, Decimal("0.15"), Decimal("0.05")),
        ),
        RatioResult(
            key="returnOnAssets",
            label="Return on Assets",
            formula="Net Income ÷ Total Assets",
            value=return_on_assets,
            formatted=format_percent(return_on_assets),
            status=band_higher_is_better(
                return_on_assets, Decimal("0.10"), Decimal("0.03")
            ),
        ),
        RatioResult(
            key="workingCapital",
            label="Working Capital",
            formula="Current Assets − Current Liabilities",
            value=working_capital,
            formatted=format_amount(working_capital),
            status=band_sign(working_capital),
        ),
    ]
