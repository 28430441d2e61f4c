"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = (
    "this-month",
    "this-quarter",
    "this-year",
    "last-month",
    "last-quarter",
    "last-year",
)


def _quarter_start(day: date) -> date:
    return day.replace(month=3 * ((day.month - 1) // 3) + 1, day=1)


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    "this"/"last" phrases resolve to the first day of the period, so
    "last month" on 2024-03-10 is 2024-02-01.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("this ") or date_str.startswith("last "):
        which, _, period = date_str.partition(" ")
        key = f"{which}-{period}"
        if key in PERIODS:
            return get_date_range(key)[0]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a reporting period.

    "this-*" periods run from the start of the period to today; "last-*"
    periods cover the whole previous period.

    Args:
        period: One of this-month, this-quarter, this-year, last-month,
            last-quarter, last-year
        today: Reference date (defaults to the current date)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-quarter":
        return (_quarter_start(today), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "last-month":
        end_date = today.replace(day=1) - timedelta(days=1)
        return (end_date.replace(day=1), end_date)

    elif period == "last-quarter":
        start_date = _quarter_start(today) - relativedelta(months=3)
        return (start_date, _quarter_start(today) - timedelta(days=1))

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        return (start_date, today.replace(month=1, day=1) - timedelta(days=1))

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
    )


def coerce_date(value) -> date | None:
    """Coerce a stored date value to a date, or None if it cannot be read.

    Accepts date and datetime objects and absolute date strings such as
    "2024-01-05" or "2024-01-05T10:30:00Z". Relative phrases are not
    accepted here; stored data is never relative.

    Args:
        value: Raw date value from a record

    Returns:
        Date object, or None for missing or unparseable values
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return date_parser.parse(value.strip()).date()
        except (ValueError, OverflowError):
            return None
    return None
