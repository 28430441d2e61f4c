"""CLI helpers for date range resolution."""

from datetime import date
import functools

import click

from tabuledge.utils.date_parser import PERIODS, get_date_range, parse_date


def period_options(func):
    """Add --start-date/--end-date and one flag per reporting period.

    The period flags are collapsed into a single ``periods`` tuple argument.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        periods = tuple(p for p in PERIODS if kwargs.pop(p.replace("-", "_"), False))
        return func(*args, periods=periods, **kwargs)

    for period in reversed(PERIODS):
        wrapper = click.option(
            f"--{period}", is_flag=True, help=f"Limit to {period.replace('-', ' ')}"
        )(wrapper)
    wrapper = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today')"
    )(wrapper)
    wrapper = click.option(
        "--start-date",
        help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')",
    )(wrapper)
    return wrapper


def parse_date_or_exit(ctx: click.Context, value: str | None, label: str) -> date | None:
    """Parse an optional CLI date, exiting with an error if it is invalid."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...] = (),
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    if len(periods) > 1:
        click.echo(
            "Error: Only one period option ("
            + ", ".join(f"--{p}" for p in PERIODS)
            + ") can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if periods and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if periods:
        return get_date_range(periods[0])

    start = parse_date_or_exit(ctx, start_date, "start date")
    end = parse_date_or_exit(ctx, end_date, "end date")

    if start is None and end is None and default_range is not None:
        start, end = default_range

    return start, end
