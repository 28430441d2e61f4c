"""Financial report commands."""

import json

import click
from tabuledge.cli.date_filters import parse_date_or_exit, period_options, resolve_cli_date_range
from tabuledge.domain.reports import ReportService, serialize_report
from tabuledge.utils.amount_parser import format_money, parse_amount

json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


def parse_amount_or_exit(ctx, value: str, label: str):
    """Parse a CLI amount, exiting with an error if it is invalid."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def echo_json(result) -> None:
    click.echo(json.dumps(serialize_report(result), indent=2))


def echo_line(label: str, amount, width: int = 40) -> None:
    click.echo(f"{label:<{width}} {format_money(amount):>15}")


@click.group()
def report_group():
    """Financial statements, trial balance and ratios."""
    pass


@report_group.command("balances")
@click.option("--active-only", is_flag=True, help="Leave deactivated accounts out")
@period_options
@json_option
@click.pass_context
def balances_report(
    ctx,
    active_only: bool,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...],
    as_json: bool,
):
    """Show debit, credit and ending balances per account.

    Examples:
        tabuledge report balances
        tabuledge report balances --this-year
        tabuledge report balances --start-date 2024-01-01 --end-date 2024-03-31
    """
    service = ReportService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, periods=periods
    )
    balances = service.balances(start, end, active_only=active_only)

    if as_json:
        echo_json(balances)
        return
    if not balances:
        click.echo("No accounts found.")
        return

    click.echo(f"\nBalances {start or 'beginning'} to {end or 'today'}:")
    click.echo("-" * 90)
    click.echo(
        f"{'Number':>6} | {'Account':<24} | {'Debits':>14} | {'Credits':>14} | {'Balance':>15}"
    )
    click.echo("-" * 90)
    for record in balances.values():
        click.echo(
            f"{record.account.number:>6} | {record.account.name[:24]:<24} | "
            f"{format_money(record.debit_total):>14} | {format_money(record.credit_total):>14} | "
            f"{format_money(record.end):>15}"
        )


@report_group.command("income-statement")
@period_options
@json_option
@click.pass_context
def income_statement_report(
    ctx, start_date: str | None, end_date: str | None, periods: tuple[str, ...], as_json: bool
):
    """Show revenue, expenses and net income for a period."""
    service = ReportService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, periods=periods
    )
    statement = service.income_statement(start, end)

    if as_json:
        echo_json(statement)
        return

    click.echo(f"\nIncome Statement {start or 'beginning'} to {end or 'today'}")
    click.echo("=" * 56)
    echo_line("Revenue", statement.revenue)
    echo_line("Expenses", statement.expenses)
    click.echo("-" * 56)
    echo_line("Net income", statement.net_income)


@report_group.command("balance-sheet")
@click.option("--as-of", help="Balance sheet date (defaults to everything posted)")
@click.option("--retained-earnings-opening", default="0", help="Opening retained earnings")
@json_option
@click.pass_context
def balance_sheet_report(ctx, as_of: str | None, retained_earnings_opening: str, as_json: bool):
    """Show the balance sheet as of a date."""
    service = ReportService(ctx.obj["db"])
    when = parse_date_or_exit(ctx, as_of, "as-of date")
    opening = parse_amount_or_exit(ctx, retained_earnings_opening, "retained earnings opening")
    sheet = service.balance_sheet(when, opening)

    if as_json:
        echo_json(sheet)
        return

    click.echo(f"\nBalance Sheet as of {when or 'today'}")
    click.echo("=" * 56)
    echo_line("Current assets", sheet.current_assets)
    echo_line("  of which inventory", sheet.inventory)
    echo_line("Total assets", sheet.total_assets)
    click.echo("-" * 56)
    echo_line("Current liabilities", sheet.current_liabilities)
    echo_line("Total liabilities", sheet.total_liabilities)
    echo_line("Equity", sheet.equity)
    echo_line("Retained earnings", sheet.retained_earnings)
    echo_line("Total equity", sheet.total_equity)
    click.echo("-" * 56)
    echo_line("Total liabilities and equity", sheet.total_liabilities + sheet.total_equity)
    if not sheet.is_balanced:
        click.echo("Warning: assets do not equal liabilities plus equity", err=True)


@report_group.command("trial-balance")
@click.option("--as-of", help="Trial balance date (defaults to everything posted)")
@json_option
@click.pass_context
def trial_balance_report(ctx, as_of: str | None, as_json: bool):
    """Show the trial balance as of a date."""
    service = ReportService(ctx.obj["db"])
    when = parse_date_or_exit(ctx, as_of, "as-of date")
    result = service.trial_balance(when)

    if as_json:
        echo_json(result)
        return

    click.echo(f"\nTrial Balance as of {when or 'today'}")
    click.echo("-" * 70)
    click.echo(f"{'Number':>6} | {'Account':<24} | {'Debit':>15} | {'Credit':>15}")
    click.echo("-" * 70)
    for row in result.rows:
        click.echo(
            f"{row.account.number:>6} | {row.account.name[:24]:<24} | "
            f"{format_money(row.debit):>15} | {format_money(row.credit):>15}"
        )
    click.echo("-" * 70)
    click.echo(
        f"{'':>6} | {'Totals':<24} | {format_money(result.total_debit):>15} | "
        f"{format_money(result.total_credit):>15}"
    )
    if not result.is_balanced:
        click.echo("Warning: trial balance is out of balance", err=True)


@report_group.command("retained-earnings")
@click.option("--opening", default="0", help="Opening retained earnings")
@click.option("--dividends", default="0", help="Dividends declared in the period")
@period_options
@json_option
@click.pass_context
def retained_earnings_report(
    ctx,
    opening: str,
    dividends: str,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...],
    as_json: bool,
):
    """Show the retained earnings roll-forward for a period."""
    service = ReportService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, periods=periods
    )
    statement = service.retained_earnings(
        start,
        end,
        opening=parse_amount_or_exit(ctx, opening, "opening balance"),
        dividends=parse_amount_or_exit(ctx, dividends, "dividends"),
    )

    if as_json:
        echo_json(statement)
        return

    click.echo(f"\nRetained Earnings {start or 'beginning'} to {end or 'today'}")
    click.echo("=" * 56)
    echo_line("Opening retained earnings", statement.opening)
    echo_line("Add: net income", statement.net_income)
    echo_line("Less: dividends", statement.dividends)
    click.echo("-" * 56)
    echo_line("Ending retained earnings", statement.ending)


@report_group.command("ratios")
@click.option("--as-of", help="Ratio date (defaults to everything posted)")
@click.option("--retained-earnings-opening", default="0", help="Opening retained earnings")
@json_option
@click.pass_context
def ratios_report(ctx, as_of: str | None, retained_earnings_opening: str, as_json: bool):
    """Show financial ratios with a good/warning/bad status."""
    service = ReportService(ctx.obj["db"])
    when = parse_date_or_exit(ctx, as_of, "as-of date")
    opening = parse_amount_or_exit(ctx, retained_earnings_opening, "retained earnings opening")
    results = service.ratios(when, opening)

    if as_json:
        echo_json(results)
        return

    click.echo(f"\nFinancial Ratios as of {when or 'today'}")
    click.echo("-" * 78)
    for ratio in results:
        click.echo(f"{ratio.label:<22} {ratio.formatted:>16}  [{ratio.status.value}]")
        click.echo(f"  {ratio.formula}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
