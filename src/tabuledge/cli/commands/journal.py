"""Journal entry commands."""

from datetime import date

import click
from tabuledge.cli.account_resolution import resolve_account_or_exit
from tabuledge.cli.date_filters import parse_date_or_exit, period_options, resolve_cli_date_range
from tabuledge.cli.error_handling import handle_domain_error
from tabuledge.domain.account import AccountService
from tabuledge.domain.entities import JournalLine
from tabuledge.domain.journal import ENTRY_TYPES, JournalService
from tabuledge.utils.amount_parser import format_money, parse_amount


def parse_line_option(ctx, account_service: AccountService, value: str, side: str) -> JournalLine:
    """Parse an ACCOUNT:AMOUNT option value into a journal line."""
    account, sep, amount = value.rpartition(":")
    if not sep or not account.strip():
        click.echo(f"Error: Invalid {side} line '{value}', expected ACCOUNT:AMOUNT", err=True)
        ctx.exit(1)

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    return JournalLine(account_id=account_id, amount=parsed_amount, side=side)


@click.group()
def journal_group():
    """Submit and review journal entries."""
    pass


@journal_group.command("create")
@click.option("--date", "entry_date", help="Entry date (YYYY-MM-DD or relative like 'today'); defaults to today")
@click.option("--debit", "debits", multiple=True, metavar="ACCOUNT:AMOUNT", help="Debit line (repeatable)")
@click.option("--credit", "credits", multiple=True, metavar="ACCOUNT:AMOUNT", help="Credit line (repeatable)")
@click.option("--description", help="Entry description")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice(ENTRY_TYPES, case_sensitive=False),
    default="regular",
    show_default=True,
    help="Entry type",
)
@click.pass_context
def create_entry(
    ctx,
    entry_date: str | None,
    debits: tuple[str, ...],
    credits: tuple[str, ...],
    description: str | None,
    entry_type: str,
):
    """Submit a journal entry for approval.

    ACCOUNT can be an account ID, number or name. Debits must equal credits.

    Examples:
        tabuledge journal create --debit 101:500 --credit 401:500 --description "Cash sale"
        tabuledge journal create --date 2024-03-31 --type adjusting --debit "Rent Expense:1200" --credit "Prepaid Rent:1200"
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = JournalService(db, user=ctx.obj.get("user"))

    when = parse_date_or_exit(ctx, entry_date, "date") or date.today()
    lines = [parse_line_option(ctx, account_service, value, "debit") for value in debits]
    lines += [parse_line_option(ctx, account_service, value, "credit") for value in credits]

    try:
        entry_id = service.create_entry(
            entry_date=when, lines=lines, description=description, entry_type=entry_type
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Submitted journal entry {entry_id} for approval")


@journal_group.command("list")
@click.option(
    "--status",
    type=click.Choice(["pending", "approved", "rejected"], case_sensitive=False),
    help="Only entries with this status",
)
@click.option(
    "--type",
    "entry_type",
    type=click.Choice(ENTRY_TYPES, case_sensitive=False),
    help="Only entries of this type",
)
@click.option("--search", help="Match description, account name or amount")
@period_options
@click.pass_context
def list_entries(
    ctx,
    status: str | None,
    entry_type: str | None,
    search: str | None,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...],
):
    """List journal entries, newest first."""
    service = JournalService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, periods=periods
    )

    entries = service.list_entries(
        status=status, entry_type=entry_type, start_date=start, end_date=end, search=search
    )
    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nFound {len(entries)} journal entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<32} {'Date':<12} {'Type':<10} {'Status':<9} {'Amount':>14}  {'Description':<20}"
    )
    click.echo("-" * 100)
    for entry in entries:
        click.echo(
            f"{entry.id:<32} {str(entry.date):<12} {entry.entry_type:<10} "
            f"{entry.status.value:<9} {format_money(entry.total_debits):>14}  "
            f"{(entry.description or '')[:20]:<20}"
        )


@journal_group.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str):
    """Show a journal entry and its lines."""
    service = JournalService(ctx.obj["db"])
    entry = service.get_entry(entry_id)
    if entry is None:
        click.echo(f"Error: Journal entry {entry_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Journal entry:  {entry.id}")
    click.echo(f"Date:           {entry.date}")
    click.echo(f"Type:           {entry.entry_type}")
    click.echo(f"Status:         {entry.status.value}")
    if entry.description:
        click.echo(f"Description:    {entry.description}")
    if entry.created_by:
        click.echo(f"Submitted by:   {entry.created_by}")
    if entry.reviewed_by:
        click.echo(f"Reviewed by:    {entry.reviewed_by}")
    if entry.rejection_reason:
        click.echo(f"Reason:         {entry.rejection_reason}")

    click.echo("-" * 60)
    for line in entry.debit_lines:
        click.echo(f"  {line.account_name:<30} {format_money(line.amount):>12}")
    for line in entry.credit_lines:
        click.echo(f"      {line.account_name:<26} {'':>12} {format_money(line.amount):>12}")
    click.echo("-" * 60)
    click.echo(
        f"  {'Totals':<30} {format_money(entry.total_debits):>12} "
        f"{format_money(entry.total_credits):>12}"
    )


@journal_group.command("approve")
@click.argument("entry_id")
@click.pass_context
def approve_entry(ctx, entry_id: str):
    """Approve a pending entry and post it to the ledger."""
    service = JournalService(ctx.obj["db"], user=ctx.obj.get("user"))
    try:
        posted = service.approve_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Approved journal entry {entry_id} ({len(posted)} ledger line(s) posted)")


@journal_group.command("reject")
@click.argument("entry_id")
@click.option("--reason", required=True, help="Why the entry is rejected")
@click.pass_context
def reject_entry(ctx, entry_id: str, reason: str):
    """Reject a pending entry."""
    service = JournalService(ctx.obj["db"], user=ctx.obj.get("user"))
    try:
        service.reject_entry(entry_id, reason)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Rejected journal entry {entry_id}")


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
