"""Event log viewing command."""

import click
from tabuledge.cli.account_resolution import resolve_account_or_exit
from tabuledge.domain.account import AccountService
from tabuledge.domain.event_log import EventLogService


@click.command("log")
@click.option(
    "--entity",
    type=click.Choice(["account", "journal_entry"]),
    help="Only events for this kind of record",
)
@click.option("--account", help="Only events for this account (ID, number or name)")
@click.option("--entry", "entry_id", help="Only events for this journal entry ID")
@click.option("--user", "by_user", help="Only changes made by this user")
@click.option("--verbose", "-v", is_flag=True, help="Show changed fields with before and after values")
@click.pass_context
def view_log(
    ctx,
    entity: str | None,
    account: str | None,
    entry_id: str | None,
    by_user: str | None,
    verbose: bool,
):
    """View the audit trail of account and journal entry changes.

    Examples:
        tabuledge log
        tabuledge log --account 101 -v
        tabuledge log --user alice
    """
    db = ctx.obj["db"]
    service = EventLogService(db)

    entity_id = None
    if account is not None and entry_id is not None:
        click.echo("Error: --account and --entry cannot be combined.", err=True)
        ctx.exit(1)
    if account is not None:
        entity = "account"
        entity_id = resolve_account_or_exit(ctx, AccountService(db), account)
    elif entry_id is not None:
        entity = "journal_entry"
        entity_id = entry_id

    events = service.list_events(entity=entity, entity_id=entity_id, user=by_user)
    if not events:
        click.echo("No events found.")
        return

    click.echo(f"\nFound {len(events)} event(s):")
    click.echo("-" * 100)
    for event in events:
        when = event.at.strftime("%Y-%m-%d %H:%M:%S") if event.at else ""
        click.echo(
            f"{when:<20} {event.user or 'unknown':<12} {event.action:<10} "
            f"{event.entity:<14} {event.entity_id}"
        )
        if verbose:
            before = event.before or {}
            after = event.after or {}
            for name in service.changed_fields(event):
                click.echo(f"    {name}: {before.get(name)!r} -> {after.get(name)!r}")


def register_commands(cli):
    """Register log command with main CLI."""
    cli.add_command(view_log)
