"""Main CLI entry point."""

import logging

import click
from tabuledge.database.factories import create_sqlite_database

# Import and register all commands at module level
from tabuledge.cli.commands import account, event_log, journal, report


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides TABULEDGE_DB_PATH environment variable)",
    envvar="TABULEDGE_DB_PATH",
)
@click.option(
    "--user",
    default="unknown",
    envvar="TABULEDGE_USER",
    show_default=True,
    help="User recorded in the event log for changes",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user: str, verbose: bool):
    """Tabuledge - double-entry bookkeeping.

    Maintain a chart of accounts, submit and approve journal entries, and
    produce financial statements, a trial balance and financial ratios.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["user"] = user
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
journal.register_commands(cli)
report.register_commands(cli)
event_log.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
