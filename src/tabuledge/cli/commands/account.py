"""Account management commands."""

import click
from tabuledge.cli.account_resolution import resolve_account_or_exit
from tabuledge.cli.error_handling import handle_domain_error
from tabuledge.domain.account import AccountService
from tabuledge.utils.amount_parser import format_money

CATEGORIES = ["Asset", "Liability", "Equity", "Revenue", "Expense"]


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--number", required=True, help="Account number (digits, category prefix)")
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORIES, case_sensitive=False),
    help="Account category",
)
@click.option("--subcategory", default="", help="Subcategory, e.g. 'Current Assets' or 'Inventory'")
@click.option(
    "--normal-side",
    type=click.Choice(["Debit", "Credit"], case_sensitive=False),
    help="Normal balance side (defaults from the category)",
)
@click.option("--initial-balance", default="0", help="Opening balance")
@click.option("--description", default="", help="Account description")
@click.option("--order", default="", help="Display order")
@click.option("--comment", default="", help="Comment")
@click.pass_context
def create_account(
    ctx,
    name: str,
    number: str,
    category: str,
    subcategory: str,
    normal_side: str | None,
    initial_balance: str,
    description: str,
    order: str,
    comment: str,
):
    """Create a new account.

    Account numbers must start with the category prefix: 1 for assets,
    2 liabilities, 3 equity, 4 revenue and 5 expenses.

    Examples:
        tabuledge account create "Cash" --number 101 --category Asset
        tabuledge account create "Inventory" --number 130 --category Asset --subcategory Inventory
        tabuledge account create "Sales" --number 401 --category Revenue
    """
    service = AccountService(ctx.obj["db"], user=ctx.obj.get("user"))

    try:
        account_id = service.create_account(
            name=name,
            number=number,
            category=category,
            subcategory=subcategory,
            normal_side=normal_side,
            initial_balance=initial_balance,
            description=description,
            order=order,
            comment=comment,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name}' #{number} (ID: {account_id})")


@account_group.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include deactivated accounts")
@click.option("--category", help="Only show this category")
@click.pass_context
def list_accounts(ctx, show_all: bool, category: str | None):
    """List accounts ordered by number."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts(active_only=not show_all)
    if category:
        accounts = [acc for acc in accounts if acc.type == category.lower()]
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 78)
    for acc in accounts:
        status = "" if acc.active else " (inactive)"
        click.echo(
            f"{acc.number:>6s} | {acc.name:24s} | {acc.category:9s} | "
            f"{acc.subcategory:18s} | {format_money(acc.initial_balance):>12s}{status}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show an account and its current balance.

    ACCOUNT can be an account ID, number or name.
    """
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)

    acc = service.get_account(account_id)
    click.echo(f"Account:        {acc.name} #{acc.number}")
    click.echo(f"ID:             {acc.id}")
    click.echo(f"Category:       {acc.category} / {acc.subcategory or '-'}")
    click.echo(f"Normal side:    {acc.normal_side or 'category default'}")
    click.echo(f"Statement:      {acc.statement}")
    click.echo(f"Initial:        {format_money(acc.initial_balance)}")
    click.echo(f"Balance:        {format_money(service.get_balance(account_id))}")
    click.echo(f"Active:         {'yes' if acc.active else 'no'}")
    if acc.description:
        click.echo(f"Description:    {acc.description}")


@account_group.command("edit")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--number", help="New account number")
@click.option("--subcategory", help="New subcategory")
@click.option("--description", help="New description")
@click.option("--comment", help="New comment")
@click.pass_context
def edit_account(ctx, account: str, **changes):
    """Edit an account.

    ACCOUNT can be an account ID, number or name.

    Examples:
        tabuledge account edit 101 --name "Cash on Hand"
    """
    service = AccountService(ctx.obj["db"], user=ctx.obj.get("user"))
    account_id = resolve_account_or_exit(ctx, service, account)

    changes = {key: value for key, value in changes.items() if value is not None}
    if not changes:
        click.echo("Nothing to change.")
        return

    try:
        service.update_account(account_id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated account {', '.join(sorted(changes))}")


@account_group.command("deactivate")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def deactivate_account(ctx, account: str, yes: bool):
    """Deactivate an account.

    ACCOUNT can be an account ID, number or name. Accounts with a balance
    greater than zero cannot be deactivated.
    """
    service = AccountService(ctx.obj["db"], user=ctx.obj.get("user"))
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)

    if not yes and not click.confirm(f"Are you sure you want to deactivate account '{acc.name}'?"):
        click.echo("Deactivation cancelled.")
        return

    try:
        service.deactivate_account(account_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deactivated account '{acc.name}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
