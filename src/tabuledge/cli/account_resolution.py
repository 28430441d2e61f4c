"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from tabuledge.cli.error_handling import handle_domain_error
from tabuledge.domain.account import AccountService
from tabuledge.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str
) -> str:
    """Resolve account ID, number or name, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, account)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
