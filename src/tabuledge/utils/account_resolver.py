"""Utility for resolving account references to IDs."""

from tabuledge.domain.account import AccountService
from tabuledge.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str) -> str:
    """Resolve an account ID, number or name to an account ID.

    IDs are tried first, then account numbers (digit strings), then names.

    Args:
        account_service: AccountService instance
        account: Account ID, number or name

    Returns:
        Account ID

    Raises:
        NotFoundError: If no account matches
    """
    account = str(account).strip()

    if account_service.get_account(account) is not None:
        return account

    accounts = account_service.list_accounts()
    if account.isdigit():
        for acc in accounts:
            if acc.number == account:
                return acc.id

    for acc in accounts:
        if acc.name == account:
            return acc.id

    raise NotFoundError(f"Account '{account}' not found")
