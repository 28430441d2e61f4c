"""Balance accumulation over a dated ledger."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from tabuledge.domain.entities import (
    Account,
    BalanceRecord,
    LedgerTransaction,
)
from tabuledge.domain.registry import (
    build_account_index,
    is_debit_normal,
    normalize_transaction,
)
from tabuledge.utils.date_parser import coerce_date

logger = logging.getLogger(__name__)

# Transactions with no readable date are treated as the earliest possible
# date, so they fall inside every window that has no lower bound.
EPOCH = date(1970, 1, 1)


def normalize_range(from_date: Any = None, to_date: Any = None) -> tuple[Optional[date], Optional[date]]:
    """Normalize a reporting window.

    Args:
        from_date: Inclusive lower bound (date, datetime, string or None)
        to_date: Inclusive upper bound (date, datetime, string or None)

    Returns:
        Tuple of (start, end); None means the side is unbounded
    """
    return coerce_date(from_date), coerce_date(to_date)


def effective_date(txn: LedgerTransaction) -> date:
    """Resolve the date a transaction counts on.

    The explicit date wins, then the creation timestamp, then ``EPOCH``.
    """
    when = coerce_date(txn.date)
    if when is None:
        when = coerce_date(txn.created_at)
    return when if when is not None else EPOCH


def in_range(when: date, start: Optional[date], end: Optional[date]) -> bool:
    """Check a date against an inclusive, optionally open-ended window."""
    if start is not None and when < start:
        return False
    if end is not None and when > end:
        return False
    return True


def compute_balances(
    accounts: Iterable[Mapping[str, Any] | Account],
    transactions: Iterable[Mapping[str, Any] | LedgerTransaction],
    from_date: Any = None,
    to_date: Any = None,
) -> dict[Any, BalanceRecord]:
    """Compute per-account balances for a date window.

    Every known account gets a record whose beginning and ending balance
    start at its initial balance. Each in-window transaction adds to its
    account's debit and credit totals and moves the ending balance toward
    the account's normal side. Transactions outside the window or against
    an unknown account are skipped.

    The fold is a plain sum, so the result does not depend on the order of
    ``transactions``.

    Args:
        accounts: Account entities or raw account records
        transactions: Ledger transactions or raw ledger records
        from_date: Inclusive window start, or None for no lower bound
        to_date: Inclusive window end, or None for no upper bound

    Returns:
        Mapping of account id to BalanceRecord, in account order
    """
    start, end = normalize_range(from_date, to_date)
    index = build_account_index(accounts)

    totals: dict[Any, dict[str, Decimal]] = {
        account_id: {
            "debit": Decimal(0),
            "credit": Decimal(0),
            "end": account.initial_balance,
        }
        for account_id, account in index.items()
    }

    skipped = 0
    for record in transactions:
        txn = normalize_transaction(record)
        if not in_range(effective_date(txn), start, end):
            continue

        account = index.get(txn.account_id)
        if account is None:
            skipped += 1
            logger.debug(
                "Skipping transaction %s: unknown account %r", txn.id, txn.account_id
            )
            continue

        entry = totals[txn.account_id]
        entry["debit"] += txn.debit
        entry["credit"] += txn.credit
        if is_debit_normal(account):
            entry["end"] += txn.debit - txn.credit
        else:
            entry["end"] += txn.credit - txn.debit

    if skipped:
        logger.debug("Skipped %d transaction(s) with unknown accounts", skipped)

    return {
        account_id: BalanceRecord(
            account=account,
            debit_total=totals[account_id]["debit"],
            credit_total=totals[account_id]["credit"],
            begin=account.initial_balance,
            end=totals[account_id]["end"],
        )
        for account_id, account in index.items()
    }
