"""Trial balance builder."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from tabuledge.domain.entities import BalanceRecord, TrialBalance, TrialBalanceRow
from tabuledge.domain.registry import is_debit_normal


def trial_balance_rows(balances: Mapping[Any, BalanceRecord]) -> TrialBalance:
    """Restate ending balances into debit and credit columns.

    A positive balance lands on the account's normal side; a negative
    balance lands on the opposite side with its magnitude. For a ledger in
    which every debit has an offsetting credit the two totals are equal.
    """
    rows = []
    total_debit = Decimal(0)
    total_credit = Decimal(0)

    for record in balances.values():
        value = record.end
        positive = value if value > 0 else Decimal(0)
        negative = -value if value < 0 else Decimal(0)
        if is_debit_normal(record.account):
            debit, credit = positive, negative
        else:
            debit, credit = negative, positive

        rows.append(TrialBalanceRow(account=record.account, debit=debit, credit=credit))
        total_debit += debit
        total_credit += credit

    return TrialBalance(
        rows=tuple(rows), total_debit=total_debit, total_credit=total_credit
    )
