"""Tabuledge: double-entry bookkeeping, financial statements and ratios."""

from tabuledge.domain.balances import compute_balances
from tabuledge.domain.ratios import compute_ratios
from tabuledge.domain.statements import (
    balance_sheet,
    income_statement,
    retained_earnings_statement,
)
from tabuledge.domain.trial_balance import trial_balance_rows

__all__ = [
    "compute_balances",
    "compute_ratios",
    "balance_sheet",
    "income_statement",
    "retained_earnings_statement",
    "trial_balance_rows",
]


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from tabuledge.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
