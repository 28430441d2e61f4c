"""Financial report domain service.

Fetches account and ledger snapshots from the database and hands them to
the pure bookkeeping functions. Nothing here does arithmetic of its own.
"""

import logging
from datetime import date
from typing import Any, Optional

from tabuledge.database.base import Database
from tabuledge.domain.balances import compute_balances
from tabuledge.domain.entities import (
    BalanceRecord,
    BalanceSheet,
    IncomeStatement,
    RatioResult,
    RetainedEarningsStatement,
    TrialBalance,
)
from tabuledge.domain.ratios import compute_ratios
from tabuledge.domain.statements import (
    balance_sheet,
    income_statement,
    ratio_totals,
    retained_earnings_statement,
)
from tabuledge.domain.trial_balance import trial_balance_rows
from tabuledge.utils.serialization import to_primitive

logger = logging.getLogger(__name__)


def serialize_report(obj: Any) -> Any:
    """Convert a report result into JSON-safe primitives."""
    return to_primitive(obj)


class ReportService:
    """Service for building financial statements from stored data."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def balances(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        active_only: bool = False,
    ) -> dict[str, BalanceRecord]:
        """Compute account balances over an inclusive date window.

        Args:
            start_date: Window start, or None for no lower bound
            end_date: Window end, or None for no upper bound
            active_only: If True, leave deactivated accounts out

        Returns:
            Mapping of account id to BalanceRecord
        """
        accounts = self.db.list_accounts(active_only=active_only)
        transactions = self.db.list_ledger_entries()
        logger.debug(
            "Computing balances for %d account(s) over %d transaction(s), %s to %s",
            len(accounts), len(transactions), start_date, end_date,
        )
        return compute_balances(accounts, transactions, start_date, end_date)

    def income_statement(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> IncomeStatement:
        """Revenue, expenses and net income for a period."""
        return income_statement(self.balances(start_date, end_date))

    def balance_sheet(
        self,
        as_of: Optional[date] = None,
        retained_earnings_opening: Any = 0,
    ) -> BalanceSheet:
        """Balance sheet as of a date.

        Net income for the retained earnings roll-forward is taken from the
        same balances, i.e. everything posted up to ``as_of``.
        """
        balances = self.balances(None, as_of)
        income = income_statement(balances)
        return balance_sheet(balances, retained_earnings_opening, income.net_income)

    def trial_balance(self, as_of: Optional[date] = None) -> TrialBalance:
        """Trial balance as of a date."""
        result = trial_balance_rows(self.balances(None, as_of))
        if not result.is_balanced:
            logger.warning(
                "Trial balance out of balance: debits %s, credits %s",
                result.total_debit, result.total_credit,
            )
        return result

    def retained_earnings(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        opening: Any = 0,
        dividends: Any = 0,
    ) -> RetainedEarningsStatement:
        """Retained earnings statement for a period."""
        income = self.income_statement(start_date, end_date)
        return retained_earnings_statement(opening, income.net_income, dividends)

    def ratios(
        self,
        as_of: Optional[date] = None,
        retained_earnings_opening: Any = 0,
    ) -> list[RatioResult]:
        """Financial ratios as of a date."""
        balances = self.balances(None, as_of)
        income = income_statement(balances)
        sheet = balance_sheet(balances, retained_earnings_opening, income.net_income)
        return compute_ratios(ratio_totals(income, sheet))
