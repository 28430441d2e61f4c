"""Income statement, balance sheet and retained earnings builders."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from tabuledge.domain.entities import (
    BalanceRecord,
    BalanceSheet,
    IncomeStatement,
    RatioTotals,
    RetainedEarningsStatement,
)
from tabuledge.utils.amount_parser import to_decimal


def income_statement(balances: Mapping[Any, BalanceRecord]) -> IncomeStatement:
    """Sum ending balances of revenue and expense accounts.

    Accounts of any other category are ignored.
    """
    revenue = Decimal(0)
    expenses = Decimal(0)

    for record in balances.values():
        category = record.account.type
        if category == "revenue":
            revenue += record.end
        elif category == "expense":
            expenses += record.end

    return IncomeStatement(
        revenue=revenue, expenses=expenses, net_income=revenue - expenses
    )


def balance_sheet(
    balances: Mapping[Any, BalanceRecord],
    retained_earnings_opening: Any = 0,
    period_net_income: Any = 0,
) -> BalanceSheet:
    """Build balance sheet totals from account balances.

    Every asset counts as current and every liability counts as current.
    Assets whose subcategory mentions "inventory" also count toward
    inventory. Retained earnings roll forward the opening balance by the
    period's net income. Whether the sheet balances is left to the caller.

    Args:
        balances: Account balances from ``compute_balances``
        retained_earnings_opening: Retained earnings at the start of the period
        period_net_income: Net income for the period

    Returns:
        BalanceSheet totals
    """
    current_assets = Decimal(0)
    inventory = Decimal(0)
    current_liabilities = Decimal(0)
    total_assets = Decimal(0)
    total_liabilities = Decimal(0)
    equity = Decimal(0)

    for record in balances.values():
        account = record.account
        amount = record.end
        category = account.type

        if category == "asset":
            total_assets += amount
            current_assets += amount
            if "inventory" in account.subcategory.lower():
                inventory += amount
        elif category == "liability":
            total_liabilities += amount
            current_liabilities += amount
        elif category == "equity":
            equity += amount

    retained_earnings = to_decimal(retained_earnings_opening) + to_decimal(
        period_net_income
    )

    return BalanceSheet(
        current_assets=current_assets,
        inventory=inventory,
        current_liabilities=current_liabilities,
        total_liabilities=total_liabilities,
        total_assets=total_assets,
        total_equity=equity + retained_earnings,
        equity=equity,
        retained_earnings=retained_earnings,
    )


def retained_earnings_statement(
    opening: Any, net_income: Any, dividends: Any = 0
) -> RetainedEarningsStatement:
    """Roll retained earnings forward: opening + net income - dividends."""
    opening = to_decimal(opening)
    net_income = to_decimal(net_income)
    dividends = to_decimal(dividends)
    return RetainedEarningsStatement(
        opening=opening,
        net_income=net_income,
        dividends=dividends,
        ending=opening + net_income - dividends,
    )


def ratio_totals(income: IncomeStatement, sheet: BalanceSheet) -> RatioTotals:
    """Collect the statement totals the ratio engine needs."""
    return RatioTotals(
        current_assets=sheet.current_assets,
        inventory=sheet.inventory,
        current_liabilities=sheet.current_liabilities,
        total_liabilities=sheet.total_liabilities,
        total_equity=sheet.total_equity,
        total_assets=sheet.total_assets,
        net_income=income.net_income,
        revenue=income.revenue,
    )
