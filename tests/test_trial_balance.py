"""Tests for the trial balance."""

from decimal import Decimal

from tabuledge.domain.balances import compute_balances
from tabuledge.domain.trial_balance import trial_balance_rows


def test_balanced_ledger_has_equal_totals():
    accounts = [
        {"id": "cash", "category": "Asset"},
        {"id": "loan", "category": "Liability"},
        {"id": "sales", "category": "Revenue"},
        {"id": "rent", "category": "Expense"},
    ]
    transactions = [
        {"account_id": "cash", "debit": "1000", "date": "2024-01-01"},
        {"account_id": "loan", "credit": "1000", "date": "2024-01-01"},
        {"account_id": "cash", "debit": "400", "date": "2024-01-02"},
        {"account_id": "sales", "credit": "400", "date": "2024-01-02"},
        {"account_id": "rent", "debit": "250", "date": "2024-01-03"},
        {"account_id": "cash", "credit": "250", "date": "2024-01-03"},
    ]

    result = trial_balance_rows(compute_balances(accounts, transactions))

    assert result.total_debit == Decimal("1400")
    assert result.total_credit == Decimal("1400")
    assert result.is_balanced


def test_positive_balance_on_normal_side():
    balances = compute_balances(
        [
            {"id": "cash", "category": "Asset", "initialBalance": "75"},
            {"id": "capital", "category": "Equity", "initialBalance": "75"},
        ],
        [],
    )

    rows = {row.account.id: row for row in trial_balance_rows(balances).rows}

    assert (rows["cash"].debit, rows["cash"].credit) == (Decimal("75"), Decimal("0"))
    assert (rows["capital"].debit, rows["capital"].credit) == (Decimal("0"), Decimal("75"))


def test_negative_balance_on_opposite_side():
    balances = compute_balances(
        [{"id": "cash", "category": "Asset"}, {"id": "sales", "category": "Revenue"}],
        [
            {"account_id": "cash", "credit": "30", "date": "2024-01-01"},
            {"account_id": "sales", "debit": "20", "date": "2024-01-01"},
        ],
    )

    rows = {row.account.id: row for row in trial_balance_rows(balances).rows}

    assert (rows["cash"].debit, rows["cash"].credit) == (Decimal("0"), Decimal("30"))
    assert (rows["sales"].debit, rows["sales"].credit) == (Decimal("20"), Decimal("0"))


def test_zero_balance_row_has_no_negative_zero():
    balances = compute_balances([{"id": "cash", "category": "Asset"}], [])

    row = trial_balance_rows(balances).rows[0]

    assert str(row.debit) == "0"
    assert str(row.credit) == "0"


def test_one_row_per_account_in_order():
    balances = compute_balances(
        [{"id": "b", "category": "Asset"}, {"id": "a", "category": "Liability"}], []
    )

    assert [row.account.id for row in trial_balance_rows(balances).rows] == ["b", "a"]


def test_unbalanced_opening_balances_detected():
    balances = compute_balances(
        [{"id": "cash", "category": "Asset", "initialBalance": "10"}], []
    )

    result = trial_balance_rows(balances)

    assert result.total_debit == Decimal("10")
    assert result.total_credit == Decimal("0")
    assert not result.is_balanced
