"""Tests for journal commands."""

from decimal import Decimal

from tabuledge.cli.main import cli


def invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--user", "erin", *args], **kwargs
    )


def submit(cli_runner, temp_db, *args):
    result = invoke(cli_runner, temp_db, "journal", "create", *args)
    assert result.exit_code == 0, result.output
    return result.output.split("journal entry ")[1].split()[0]


def test_create_and_approve(cli_runner, temp_db, chart):
    entry_id = submit(
        cli_runner, temp_db,
        "--date", "2024-02-01", "--debit", "101:250", "--credit", "Sales:250",
        "--description", "Walk-in sale",
    )

    result = invoke(cli_runner, temp_db, "journal", "approve", entry_id)

    assert result.exit_code == 0
    assert "2 ledger line(s) posted" in result.output
    ledger = temp_db.list_ledger_entries()
    assert sorted(t.debit + t.credit for t in ledger) == [Decimal("250"), Decimal("250")]
    assert temp_db.get_journal_entry(entry_id).reviewed_by == "erin"


def test_create_unbalanced(cli_runner, temp_db, chart):
    result = invoke(
        cli_runner, temp_db, "journal", "create", "--debit", "101:100", "--credit", "401:90"
    )

    assert result.exit_code == 1
    assert "must equal total credits" in result.output


def test_create_sub_cent_amount(cli_runner, temp_db, chart):
    result = invoke(
        cli_runner, temp_db, "journal", "create", "--debit", "101:0.005", "--credit", "401:0.005"
    )

    assert result.exit_code == 1
    assert "Error: Line amounts cannot include fractions of a cent." in result.output


def test_create_bad_line_format(cli_runner, temp_db, chart):
    result = invoke(cli_runner, temp_db, "journal", "create", "--debit", "101", "--credit", "401:5")

    assert result.exit_code == 1
    assert "expected ACCOUNT:AMOUNT" in result.output


def test_create_unknown_account(cli_runner, temp_db, chart):
    result = invoke(cli_runner, temp_db, "journal", "create", "--debit", "999:5", "--credit", "401:5")

    assert result.exit_code == 1
    assert "not found" in result.output


def test_reject_requires_reason_option(cli_runner, temp_db, chart):
    entry_id = submit(cli_runner, temp_db, "--debit", "101:5", "--credit", "401:5")

    result = invoke(cli_runner, temp_db, "journal", "reject", entry_id)

    assert result.exit_code != 0
    assert "--reason" in result.output


def test_reject_then_approve_fails(cli_runner, temp_db, chart):
    entry_id = submit(cli_runner, temp_db, "--debit", "101:5", "--credit", "401:5")

    result = invoke(cli_runner, temp_db, "journal", "reject", entry_id, "--reason", "Typo")
    assert result.exit_code == 0
    assert "Rejected journal entry" in result.output

    result = invoke(cli_runner, temp_db, "journal", "approve", entry_id)
    assert result.exit_code == 1
    assert "only pending entries" in result.output


def test_list_and_show(cli_runner, temp_db, chart):
    entry_id = submit(
        cli_runner, temp_db,
        "--date", "2024-03-31", "--type", "adjusting",
        "--debit", "Rent Expense:1200", "--credit", "101:1200",
        "--description", "Accrued rent",
    )

    result = invoke(cli_runner, temp_db, "journal", "list", "--status", "pending")
    assert result.exit_code == 0
    assert entry_id in result.output
    assert "adjusting" in result.output

    result = invoke(cli_runner, temp_db, "journal", "list", "--status", "approved")
    assert "No journal entries found" in result.output

    result = invoke(cli_runner, temp_db, "journal", "show", entry_id)
    assert result.exit_code == 0
    assert "Accrued rent" in result.output
    assert "Rent Expense" in result.output
    assert "1,200.00" in result.output
    assert "erin" in result.output


def test_list_with_dates(cli_runner, temp_db, chart):
    submit(cli_runner, temp_db, "--date", "2024-01-15", "--debit", "101:5", "--credit", "401:5")

    result = invoke(
        cli_runner, temp_db, "journal", "list", "--start-date", "2024-02-01"
    )

    assert result.exit_code == 0
    assert "No journal entries found" in result.output


def test_show_unknown_entry(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "journal", "show", "nope")

    assert result.exit_code == 1
    assert "not found" in result.output
