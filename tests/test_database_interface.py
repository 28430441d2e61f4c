"""Tests for Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from tabuledge.domain import entities
from tabuledge.domain.errors import NotFoundError


def make_account(db, name="Cash", number="101", category="Asset", **fields):
    return db.create_account(name=name, number=number, category=category, **fields)


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_account_returns_domain_model(self, temp_db):
        account_id = make_account(temp_db, initial_balance=Decimal("12.34"))

        account = temp_db.get_account(account_id)

        assert isinstance(account, entities.Account)
        assert account.id == account_id
        assert account.name == "Cash"
        assert account.initial_balance == Decimal("12.34")
        assert isinstance(account.created_at, datetime)

    def test_get_missing_account(self, temp_db):
        assert temp_db.get_account("nope") is None

    def test_list_accounts_returns_domain_models(self, temp_db):
        make_account(temp_db, name="Sales", number="401", category="Revenue")
        make_account(temp_db)

        accounts = temp_db.list_accounts()

        assert [acc.number for acc in accounts] == ["101", "401"]
        assert all(isinstance(acc, entities.Account) for acc in accounts)

    def test_unknown_account_field_rejected(self, temp_db):
        with pytest.raises(ValueError, match="Unknown account fields"):
            make_account(temp_db, colour="red")

    def test_update_missing_account(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_account("nope", name="X")

    def test_ledger_entries_return_domain_models(self, temp_db):
        cash = make_account(temp_db)
        sales = make_account(temp_db, name="Sales", number="401", category="Revenue")
        temp_db.create_ledger_entry(cash, Decimal("5"), Decimal("0"), date(2024, 1, 2))
        temp_db.create_ledger_entry(sales, Decimal("0"), Decimal("5"), date(2024, 1, 1))

        entries = temp_db.list_ledger_entries()

        assert all(isinstance(e, entities.LedgerTransaction) for e in entries)
        assert [e.date for e in entries] == [date(2024, 1, 1), date(2024, 1, 2)]
        assert [e.account_id for e in temp_db.list_ledger_entries(cash)] == [cash]

    def test_journal_entry_round_trip(self, temp_db):
        cash = make_account(temp_db)
        sales = make_account(temp_db, name="Sales", number="401", category="Revenue")
        entry_id = temp_db.create_journal_entry(
            date=date(2024, 1, 3),
            description="Sale",
            entry_type="regular",
            lines=[
                entities.JournalLine(account_id=cash, amount=Decimal("9.99"), side="debit"),
                entities.JournalLine(account_id=sales, amount=Decimal("9.99"), side="credit"),
            ],
            created_by="dave",
        )

        entry = temp_db.get_journal_entry(entry_id)

        assert isinstance(entry, entities.JournalEntry)
        assert entry.status == entities.EntryStatus.PENDING
        assert [(l.side, l.amount) for l in entry.lines] == [
            ("debit", Decimal("9.99")),
            ("credit", Decimal("9.99")),
        ]
        assert temp_db.get_journal_entry("nope") is None

    def test_update_status_of_missing_entry(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_journal_entry_status("nope", "approved")

    def test_post_journal_entry(self, temp_db):
        cash = make_account(temp_db)
        sales = make_account(temp_db, name="Sales", number="401", category="Revenue")
        entry_id = temp_db.create_journal_entry(
            date=date(2024, 1, 3),
            description="Sale",
            entry_type="regular",
            lines=[
                entities.JournalLine(account_id=cash, amount=Decimal("5"), side="debit"),
                entities.JournalLine(account_id=sales, amount=Decimal("5"), side="credit"),
            ],
        )

        posted = temp_db.post_journal_entry(
            entry_id,
            "erin",
            [
                entities.LedgerTransaction(id=None, account_id=cash, debit=Decimal("5"), date=date(2024, 1, 3)),
                entities.LedgerTransaction(id=None, account_id=sales, credit=Decimal("5"), date=date(2024, 1, 3)),
            ],
        )

        assert len(posted) == 2
        entry = temp_db.get_journal_entry(entry_id)
        assert entry.status == entities.EntryStatus.APPROVED
        assert entry.reviewed_by == "erin"
        assert {e.journal_entry_id for e in temp_db.list_ledger_entries()} == {entry_id}

    def test_post_missing_entry_posts_nothing(self, temp_db):
        cash = make_account(temp_db)

        with pytest.raises(NotFoundError):
            temp_db.post_journal_entry(
                "nope", "erin", [entities.LedgerTransaction(id=None, account_id=cash, debit=Decimal("5"))]
            )

        assert temp_db.list_ledger_entries() == []

    def test_audit_events_newest_first(self, temp_db):
        first = temp_db.append_audit_event("account", "a", "create", None, {"x": 1}, "u")
        second = temp_db.append_audit_event("account", "a", "update", {"x": 1}, {"x": 2}, "u")

        events = temp_db.list_audit_events()

        assert [e.id for e in events] == [second, first]
        assert events[0].after == {"x": 2}
