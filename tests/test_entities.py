"""Tests for domain entities."""

import dataclasses
import pytest
from datetime import date
from decimal import Decimal

from tabuledge.domain.entities import (
    Account,
    BalanceSheet,
    EntryStatus,
    JournalEntry,
    JournalLine,
)
from tabuledge.utils.serialization import to_primitive


class TestAccount:
    """Tests for Account entity."""

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account(id="a", name="Cash", number="101", category="Asset")
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.name = "New Name"

    def test_account_defaults(self):
        account = Account(id="a", name="Cash", number="101", category="Asset")

        assert account.type == "asset"
        assert account.initial_balance == Decimal("0")
        assert account.normal_side is None
        assert account.active is True


class TestJournalEntry:
    """Tests for JournalEntry entity."""

    def test_totals_by_side(self):
        entry = JournalEntry(
            id="j1",
            date=date(2024, 1, 1),
            description=None,
            entry_type="regular",
            status=EntryStatus.PENDING,
            lines=(
                JournalLine(account_id="a", amount=Decimal("70"), side="debit"),
                JournalLine(account_id="b", amount=Decimal("30"), side="debit"),
                JournalLine(account_id="c", amount=Decimal("100"), side="credit"),
            ),
        )

        assert len(entry.debit_lines) == 2
        assert len(entry.credit_lines) == 1
        assert entry.total_debits == entry.total_credits == Decimal("100")


def test_balance_sheet_is_balanced():
    sheet = BalanceSheet(
        current_assets=Decimal("100"),
        inventory=Decimal("0"),
        current_liabilities=Decimal("40"),
        total_liabilities=Decimal("40"),
        total_assets=Decimal("100"),
        total_equity=Decimal("60"),
    )

    assert sheet.is_balanced
    assert not dataclasses.replace(sheet, total_equity=Decimal("59")).is_balanced


def test_to_primitive():
    entry = JournalEntry(
        id="j1",
        date=date(2024, 1, 1),
        description="Sale",
        entry_type="regular",
        status=EntryStatus.APPROVED,
        lines=(JournalLine(account_id="a", amount=Decimal("1.50"), side="debit"),),
    )

    data = to_primitive(entry)

    assert data["date"] == "2024-01-01"
    assert data["status"] == "approved"
    assert data["lines"] == [
        {"account_id": "a", "amount": "1.50", "side": "debit", "account_name": ""}
    ]
