"""Tests for the account service."""

from decimal import Decimal

import pytest

from tabuledge.domain.errors import ConflictError, NotFoundError, StateError, ValidationError


class TestCreateAccount:
    """Tests for account creation."""

    def test_create_and_get(self, account_service):
        account_id = account_service.create_account(
            name="Cash", number="101", category="asset", initial_balance="500"
        )

        account = account_service.get_account(account_id)
        assert account.name == "Cash"
        assert account.number == "101"
        assert account.category == "Asset"
        assert account.initial_balance == Decimal("500")
        assert account.statement == "BS"
        assert account.order == "00"
        assert account.active is True
        assert account.created_by == "alice"

    def test_income_statement_accounts_default_to_is(self, account_service):
        account_id = account_service.create_account(name="Sales", number="401", category="Revenue")

        assert account_service.get_account(account_id).statement == "IS"

    def test_order_is_zero_padded(self, account_service):
        account_id = account_service.create_account(
            name="Cash", number="101", category="Asset", order="3"
        )

        assert account_service.get_account(account_id).order == "03"

    def test_wrong_prefix_rejected(self, account_service):
        with pytest.raises(ValidationError, match="must start with 2"):
            account_service.create_account(name="Loan", number="101", category="Liability")

    def test_non_numeric_number_rejected(self, account_service):
        with pytest.raises(ValidationError, match="digits only"):
            account_service.create_account(name="Cash", number="1O1", category="Asset")

    def test_name_required(self, account_service):
        with pytest.raises(ValidationError, match="name is required"):
            account_service.create_account(name="  ", number="101", category="Asset")

    def test_bad_normal_side_rejected(self, account_service):
        with pytest.raises(ValidationError, match="Debit or Credit"):
            account_service.create_account(
                name="Cash", number="101", category="Asset", normal_side="left"
            )

    def test_duplicate_name_rejected(self, account_service):
        account_service.create_account(name="Cash", number="101", category="Asset")

        with pytest.raises(ConflictError, match="already exists"):
            account_service.create_account(name="Cash", number="102", category="Asset")

    def test_duplicate_number_rejected(self, account_service):
        account_service.create_account(name="Cash", number="101", category="Asset")

        with pytest.raises(ConflictError, match="number '101' already exists"):
            account_service.create_account(name="Petty Cash", number="101", category="Asset")


class TestListAndUpdate:
    """Tests for listing and editing accounts."""

    def test_list_ordered_by_number(self, chart, account_service):
        numbers = [acc.number for acc in account_service.list_accounts()]

        assert numbers == sorted(numbers)
        assert len(numbers) == 6

    def test_update_revalidates(self, chart, account_service):
        with pytest.raises(ValidationError):
            account_service.update_account(chart["Cash"], number="201")

    def test_update_name(self, chart, account_service):
        account_service.update_account(chart["Cash"], name="Cash on Hand")

        assert account_service.get_account(chart["Cash"]).name == "Cash on Hand"

    def test_update_conflicting_name(self, chart, account_service):
        with pytest.raises(ConflictError):
            account_service.update_account(chart["Cash"], name="Sales")

    def test_update_unknown_field(self, chart, account_service):
        with pytest.raises(ValidationError, match="Unknown account fields"):
            account_service.update_account(chart["Cash"], colour="blue")

    def test_update_missing_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.update_account("missing", name="X")


class TestBalanceAndDeactivation:
    """Tests for balances and deactivation."""

    def test_balance_follows_postings(self, posted_ledger, account_service):
        assert account_service.get_balance(posted_ledger["Cash"]) == Decimal("12000")
        assert account_service.get_balance(posted_ledger["Sales"]) == Decimal("3000")

    def test_cannot_deactivate_account_with_balance(self, posted_ledger, account_service):
        with pytest.raises(StateError, match="balance greater than zero"):
            account_service.deactivate_account(posted_ledger["Cash"])

    def test_deactivate_zero_balance_account(self, chart, account_service):
        account_service.deactivate_account(chart["Rent Expense"])

        assert account_service.get_account(chart["Rent Expense"]).active is False
        active = account_service.list_accounts(active_only=True)
        assert chart["Rent Expense"] not in [acc.id for acc in active]

    def test_deactivate_missing_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.deactivate_account("missing")

    def test_changes_are_audited(self, chart, account_service):
        account_service.update_account(chart["Cash"], description="Main till")

        events = account_service.events.list_events(entity="account", entity_id=chart["Cash"])
        assert [event.action for event in events] == ["update", "create"]
        assert events[0].user == "alice"
        assert account_service.events.changed_fields(events[0]) == ["description"]
