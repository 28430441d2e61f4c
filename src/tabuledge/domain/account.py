"""Account domain service."""

from decimal import Decimal
from typing import Any, Optional

from tabuledge.database.base import Database
from tabuledge.domain.balances import compute_balances
from tabuledge.domain.entities import Account as AccountEntity
from tabuledge.domain.errors import (
    ConflictError,
    NotFoundError,
    StateError,
    ValidationError,
    account_not_found,
    duplicate_account_name,
    duplicate_account_number,
)
from tabuledge.domain.event_log import EventLogService
from tabuledge.domain.registry import validate_account_number
from tabuledge.utils.amount_parser import to_decimal

NORMAL_SIDES = ("Debit", "Credit")
INCOME_STATEMENT_CATEGORIES = ("revenue", "expense")


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database, user: Optional[str] = None):
        """Initialize account service.

        Args:
            db: Database instance
            user: Acting user recorded in the event log
        """
        self.db = db
        self.user = user
        self.events = EventLogService(db)

    def create_account(
        self,
        name: str,
        number: str,
        category: str,
        subcategory: str = "",
        normal_side: Optional[str] = None,
        initial_balance: Any = 0,
        description: str = "",
        statement: Optional[str] = None,
        order: str = "",
        comment: str = "",
    ) -> str:
        """Create a new account.

        Args:
            name: Account name (unique)
            number: Account number, digits only, starting with the category prefix
            category: Asset, Liability, Equity, Revenue or Expense
            subcategory: Free-text subcategory (e.g. "Current Assets", "Inventory")
            normal_side: "Debit" or "Credit"; None leaves it to the category default
            initial_balance: Opening balance
            description: Optional description
            statement: "BS" or "IS"; defaults from the category
            order: Display order, zero-padded to two characters
            comment: Optional comment

        Returns:
            Account ID

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the name or number is already used
        """
        fields = self._prepare_fields(
            name=name,
            number=number,
            category=category,
            subcategory=subcategory,
            normal_side=normal_side,
            initial_balance=initial_balance,
            description=description,
            statement=statement,
            order=order,
            comment=comment,
        )
        self._ensure_unique(fields["name"], fields["number"])

        account_id = self.db.create_account(**fields, created_by=self.user)
        self.events.record(
            "account", account_id, "create", after=self.db.get_account(account_id), user=self.user
        )
        return account_id

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self, active_only: bool = False) -> list[AccountEntity]:
        """List accounts ordered by number.

        Args:
            active_only: If True, skip deactivated accounts

        Returns:
            List of account entities
        """
        return self.db.list_accounts(active_only=active_only)

    def update_account(self, account_id: str, **changes: Any) -> None:
        """Edit an account, re-validating the merged result.

        Args:
            account_id: Account ID to edit
            **changes: Any of the fields accepted by ``create_account``

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If the merged account is invalid
            ConflictError: If the new name or number is already used
        """
        before = self._require_account(account_id)

        merged = {
            "name": before.name,
            "number": before.number,
            "category": before.category,
            "subcategory": before.subcategory,
            "normal_side": before.normal_side,
            "initial_balance": before.initial_balance,
            "description": before.description,
            "statement": before.statement,
            "order": before.order,
            "comment": before.comment,
        }
        unknown = set(changes) - set(merged)
        if unknown:
            raise ValidationError(f"Unknown account fields: {', '.join(sorted(unknown))}")
        merged.update(changes)

        fields = self._prepare_fields(**merged)
        self._ensure_unique(fields["name"], fields["number"], exclude_id=account_id)

        self.db.update_account(account_id, **fields)
        self.events.record(
            "account", account_id, "update",
            before=before, after=self.db.get_account(account_id), user=self.user,
        )

    def get_balance(self, account_id: str) -> Decimal:
        """Current ending balance of an account over its whole ledger."""
        account = self._require_account(account_id)
        balances = compute_balances([account], self.db.list_ledger_entries(account_id))
        return balances[account_id].end

    def deactivate_account(self, account_id: str) -> None:
        """Deactivate an account.

        Raises:
            NotFoundError: If the account does not exist
            StateError: If the account balance is greater than zero
        """
        before = self._require_account(account_id)
        if self.get_balance(account_id) > 0:
            raise StateError(
                "Accounts with balance greater than zero cannot be deactivated"
            )

        self.db.update_account(account_id, active=False)
        self.events.record(
            "account", account_id, "deactivate",
            before=before, after=self.db.get_account(account_id), user=self.user,
        )

    def _require_account(self, account_id: str) -> AccountEntity:
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def _ensure_unique(
        self, name: str, number: str, exclude_id: Optional[str] = None
    ) -> None:
        for acc in self.db.list_accounts():
            if acc.id == exclude_id:
                continue
            if acc.name == name:
                raise ConflictError(duplicate_account_name(name))
            if acc.number == number:
                raise ConflictError(duplicate_account_number(number))

    def _prepare_fields(
        self,
        name: str,
        number: str,
        category: str,
        subcategory: str,
        normal_side: Optional[str],
        initial_balance: Any,
        description: str,
        statement: Optional[str],
        order: str,
        comment: str,
    ) -> dict[str, Any]:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")

        number = str(number or "").strip()
        category = (category or "").strip().title()
        validate_account_number(category, number)

        if normal_side:
            normal_side = normal_side.strip().title()
            if normal_side not in NORMAL_SIDES:
                raise ValidationError("Normal side must be Debit or Credit")
        else:
            normal_side = None

        initial_balance = to_decimal(initial_balance)
        if not initial_balance.is_finite():
            raise ValidationError("Initial balance must be a finite amount")

        if not statement:
            statement = "IS" if category.lower() in INCOME_STATEMENT_CATEGORIES else "BS"

        return {
            "name": name,
            "number": number,
            "category": category,
            "subcategory": (subcategory or "").strip(),
            "normal_side": normal_side,
            "initial_balance": initial_balance,
            "description": (description or "").strip(),
            "statement": statement.upper(),
            "order": str(order or "").zfill(2),
            "comment": comment or "",
        }
