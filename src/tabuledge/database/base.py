"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from tabuledge.domain.entities import (
    Account,
    AuditEvent,
    JournalEntry,
    JournalLine,
    LedgerTransaction,
)


class Database(ABC):
    """Abstract database interface for tabuledge."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, **fields: Any) -> str:
        """Create a new account from column values. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, active_only: bool = False) -> list[Account]:
        """List accounts ordered by account number."""
        pass

    @abstractmethod
    def update_account(self, account_id: str, **fields: Any) -> None:
        """Update account columns."""
        pass

    # Ledger operations
    @abstractmethod
    def create_ledger_entry(
        self,
        account_id: str,
        debit: Decimal,
        credit: Decimal,
        date: Optional[date],
        journal_entry_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Post a ledger transaction. Returns ledger entry ID."""
        pass

    @abstractmethod
    def list_ledger_entries(
        self, account_id: Optional[str] = None
    ) -> list[LedgerTransaction]:
        """List ledger transactions, optionally for one account."""
        pass

    # Journal entry operations
    @abstractmethod
    def create_journal_entry(
        self,
        date: date,
        description: Optional[str],
        entry_type: str,
        lines: list[JournalLine],
        created_by: Optional[str] = None,
    ) -> str:
        """Create a pending journal entry with its lines. Returns entry ID."""
        pass

    @abstractmethod
    def get_journal_entry(self, entry_id: str) -> Optional[JournalEntry]:
        """Get journal entry by ID."""
        pass

    @abstractmethod
    def list_journal_entries(self) -> list[JournalEntry]:
        """List journal entries, newest first."""
        pass

    @abstractmethod
    def update_journal_entry_status(
        self,
        entry_id: str,
        status: str,
        reviewed_by: Optional[str] = None,
        rejection_reason: Optional[str] = None,
    ) -> None:
        """Record a review decision on a journal entry."""
        pass

    @abstractmethod
    def post_journal_entry(
        self,
        entry_id: str,
        reviewed_by: Optional[str],
        ledger_lines: list[LedgerTransaction],
    ) -> list[str]:
        """Approve a journal entry and post its ledger lines in one transaction.

        Either the status change and every ledger line are stored, or nothing
        is. Returns the posted ledger entry IDs.
        """
        pass

    # Event log operations
    @abstractmethod
    def append_audit_event(
        self,
        entity: str,
        entity_id: str,
        action: str,
        before: Optional[dict[str, Any]],
        after: Optional[dict[str, Any]],
        user: Optional[str],
    ) -> int:
        """Append an audit event. Returns event ID."""
        pass

    @abstractmethod
    def list_audit_events(
        self,
        entity: Optional[str] = None,
        entity_id: Optional[str] = None,
        user: Optional[str] = None,
    ) -> list[AuditEvent]:
        """List audit events, newest first."""
        pass
