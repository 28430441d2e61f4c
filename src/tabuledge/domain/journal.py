"""Journal entry domain service.

Journal entries are submitted as pending, then approved or rejected by a
reviewer. Approval posts one ledger transaction per line, which is what the
balance accumulator later reads.
"""

import logging
from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from typing import Optional

from tabuledge.database.base import Database
from tabuledge.domain.entities import (
    EntryStatus,
    JournalEntry,
    JournalLine,
    LedgerTransaction,
    normalize_status,
)
from tabuledge.domain.errors import (
    NotFoundError,
    StateError,
    ValidationError,
    account_not_found,
    entry_not_pending,
    journal_entry_not_found,
)
from tabuledge.domain.event_log import EventLogService
from tabuledge.utils.amount_parser import CENT, to_decimal

logger = logging.getLogger(__name__)

ENTRY_TYPES = ("regular", "adjusting")
SIDES = ("debit", "credit")

# Ledger columns are Numeric(14, 2)
MAX_WHOLE_DIGITS = 12


def validate_lines(lines: Sequence[JournalLine]) -> None:
    """Check that journal lines form a balanced entry.

    Raises:
        ValidationError: If there is no debit or no credit line, a line has
            no account, a bad side, a non-positive amount or one finer than a
            cent, or the debit and credit totals differ
    """
    debits = [line for line in lines if line.side == "debit"]
    credits = [line for line in lines if line.side == "credit"]
    if not debits or not credits:
        raise ValidationError(
            "Each journal entry must have at least one debit and one credit."
        )

    for line in lines:
        if line.side not in SIDES:
            raise ValidationError(f"Unknown line side '{line.side}'")
        if not line.account_id:
            raise ValidationError("All lines must have an account selected.")
        amount = to_decimal(line.amount)
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("All line amounts must be greater than zero.")
        if amount.adjusted() >= MAX_WHOLE_DIGITS:
            raise ValidationError(
                f"Line amounts must be below {Decimal(10) ** MAX_WHOLE_DIGITS:,.0f}."
            )
        if amount != amount.quantize(CENT):
            raise ValidationError("Line amounts cannot include fractions of a cent.")

    total_debits = sum((to_decimal(line.amount) for line in debits), Decimal(0))
    total_credits = sum((to_decimal(line.amount) for line in credits), Decimal(0))
    if total_debits != total_credits:
        raise ValidationError(
            f"Total debits ({total_debits}) must equal total credits ({total_credits})."
        )


class JournalService:
    """Service for submitting and reviewing journal entries."""

    def __init__(self, db: Database, user: Optional[str] = None):
        """Initialize journal service.

        Args:
            db: Database instance
            user: Acting user recorded on entries and in the event log
        """
        self.db = db
        self.user = user
        self.events = EventLogService(db)

    def create_entry(
        self,
        entry_date: date,
        lines: Sequence[JournalLine],
        description: Optional[str] = None,
        entry_type: str = "regular",
    ) -> str:
        """Submit a journal entry for approval.

        Args:
            entry_date: Date the entry takes effect
            lines: Debit and credit lines
            description: Optional description
            entry_type: "regular" or "adjusting"

        Returns:
            Journal entry ID

        Raises:
            ValidationError: If the lines do not balance or the type is unknown
            NotFoundError: If a line references an unknown account
        """
        entry_type = (entry_type or "regular").strip().lower()
        if entry_type not in ENTRY_TYPES:
            raise ValidationError(
                f"Unknown entry type '{entry_type}'. Expected one of: {', '.join(ENTRY_TYPES)}"
            )

        validate_lines(lines)
        for line in lines:
            if self.db.get_account(line.account_id) is None:
                raise NotFoundError(account_not_found(line.account_id))

        entry_id = self.db.create_journal_entry(
            date=entry_date,
            description=description,
            entry_type=entry_type,
            lines=[
                JournalLine(
                    account_id=line.account_id,
                    amount=to_decimal(line.amount),
                    side=line.side,
                )
                for line in lines
            ],
            created_by=self.user,
        )
        self.events.record(
            "journal_entry", entry_id, "create",
            after=self.db.get_journal_entry(entry_id), user=self.user,
        )
        return entry_id

    def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        """Get journal entry by ID."""
        return self.db.get_journal_entry(entry_id)

    def approve_entry(self, entry_id: str) -> list[str]:
        """Approve a pending entry and post its lines to the ledger.

        Args:
            entry_id: Journal entry ID

        Returns:
            IDs of the posted ledger transactions

        Raises:
            NotFoundError: If the entry does not exist
            StateError: If the entry is not pending
        """
        before = self._require_pending(entry_id)

        ledger_lines = []
        for line in before.lines:
            is_debit = line.side == "debit"
            ledger_lines.append(
                LedgerTransaction(
                    id=None,
                    account_id=line.account_id,
                    debit=line.amount if is_debit else Decimal(0),
                    credit=Decimal(0) if is_debit else line.amount,
                    date=before.date,
                    journal_entry_id=entry_id,
                    description=before.description,
                )
            )
        posted = self.db.post_journal_entry(entry_id, self.user, ledger_lines)

        self.events.record(
            "journal_entry", entry_id, "approve",
            before=before, after=self.db.get_journal_entry(entry_id), user=self.user,
        )
        logger.info("Posted %d ledger line(s) for journal entry %s", len(posted), entry_id)
        return posted

    def reject_entry(self, entry_id: str, reason: str) -> None:
        """Reject a pending entry.

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If the entry does not exist
            StateError: If the entry is not pending
        """
        reason = (reason or "").strip()
        if not reason:
            raise ValidationError("A reason is required to reject a journal entry")

        before = self._require_pending(entry_id)
        self.db.update_journal_entry_status(
            entry_id,
            EntryStatus.REJECTED.value,
            reviewed_by=self.user,
            rejection_reason=reason,
        )
        self.events.record(
            "journal_entry", entry_id, "reject",
            before=before, after=self.db.get_journal_entry(entry_id), user=self.user,
        )

    def list_entries(
        self,
        status: Optional[str] = None,
        entry_type: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        search: Optional[str] = None,
    ) -> list[JournalEntry]:
        """List journal entries with optional filters, newest first.

        Args:
            status: Only entries with this status
            entry_type: Only "regular" or "adjusting" entries
            start_date: Inclusive start date
            end_date: Inclusive end date
            search: Case-insensitive match on description, account names or amounts
        """
        wanted_status = normalize_status(status) if status else None
        term = (search or "").strip().lower()

        results = []
        for entry in self.db.list_journal_entries():
            if wanted_status is not None and entry.status != wanted_status:
                continue
            if entry_type and entry.entry_type != entry_type.lower():
                continue
            if start_date is not None and entry.date < start_date:
                continue
            if end_date is not None and entry.date > end_date:
                continue
            if term and not self._matches(entry, term):
                continue
            results.append(entry)
        return results

    @staticmethod
    def _matches(entry: JournalEntry, term: str) -> bool:
        if term in (entry.description or "").lower():
            return True
        for line in entry.lines:
            if term in line.account_name.lower() or term in str(line.amount):
                return True
        return False

    def _require_pending(self, entry_id: str) -> JournalEntry:
        entry = self.db.get_journal_entry(entry_id)
        if entry is None:
            raise NotFoundError(journal_entry_not_found(entry_id))
        if entry.status != EntryStatus.PENDING:
            raise StateError(entry_not_pending(entry_id, entry.status.value))
        return entry
