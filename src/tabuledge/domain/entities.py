"""Domain model entities for tabuledge.

These are pure data classes representing bookkeeping concepts, independent of
database schema. The computation core only ever sees these immutable
snapshots, so the persistence layer can change without touching it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


ZERO = Decimal("0")


class HealthBand(str, Enum):
    """Three-level classification applied to a computed ratio."""

    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


class EntryStatus(str, Enum):
    """Journal entry review status."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Legacy status spellings that mean the entry is still awaiting review.
_PENDING_ALIASES = ("pendingapproval", "submitted")


def normalize_status(status: Optional[str]) -> EntryStatus:
    """Map a stored status string onto an EntryStatus.

    Empty, unknown and legacy "submitted" style values all mean pending.
    """
    text = (status or "").strip().lower()
    if text in _PENDING_ALIASES:
        return EntryStatus.PENDING
    try:
        return EntryStatus(text)
    except ValueError:
        return EntryStatus.PENDING


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry."""

    id: str
    name: str
    number: str
    category: str
    subcategory: str = ""
    normal_side: Optional[str] = None
    initial_balance: Decimal = ZERO
    active: bool = True
    description: str = ""
    statement: str = ""
    order: str = ""
    comment: str = ""
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None

    @property
    def type(self) -> str:
        """Lowercased category, used for all category comparisons."""
        return self.category.lower()


@dataclass(frozen=True)
class LedgerTransaction:
    """A posted debit or credit against a single account.

    ``date`` and ``created_at`` may be raw values (strings) as read from a
    document store; the balance accumulator resolves the effective date.
    """

    id: Optional[str]
    account_id: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO
    date: date | datetime | str | None = None
    created_at: datetime | str | None = None
    journal_entry_id: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class BalanceRecord:
    """Per-account aggregate over a reporting window."""

    account: Account
    debit_total: Decimal
    credit_total: Decimal
    begin: Decimal
    end: Decimal


@dataclass(frozen=True)
class IncomeStatement:
    """Revenue less expenses for a period."""

    revenue: Decimal
    expenses: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet totals.

    ``equity`` is contributed capital from equity accounts; ``total_equity``
    adds retained earnings to it.
    """

    current_assets: Decimal
    inventory: Decimal
    current_liabilities: Decimal
    total_liabilities: Decimal
    total_assets: Decimal
    total_equity: Decimal
    equity: Decimal = ZERO
    retained_earnings: Decimal = ZERO

    @property
    def is_balanced(self) -> bool:
        return self.total_assets == self.total_liabilities + self.total_equity


@dataclass(frozen=True)
class RetainedEarningsStatement:
    """Retained earnings roll-forward."""

    opening: Decimal
    net_income: Decimal
    dividends: Decimal
    ending: Decimal


@dataclass(frozen=True)
class TrialBalanceRow:
    """One account restated into debit/credit columns."""

    account: Account
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class TrialBalance:
    """Trial balance rows and column totals."""

    rows: tuple[TrialBalanceRow, ...]
    total_debit: Decimal
    total_credit: Decimal

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


@dataclass(frozen=True)
class RatioTotals:
    """Statement totals consumed by the ratio engine."""

    current_assets: Decimal = ZERO
    inventory: Decimal = ZERO
    current_liabilities: Decimal = ZERO
    total_liabilities: Decimal = ZERO
    total_equity: Decimal = ZERO
    total_assets: Decimal = ZERO
    net_income: Decimal = ZERO
    revenue: Decimal = ZERO
    quick_assets: Optional[Decimal] = None


@dataclass(frozen=True)
class RatioResult:
    """A computed financial ratio with its display string and health band."""

    key: str
    label: str
    formula: str
    value: Optional[Decimal]
    formatted: str
    status: HealthBand


@dataclass(frozen=True)
class JournalLine:
    """One side of a journal entry."""

    account_id: str
    amount: Decimal
    side: str  # "debit" or "credit"
    account_name: str = ""


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry awaiting or past manager review."""

    id: str
    date: date
    description: Optional[str]
    entry_type: str
    status: EntryStatus
    lines: tuple[JournalLine, ...]
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None

    @property
    def debit_lines(self) -> tuple[JournalLine, ...]:
        return tuple(line for line in self.lines if line.side == "debit")

    @property
    def credit_lines(self) -> tuple[JournalLine, ...]:
        return tuple(line for line in self.lines if line.side == "credit")

    @property
    def total_debits(self) -> Decimal:
        return sum((line.amount for line in self.debit_lines), ZERO)

    @property
    def total_credits(self) -> Decimal:
        return sum((line.amount for line in self.credit_lines), ZERO)


@dataclass(frozen=True)
class AuditEvent:
    """Before/after record of a change to an account or journal entry."""

    id: int
    entity: str
    entity_id: str
    action: str
    user: Optional[str]
    at: datetime
    before: Optional[dict[str, Any]] = field(default=None, compare=False)
    after: Optional[dict[str, Any]] = field(default=None, compare=False)
