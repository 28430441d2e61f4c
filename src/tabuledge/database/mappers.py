"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the bookkeeping core only ever
sees domain entities.
"""

from tabuledge.domain import entities as domain
from tabuledge.database.models import (
    Account as ORMAccount,
    EventLog as ORMEventLog,
    JournalEntry as ORMJournalEntry,
    JournalLine as ORMJournalLine,
    LedgerEntry as ORMLedgerEntry,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        number=orm_account.number,
        category=orm_account.category,
        subcategory=orm_account.subcategory or "",
        normal_side=orm_account.normal_side,
        initial_balance=orm_account.initial_balance,
        active=orm_account.active,
        description=orm_account.description or "",
        statement=orm_account.statement or "",
        order=orm_account.order or "",
        comment=orm_account.comment or "",
        created_at=orm_account.created_at,
        created_by=orm_account.created_by,
    )


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerTransaction:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerTransaction."""
    return domain.LedgerTransaction(
        id=str(orm_entry.id),
        account_id=orm_entry.account_id,
        debit=orm_entry.debit,
        credit=orm_entry.credit,
        date=orm_entry.date,
        created_at=orm_entry.created_at,
        journal_entry_id=orm_entry.journal_entry_id,
        description=orm_entry.description,
    )


def journal_line_to_domain(orm_line: ORMJournalLine) -> domain.JournalLine:
    """Convert SQLAlchemy JournalLine model to domain JournalLine entity."""
    return domain.JournalLine(
        account_id=orm_line.account_id,
        amount=orm_line.amount,
        side=orm_line.side,
        account_name=orm_line.account.name if orm_line.account is not None else "",
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        description=orm_entry.description,
        entry_type=orm_entry.entry_type,
        status=domain.normalize_status(orm_entry.status),
        lines=tuple(journal_line_to_domain(line) for line in orm_entry.lines),
        created_by=orm_entry.created_by,
        created_at=orm_entry.created_at,
        rejection_reason=orm_entry.rejection_reason,
        reviewed_by=orm_entry.reviewed_by,
        reviewed_at=orm_entry.reviewed_at,
    )


def event_log_to_domain(orm_event: ORMEventLog) -> domain.AuditEvent:
    """Convert SQLAlchemy EventLog model to domain AuditEvent entity."""
    return domain.AuditEvent(
        id=orm_event.id,
        entity=orm_event.entity,
        entity_id=orm_event.entity_id,
        action=orm_event.action,
        user=orm_event.user,
        at=orm_event.at,
        before=orm_event.before,
        after=orm_event.after,
    )
