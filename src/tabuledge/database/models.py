"""SQLAlchemy models for the tabuledge database."""

from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Chart-of-accounts model."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    number = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)
    subcategory = Column(String, nullable=False, default="")
    normal_side = Column(String, nullable=True)
    initial_balance = Column(Numeric(14, 2), nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    description = Column(String, nullable=False, default="")
    statement = Column(String, nullable=False, default="")
    order = Column(String, nullable=False, default="")
    comment = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    created_by = Column(String, nullable=True)

    # Relationships
    ledger_entries = relationship("LedgerEntry", back_populates="account")


class LedgerEntry(Base):
    """Posted ledger transaction model."""

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True)
    account_id = Column(String, ForeignKey("accounts.id"), nullable=False)
    journal_entry_id = Column(String, ForeignKey("journal_entries.id"), nullable=True)
    date = Column(Date, nullable=True)
    debit = Column(Numeric(14, 2), nullable=False, default=0)
    credit = Column(Numeric(14, 2), nullable=False, default=0)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    account = relationship("Account", back_populates="ledger_entries")


class JournalEntry(Base):
    """Journal entry model."""

    __tablename__ = "journal_entries"

    id = Column(String, primary_key=True)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    entry_type = Column(String, nullable=False, default="regular")
    status = Column(String, nullable=False, default="pending")
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    rejection_reason = Column(String, nullable=True)
    reviewed_by = Column(String, nullable=True)
    reviewed_at = Column(DateTime, nullable=True)

    # Relationships
    lines = relationship(
        "JournalLine",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalLine.id",
    )


class JournalLine(Base):
    """Journal entry line model."""

    __tablename__ = "journal_lines"

    id = Column(Integer, primary_key=True)
    entry_id = Column(String, ForeignKey("journal_entries.id"), nullable=False)
    account_id = Column(String, ForeignKey("accounts.id"), nullable=False)
    side = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)

    # Relationships
    entry = relationship("JournalEntry", back_populates="lines")
    account = relationship("Account")


class EventLog(Base):
    """Audit trail model."""

    __tablename__ = "event_logs"

    id = Column(Integer, primary_key=True)
    entity = Column(String, nullable=False)
    entity_id = Column(String, nullable=False)
    action = Column(String, nullable=False)
    before = Column(JSON, nullable=True)
    after = Column(JSON, nullable=True)
    user = Column(String, nullable=True)
    at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
