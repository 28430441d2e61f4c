"""Domain layer for tabuledge application."""

from tabuledge.domain.account import AccountService
from tabuledge.domain.event_log import EventLogService
from tabuledge.domain.journal import JournalService
from tabuledge.domain.reports import ReportService

__all__ = [
    "AccountService",
    "EventLogService",
    "JournalService",
    "ReportService",
]
