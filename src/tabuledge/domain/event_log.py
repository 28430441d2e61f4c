"""Event log domain service."""

import logging
from typing import Any, Optional

from tabuledge.database.base import Database
from tabuledge.domain.entities import AuditEvent
from tabuledge.utils.serialization import to_primitive

logger = logging.getLogger(__name__)


class EventLogService:
    """Service for recording and reading the audit trail."""

    def __init__(self, db: Database):
        """Initialize event log service.

        Args:
            db: Database instance
        """
        self.db = db

    def record(
        self,
        entity: str,
        entity_id: str,
        action: str,
        before: Any = None,
        after: Any = None,
        user: Optional[str] = None,
    ) -> int:
        """Append an audit event with before/after snapshots.

        Args:
            entity: Entity kind, e.g. "account" or "journal_entry"
            entity_id: ID of the changed entity
            action: What happened, e.g. "create", "update", "approve"
            before: Entity state before the change (dataclass or dict)
            after: Entity state after the change (dataclass or dict)
            user: Acting user

        Returns:
            Event ID
        """
        event_id = self.db.append_audit_event(
            entity=entity,
            entity_id=entity_id,
            action=action,
            before=to_primitive(before) if before is not None else None,
            after=to_primitive(after) if after is not None else None,
            user=user,
        )
        logger.info("%s %s %s by %s", action, entity, entity_id, user or "unknown")
        return event_id

    def list_events(
        self,
        entity: Optional[str] = None,
        entity_id: Optional[str] = None,
        user: Optional[str] = None,
    ) -> list[AuditEvent]:
        """List audit events, newest first."""
        return self.db.list_audit_events(entity=entity, entity_id=entity_id, user=user)

    @staticmethod
    def changed_fields(event: AuditEvent) -> list[str]:
        """Return the names of fields that differ between before and after."""
        before = event.before or {}
        after = event.after or {}
        return sorted(
            key for key in set(before) | set(after) if before.get(key) != after.get(key)
        )
