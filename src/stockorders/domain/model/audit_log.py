"""Append-only audit log entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

INVENTORY_CREATED = "INVENTORY_CREATED"
INVENTORY_UPDATED = "INVENTORY_UPDATED"
INVENTORY_DELETED = "INVENTORY_DELETED"
INVENTORY_RESTOCKED = "INVENTORY_RESTOCKED"
ORDER_CREATED = "ORDER_CREATED"


@dataclass(frozen=True)
class AuditLogRecord:
    """A business-significant action, written in the same transaction as
    the action itself.  Never updated or deleted.
    """

    id: int | None
    action: str
    details: str
    created_at: datetime

    @staticmethod
    def new(action: str, details: str) -> AuditLogRecord:
        return AuditLogRecord(
            id=None,
            action=action,
            details=details,
            created_at=datetime.now(timezone.utc),
        )
