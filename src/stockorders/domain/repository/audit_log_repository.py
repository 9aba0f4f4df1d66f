"""Abstract repository for audit log entries.

Defined in the domain layer so the domain never depends on
infrastructure.  Entries are append-only: no update, no delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockorders.domain.model.audit_log import AuditLogRecord


class AuditLogRepository(ABC):

    @abstractmethod
    async def create(self, record: AuditLogRecord) -> int:
        """Append an entry and return its id."""

    @abstractmethod
    async def get_all(self, limit: int = 100) -> list[AuditLogRecord]:
        """Return up to *limit* entries, most recent first."""
