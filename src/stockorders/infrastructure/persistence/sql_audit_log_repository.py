"""SQL implementation of AuditLogRepository."""

from __future__ import annotations

from sqlalchemy import text

from stockorders.domain.model.audit_log import AuditLogRecord
from stockorders.domain.repository.audit_log_repository import AuditLogRepository
from stockorders.infrastructure.persistence.mappers import audit_log_to_domain, audit_log_to_row
from stockorders.infrastructure.persistence.records import AuditLogRow
from stockorders.infrastructure.persistence.session import DbSession


class SqlAuditLogRepository(AuditLogRepository):

    def __init__(self, session: DbSession) -> None:
        self._session = session

    async def create(self, record: AuditLogRecord) -> int:
        row = audit_log_to_row(record)
        result = await self._session.connection.execute(
            text(
                "INSERT INTO AuditLog (Action, Details, CreatedAt) "
                "VALUES (:Action, :Details, :CreatedAt)"
            ),
            row.params(),
        )
        return result.lastrowid

    async def get_all(self, limit: int = 100) -> list[AuditLogRecord]:
        result = await self._session.connection.execute(
            text("SELECT * FROM AuditLog ORDER BY CreatedAt DESC, Id DESC LIMIT :Limit"),
            {"Limit": limit},
        )
        return [
            audit_log_to_domain(AuditLogRow.from_row(row))
            for row in result.mappings().all()
        ]
