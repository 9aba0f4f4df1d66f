"""Application service: Audit log (query only)."""

from __future__ import annotations

from stockorders.domain.model.audit_log import AuditLogRecord
from stockorders.domain.repository.audit_log_repository import AuditLogRepository
from stockorders.domain.result import Failure, Result, Success, ValidationFailure


class AuditLogService:

    def __init__(self, audit_log_repo: AuditLogRepository) -> None:
        self._audit_log_repo = audit_log_repo

    async def get_all(self, limit: int = 100) -> Result[list[AuditLogRecord]]:
        if limit < 1:
            return Failure(
                ValidationFailure.from_errors([("limit", "Limit must be at least 1.")])
            )
        return Success(await self._audit_log_repo.get_all(limit))
