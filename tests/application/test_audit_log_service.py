"""Tests for AuditLogService."""

import pytest

from stockorders.application.audit_log_service import AuditLogService
from stockorders.domain.model.audit_log import AuditLogRecord
from stockorders.domain.result import ErrorType
from tests.fakes import FakeAuditLogRepository


async def _service_with(count: int) -> AuditLogService:
    repo = FakeAuditLogRepository()
    for n in range(count):
        await repo.create(AuditLogRecord.new("ORDER_CREATED", f"OrderId={n + 1}"))
    return AuditLogService(repo)


class TestAuditLogQueries:

    async def test_newest_first(self):
        service = await _service_with(3)
        result = await service.get_all()
        assert [r.details for r in result.value] == ["OrderId=3", "OrderId=2", "OrderId=1"]

    async def test_limit_applied(self):
        service = await _service_with(5)
        result = await service.get_all(limit=2)
        assert len(result.value) == 2

    async def test_empty_log(self):
        service = await _service_with(0)
        assert (await service.get_all()).value == []

    @pytest.mark.parametrize("limit", [0, -5])
    async def test_limit_below_one_is_validation_failure(self, limit):
        service = await _service_with(1)
        result = await service.get_all(limit=limit)
        assert result.is_failure
        assert result.error.type is ErrorType.VALIDATION
        assert "limit" in result.error.field_errors
