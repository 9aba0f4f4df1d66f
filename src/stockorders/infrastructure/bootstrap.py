"""Composition root -- wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Each request scope gets its own connection, session and unit of work;
nothing transactional is shared between scopes.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from stockorders.application.audit_log_service import AuditLogService
from stockorders.application.inventory_service import InventoryService
from stockorders.application.order_service import OrderService
from stockorders.infrastructure.config import Settings, get_settings
from stockorders.infrastructure.persistence.schema import create_engine
from stockorders.infrastructure.persistence.session import DbSession
from stockorders.infrastructure.persistence.sql_audit_log_repository import (
    SqlAuditLogRepository,
)
from stockorders.infrastructure.persistence.sql_inventory_repository import (
    SqlInventoryRepository,
)
from stockorders.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from stockorders.infrastructure.persistence.unit_of_work import SqlUnitOfWork


@dataclass(frozen=True)
class Services:
    inventory: InventoryService
    orders: OrderService
    audit_log: AuditLogService
    uow: SqlUnitOfWork


def engine(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    return create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def build_services(session: DbSession) -> Services:
    uow = SqlUnitOfWork(session)
    inventory_repo = SqlInventoryRepository(session)
    order_repo = SqlOrderRepository(session)
    audit_log_repo = SqlAuditLogRepository(session)
    return Services(
        inventory=InventoryService(uow, inventory_repo, audit_log_repo),
        orders=OrderService(uow, inventory_repo, order_repo, audit_log_repo),
        audit_log=AuditLogService(audit_log_repo),
        uow=uow,
    )


@asynccontextmanager
async def request_scope(db_engine: AsyncEngine) -> AsyncIterator[Services]:
    """Open one connection, hand out services bound to it, always dispose."""
    session = await DbSession(db_engine).open()
    services = build_services(session)
    async with services.uow:
        yield services
