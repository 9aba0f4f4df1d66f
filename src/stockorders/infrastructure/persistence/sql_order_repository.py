"""SQL implementation of OrderRepository.

An order is stored as one ``Orders`` row plus one ``OrderDetails`` row per
detail.  Both inserts run on the session's connection, so they share the
caller's transaction and land (or vanish) together.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import text

from stockorders.domain.model.order import Order
from stockorders.domain.model.value_objects import OrderId
from stockorders.domain.repository.order_repository import OrderRepository
from stockorders.infrastructure.persistence.mappers import order_to_domain, order_to_records
from stockorders.infrastructure.persistence.records import OrderDetailRecord, OrderRecord
from stockorders.infrastructure.persistence.session import DbSession

_SELECT_ORDERS = """
    SELECT
        o.Id         AS Id,
        o.CustomerId AS CustomerId,
        o.CreatedAt  AS CreatedAt,
        d.Id         AS DetailId,
        d.ProductId  AS ProductId,
        d.Quantity   AS Quantity,
        d.UnitPrice  AS UnitPrice
    FROM Orders o
    LEFT JOIN OrderDetails d ON o.Id = d.OrderId
"""


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: DbSession) -> None:
        self._session = session

    # --- Commands -------------------------------------------------------------

    async def create(self, order: Order) -> int:
        order_record, detail_records = order_to_records(order)
        connection = self._session.connection

        # 1. Parent row first: details reference its generated id.
        result = await connection.execute(
            text("INSERT INTO Orders (CustomerId, CreatedAt) VALUES (:CustomerId, :CreatedAt)"),
            order_record.params(),
        )
        order_id = result.lastrowid
        order._assign_id(OrderId(order_id))

        # 2. Child rows in one executemany.
        if detail_records:
            for detail in detail_records:
                detail.OrderId = order_id
            await connection.execute(
                text(
                    "INSERT INTO OrderDetails (OrderId, ProductId, Quantity, UnitPrice) "
                    "VALUES (:OrderId, :ProductId, :Quantity, :UnitPrice)"
                ),
                [detail.params() for detail in detail_records],
            )

        return order_id

    # --- Queries --------------------------------------------------------------

    async def get_by_id(self, order_id: int) -> Order | None:
        result = await self._session.connection.execute(
            text(_SELECT_ORDERS + " WHERE o.Id = :Id ORDER BY d.Id"),
            {"Id": order_id},
        )
        orders = _assemble(result.mappings().all())
        return orders[0] if orders else None

    async def get_all(self) -> list[Order]:
        result = await self._session.connection.execute(
            text(_SELECT_ORDERS + " ORDER BY o.Id, d.Id")
        )
        return _assemble(result.mappings().all())


def _assemble(rows: Iterable[Mapping[str, Any]]) -> list[Order]:
    """Fold joined parent/detail rows back into aggregates, keeping row order."""
    grouped: dict[int, tuple[OrderRecord, list[OrderDetailRecord]]] = {}
    for row in rows:
        entry = grouped.get(row["Id"])
        if entry is None:
            entry = (
                OrderRecord(Id=row["Id"], CustomerId=row["CustomerId"], CreatedAt=row["CreatedAt"]),
                [],
            )
            grouped[row["Id"]] = entry
        # LEFT JOIN yields a NULL detail for orders without details
        if row["DetailId"] is not None:
            entry[1].append(
                OrderDetailRecord(
                    Id=row["DetailId"],
                    OrderId=row["Id"],
                    ProductId=row["ProductId"],
                    Quantity=row["Quantity"],
                    UnitPrice=str(row["UnitPrice"]),
                )
            )
    return [order_to_domain(record, details) for record, details in grouped.values()]
