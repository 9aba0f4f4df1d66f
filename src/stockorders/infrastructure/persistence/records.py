"""Flat row shapes owned by the persistence layer.

Column names match the SQL schema; the domain never sees these.
Decimals travel as text so SQLite keeps them exact, timestamps as
ISO-8601 text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class InventoryRecord:
    ProductId: int | None
    ProductName: str
    Stock: int
    UnitPrice: str

    def params(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> InventoryRecord:
        return cls(
            ProductId=row["ProductId"],
            ProductName=row["ProductName"],
            Stock=row["Stock"],
            UnitPrice=str(row["UnitPrice"]),
        )


@dataclass
class OrderRecord:
    Id: int | None
    CustomerId: int
    CreatedAt: str

    def params(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class OrderDetailRecord:
    Id: int | None
    OrderId: int | None
    ProductId: int
    Quantity: int
    UnitPrice: str

    def params(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class AuditLogRow:
    Id: int | None
    Action: str
    Details: str
    CreatedAt: str

    def params(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> AuditLogRow:
        return cls(
            Id=row["Id"],
            Action=row["Action"],
            Details=row["Details"],
            CreatedAt=row["CreatedAt"],
        )
