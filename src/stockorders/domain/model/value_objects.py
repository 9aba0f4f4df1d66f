"""Identity value objects shared across the domain.

Wrapping raw integers keeps product ids and order ids from being mixed
up.  Both are immutable and compared by value.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockorders.domain.exceptions import InvalidIdentifierError


def _check_positive(kind: str, value: object) -> None:
    # bool is an int subclass; True must not become ProductId(1)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidIdentifierError(
            f"{kind} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidIdentifierError(f"{kind} must be greater than 0, got {value}")


@dataclass(frozen=True)
class ProductId:
    value: int

    def __post_init__(self) -> None:
        _check_positive("Product ID", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId:
    value: int

    def __post_init__(self) -> None:
        _check_positive("Order ID", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
