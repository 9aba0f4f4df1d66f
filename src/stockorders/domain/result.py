"""Result type used instead of exceptions for expected failures.

A result is exactly one of three variants:

- ``Success(value)``   -- the operation produced a value
- ``EmptySuccess()``   -- the operation succeeded with nothing to return
- ``Failure(error)``   -- the operation failed with a typed ``Error``

``Success`` has no error slot and ``Failure`` has no value slot, so a
caller cannot read a value off a failed result.  Callers branch with
``match()`` or check ``is_success`` / ``is_failure`` and return the
failure unchanged.  When the success branch is a coroutine, ``failed``
serves as the matching failure branch.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


class ErrorType(Enum):
    FAILURE = "FAILURE"
    VALIDATION = "VALIDATION"
    BUSINESS_RULE = "BUSINESS_RULE"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    @property
    def status(self) -> int:
        """External-facing status code (HTTP semantics)."""
        return _STATUS_BY_TYPE[self]


_STATUS_BY_TYPE = {
    ErrorType.FAILURE: 500,
    ErrorType.VALIDATION: 400,
    ErrorType.BUSINESS_RULE: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.CONFLICT: 409,
    ErrorType.UNAUTHORIZED: 401,
    ErrorType.FORBIDDEN: 403,
}


@dataclass(frozen=True)
class Error:
    """A typed, immutable description of what went wrong.

    ``code`` is machine-readable (``"Inventory.InsufficientStock"``),
    ``description`` is meant for humans.  ``metadata`` carries optional
    diagnostics and is ignored by equality.
    """

    code: str
    description: str
    type: ErrorType = ErrorType.FAILURE
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def status(self) -> int:
        return self.type.status

    # --- Factories ------------------------------------------------------------

    @classmethod
    def failure(cls, code: str, description: str) -> Error:
        return cls(code, description, ErrorType.FAILURE)

    @classmethod
    def not_found(cls, code: str, description: str) -> Error:
        return cls(code, description, ErrorType.NOT_FOUND)

    @classmethod
    def business_rule(cls, code: str, description: str, **metadata: Any) -> Error:
        return cls(code, description, ErrorType.BUSINESS_RULE, metadata)

    @classmethod
    def conflict(cls, code: str, description: str) -> Error:
        return cls(code, description, ErrorType.CONFLICT)

    @classmethod
    def unauthorized(cls, code: str, description: str) -> Error:
        return cls(code, description, ErrorType.UNAUTHORIZED)

    @classmethod
    def forbidden(cls, code: str, description: str) -> Error:
        return cls(code, description, ErrorType.FORBIDDEN)


@dataclass(frozen=True)
class ValidationFailure(Error):
    """Malformed input, reported as a field -> messages mapping."""

    code: str = "Validation.General"
    description: str = "One or more validation errors occurred"
    type: ErrorType = ErrorType.VALIDATION
    field_errors: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: Iterable[tuple[str, str]]) -> ValidationFailure:
        """Group ``(field, message)`` pairs by field, keeping their order."""
        grouped: dict[str, list[str]] = {}
        for field_name, message in errors:
            grouped.setdefault(field_name, []).append(message)
        return cls(field_errors={k: tuple(v) for k, v in grouped.items()})


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def match(
        self,
        success: Callable[[T], R],
        failure: Callable[[Error], R],
        empty: Callable[[], R] | None = None,
    ) -> R:
        return success(self.value)


@dataclass(frozen=True)
class EmptySuccess:

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def match(
        self,
        success: Callable[[Any], R],
        failure: Callable[[Error], R],
        empty: Callable[[], R] | None = None,
    ) -> R:
        if empty is None:
            return success(None)
        return empty()


@dataclass(frozen=True)
class Failure:
    error: Error

    def __post_init__(self) -> None:
        if not isinstance(self.error, Error):
            raise TypeError(
                f"Failure requires an Error, got {type(self.error).__name__}"
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def match(
        self,
        success: Callable[[Any], R],
        failure: Callable[[Error], R],
        empty: Callable[[], R] | None = None,
    ) -> R:
        return failure(self.error)


Result = Union[Success[T], EmptySuccess, Failure]

OK = EmptySuccess()


async def failed(error: Error) -> Failure:
    """Awaitable ``Failure`` for ``match`` calls whose success branch is a coroutine."""
    return Failure(error)
