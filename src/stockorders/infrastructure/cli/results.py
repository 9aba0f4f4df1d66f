"""Glue between click commands and the async service layer.

Each command runs exactly one request scope: open a connection, call a
service, dispose.  Failed results become ``ResultFailure`` so click
prints them and exits non-zero.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeVar

import click

from stockorders.domain.result import Error, ErrorType, Result, ValidationFailure
from stockorders.infrastructure.bootstrap import Services, engine, request_scope

T = TypeVar("T")


class ResultFailure(click.ClickException):
    """A failed ``Result`` rendered for the console.

    Client-side failures (4xx) exit with 1, everything else with 2.
    """

    def __init__(self, error: Error) -> None:
        super().__init__(describe(error))
        self.error = error
        self.exit_code = 2 if error.type is ErrorType.FAILURE else 1


def describe(error: Error) -> str:
    message = f"[{error.status}] {error.code}: {error.description}"
    if isinstance(error, ValidationFailure):
        for field_name, messages in error.field_errors.items():
            for text in messages:
                message += f"\n  {field_name}: {text}"
    return message


def raise_failure(error: Error) -> NoReturn:
    raise ResultFailure(error)


def run(call: Callable[[Services], Awaitable[Result[T]]]) -> Result[T]:
    """Execute *call* inside a fresh request scope and return its result."""

    async def _main() -> Result[T]:
        db_engine = engine()
        try:
            async with request_scope(db_engine) as services:
                return await call(services)
        finally:
            await db_engine.dispose()

    return asyncio.run(_main())
