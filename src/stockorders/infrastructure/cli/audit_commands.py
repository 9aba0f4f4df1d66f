"""CLI commands for the audit log."""

from __future__ import annotations

import click

from stockorders.application.dto import audit_log_to_dto
from stockorders.infrastructure.cli.results import raise_failure, run
from stockorders.infrastructure.config import get_settings


@click.command("list")
@click.option("--limit", type=int, default=None, help="Maximum number of entries.")
def audit_list(limit: int | None) -> None:
    """Show the most recent audit log entries."""
    if limit is None:
        limit = get_settings().AUDIT_LOG_DEFAULT_LIMIT

    result = run(lambda s: s.audit_log.get_all(limit))
    records = result.match(success=lambda value: value, failure=raise_failure)

    if not records:
        click.echo("No audit log entries found.")
        return

    for dto in (audit_log_to_dto(r) for r in records):
        click.echo(f"{dto.id:<6} {dto.created_at}  {dto.action:<20} {dto.details}")
