"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import Iterable

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import Settings
from persistence.models import LogRecord
from persistence.sqlite_store import SqliteLogStore

console = Console()


def build_store(settings: Settings) -> SqliteLogStore:
    return SqliteLogStore(settings.db_path, timeout=settings.busy_timeout)


def split_tags(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma-delimited ``--tag`` values."""
    tags: list[str] = []
    for value in values or []:
        tags.extend(part.strip() for part in value.split(",") if part.strip())
    return tags


def read_stdin() -> str:
    data = typer.get_binary_stream("stdin").read()
    return data.decode("utf-8", errors="replace")


def render_log_table(records: list[LogRecord]) -> Table:
    table = Table(title="Logs List", title_justify="left")
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("Hash", no_wrap=True)
    table.add_column("Project")
    table.add_column("Timestamp", no_wrap=True)
    table.add_column("Tags")
    for record in records:
        table.add_row(
            str(record.id),
            record.hash,
            Text(record.project),
            record.timestamp,
            Text(record.tags),
        )
    return table


def print_record(record: LogRecord) -> None:
    typer.echo(f"# Project: {record.project}")
    typer.echo(f"# Timestamp: {record.timestamp}")
    typer.echo(f"# Hash: {record.hash}")
    if record.tags:
        typer.echo(f"# Tags: {record.tags}")
    typer.echo("")
    typer.echo(record.log, nl=not record.log.endswith("\n"))


__all__ = [
    "build_store",
    "console",
    "print_record",
    "read_stdin",
    "render_log_table",
    "split_tags",
]
