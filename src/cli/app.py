"""Typer CLI entrypoint for capturing and browsing build logs."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from click.core import ParameterSource
from pydantic import ValidationError

from core.config import get_settings
from core.logging import configure_logging
from persistence.errors import RecordNotFoundError, TrazaError
from persistence.exporter import export_record
from persistence.resolver import PrefixResolver
from persistence.sqlite_store import SqliteLogStore
from traza import __version__

from cli.common import (
    build_store,
    console,
    print_record,
    read_stdin,
    render_log_table,
    split_tags,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    help=(
        "traza - FPGA (or whatever you want) build logger\n\n"
        "Captures stdin and stores it in a SQLite database together with a "
        "project name, timestamp and optional tags for later retrieval. "
        "Run without arguments to open the latest log in a browser."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"traza {__version__}")
        raise typer.Exit()


@app.command()
def run(
    ctx: typer.Context,
    project: str | None = typer.Option(
        None,
        "--project",
        help="Name of the project to tag the log",
    ),
    tag: list[str] | None = typer.Option(
        None,
        "--tag",
        help="Optional tags for the log (comma-separated or multiple --tag)",
    ),
    list_logs: bool = typer.Option(
        False,
        "--list",
        help="Get a list of the most recent logs",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        min=1,
        help="Maximum number of logs shown by --list (default: TRAZA_LIST_LIMIT)",
    ),
    export: str | None = typer.Option(
        None,
        "--export",
        metavar="HASH_PREFIX",
        help="Export a log by hash prefix",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        file_okay=False,
        help="Directory for --export (default: TRAZA_EXPORT_DIR or home)",
    ),
    show: str | None = typer.Option(
        None,
        "--show",
        metavar="HASH_PREFIX",
        help="Print a log by hash prefix",
    ),
    view: bool = typer.Option(
        False,
        "--view",
        help="Open the latest log in the web browser",
    ),
    db: str | None = typer.Option(
        None,
        "--db",
        metavar="ACTION",
        help="If db=delete, deletes all logs from the SQLite DB",
    ),
    db_path: bool = typer.Option(
        False,
        "--db-path",
        help="Print the database location and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    if db is not None and db != "delete":
        raise typer.BadParameter(f"unsupported action '{db}' (expected 'delete')", param_hint="--db")

    try:
        settings = get_settings()
        configure_logging("DEBUG" if verbose else settings.log_level)

        if db_path:
            typer.echo(str(settings.db_path))
            return

        store = build_store(settings)
        logger.debug("Database path: %s", store.path)

        if db == "delete":
            removed = store.delete_all()
            typer.echo(f"All logs deleted from database ({removed} removed)")
            return

        if list_logs:
            records = store.list_recent(limit or settings.list_limit)
            console.print(render_log_table(records))
            return

        if export is not None:
            _export(store, export, output_dir or settings.export_dir)
            return

        if show is not None:
            print_record(PrefixResolver(store).resolve_or_raise(show))
            return

        if view or _no_arguments(ctx):
            _view_latest(store)
            return

        if not project:
            typer.echo("Missing required argument: --project", err=True)
            raise typer.Exit(code=1)

        record = store.insert_record(project, split_tags(tag), read_stdin())
        typer.echo(
            f"Log saved for project '{record.project}' with tags "
            f"[{record.tags}] and hash [{record.hash}]"
        )
    except RecordNotFoundError as exc:
        typer.echo(str(exc), err=True)
    except ValidationError as exc:
        typer.echo(f"Error: invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except TrazaError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _no_arguments(ctx: typer.Context) -> bool:
    return all(
        ctx.get_parameter_source(name) is not ParameterSource.COMMANDLINE
        for name in ctx.params
    )


def _export(store: SqliteLogStore, prefix: str, destination: Path) -> None:
    record = PrefixResolver(store).resolve_or_raise(prefix)
    path = export_record(record, destination)
    typer.echo(f"Exported log to: {path}")


def _view_latest(store: SqliteLogStore) -> None:
    from reporting.html import open_in_browser, write_log_html

    record = store.latest()
    if record is None:
        typer.echo("No logs stored yet. Pipe a build into 'traza --project NAME'.")
        return
    path = write_log_html(record)
    typer.echo(f"Wrote log #{record.id} to {path}")
    open_in_browser(path)


def main() -> None:
    app()


__all__ = ["app", "main"]
