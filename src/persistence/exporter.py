"""Write log records to standalone text files."""

from __future__ import annotations

import logging
from pathlib import Path

from persistence.errors import ExportError
from persistence.models import LogRecord

logger = logging.getLogger(__name__)


def export_filename(record: LogRecord) -> str:
    # project is embedded as-is; names with path separators are not sanitized.
    return f"traza_export_{record.project}_{record.hash}.txt"


def render_export(record: LogRecord) -> str:
    return f"# Project: {record.project}\n# Timestamp: {record.timestamp}\n\n{record.log}"


def export_record(record: LogRecord, destination_dir: str | Path) -> Path:
    """Write ``record`` under ``destination_dir``, replacing any earlier export."""
    path = Path(destination_dir) / export_filename(record)
    try:
        path.write_text(render_export(record), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Cannot write export ({exc.strerror or exc})", path=path) from exc
    logger.debug("Exported log %s to %s", record.hash, path)
    return path


__all__ = ["export_filename", "export_record", "render_export"]
