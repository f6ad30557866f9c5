"""HTML viewer for a single captured log."""

from __future__ import annotations

import logging
import tempfile
import webbrowser
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from persistence.errors import ExportError
from persistence.models import LogRecord

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
VIEWER_FILENAME = "traza_latest_log.html"


def _jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_log_html(record: LogRecord) -> str:
    """Render ``record`` as a standalone page; every field is HTML-escaped."""
    template = _jinja_env().get_template("log.html.j2")
    return template.render(record=record)


def default_viewer_path() -> Path:
    return Path(tempfile.gettempdir()) / VIEWER_FILENAME


def write_log_html(record: LogRecord, output_path: Path | None = None) -> Path:
    path = output_path or default_viewer_path()
    try:
        path.write_text(render_log_html(record), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Cannot write viewer page ({exc.strerror or exc})", path=path) from exc
    return path


def open_in_browser(path: Path) -> bool:
    opened = webbrowser.open(path.resolve().as_uri())
    if not opened:
        logger.warning("No browser available to open %s", path)
    return opened


__all__ = [
    "TEMPLATE_DIR",
    "default_viewer_path",
    "open_in_browser",
    "render_log_html",
    "write_log_html",
]
