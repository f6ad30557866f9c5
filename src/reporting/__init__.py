"""Reporting module exports."""

from reporting.html import open_in_browser, render_log_html, write_log_html

__all__ = ["open_in_browser", "render_log_html", "write_log_html"]
