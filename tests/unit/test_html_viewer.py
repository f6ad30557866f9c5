from pathlib import Path

from persistence.models import LogRecord
from reporting import html as viewer


def _record(log: str) -> LogRecord:
    return LogRecord(
        id=3,
        hash="a1b2c3",
        project="fpga1",
        timestamp="2024-05-01 12:00:00",
        tags="ci,nightly",
        log=log,
    )


def test_render_escapes_log_content() -> None:
    page = viewer.render_log_html(_record("<script>alert('x')</script> & done"))

    assert "<script>" not in page
    assert "&lt;script&gt;" in page
    assert "&amp; done" in page
    assert "Traza Log #3" in page
    assert "Project: fpga1" in page
    assert "Tags: ci,nightly" in page


def test_write_log_html_and_open(tmp_path: Path, monkeypatch) -> None:
    opened: list[str] = []
    monkeypatch.setattr(viewer.webbrowser, "open", lambda url: opened.append(url) or True)

    path = viewer.write_log_html(_record("build ok"), tmp_path / "page.html")
    assert viewer.open_in_browser(path) is True

    assert "build ok" in path.read_text(encoding="utf-8")
    assert opened == [path.resolve().as_uri()]
