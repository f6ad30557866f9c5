"""Unit tests for the core configuration module."""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import Settings, default_data_dir, get_settings


def test_settings_defaults(monkeypatch):
    """Test that Settings initializes with expected defaults."""
    monkeypatch.delenv("TRAZA_DATA_DIR", raising=False)
    monkeypatch.delenv("TRAZA_EXPORT_DIR", raising=False)

    settings = Settings()

    assert settings.data_dir == default_data_dir()
    assert settings.data_dir.name.lower() == "traza"
    assert settings.export_dir == Path.home()
    assert settings.db_filename == "logs.db"
    assert settings.list_limit == 100
    assert settings.log_level == "WARNING"
    assert settings.db_path == settings.data_dir / "logs.db"


@pytest.mark.skipif(sys.platform != "linux", reason="XDG layout only applies on Linux")
def test_default_data_dir_follows_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    assert default_data_dir() == tmp_path / ".local" / "share" / "traza"

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert default_data_dir() == tmp_path / "xdg" / "traza"


def test_settings_with_env_vars(monkeypatch, tmp_path):
    """Test that Settings properly loads values from environment variables."""
    monkeypatch.setenv("TRAZA_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TRAZA_LIST_LIMIT", "25")
    monkeypatch.setenv("TRAZA_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.db_path == tmp_path / "logs.db"
    assert settings.list_limit == 25
    assert settings.log_level == "DEBUG"


def test_settings_validation(monkeypatch):
    monkeypatch.setenv("TRAZA_LIST_LIMIT", "0")
    with pytest.raises(ValidationError):
        Settings()

    monkeypatch.setenv("TRAZA_LIST_LIMIT", "10")
    monkeypatch.setenv("TRAZA_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_singleton():
    """Test that get_settings returns the same instance each time."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
    assert isinstance(settings1, Settings)
