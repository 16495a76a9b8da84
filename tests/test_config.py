"""Tests for configuration."""

import inspect
import os
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from sharedcal.config import CalendarConfig
from sharedcal.constants import SHARE_LINK_WARN_LENGTH
from sharedcal.output.share_link import make_share_link

ENV_VARS = (
    "SHAREDCAL_DATA_DIR",
    "SHAREDCAL_LOG_DIR",
    "SHAREDCAL_STORAGE_KEY",
    "SHAREDCAL_BASE_URL",
    "SHAREDCAL_TIMEZONE",
    "SHAREDCAL_DEFAULT_DURATION",
    "SHAREDCAL_SHARE_WARN_LENGTH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Start every test without SHAREDCAL_* variables or a .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_calendar_config_defaults():
    """Test CalendarConfig default values."""
    config = CalendarConfig()
    assert config.data_dir == Path("data")
    assert config.storage_key == "shared_calendar_events_v1"
    assert config.share_param == "shared"
    assert config.ics_export_filename == "shared-calendar.ics"
    assert config.default_time == "09:00"
    assert config.default_duration == 60
    assert config.placeholder_title == "(untitled)"
    assert config.timezone is None
    assert config.get_timezone() is None


def test_calendar_config_timezone():
    """Test resolving a configured timezone."""
    config = CalendarConfig(timezone="Europe/Bratislava")
    assert config.get_timezone() == ZoneInfo("Europe/Bratislava")


def test_calendar_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("SHAREDCAL_DATA_DIR", "/custom/data")
    monkeypatch.setenv("SHAREDCAL_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("SHAREDCAL_STORAGE_KEY", "team_events_v1")
    monkeypatch.setenv("SHAREDCAL_BASE_URL", "https://cal.example.org/")
    monkeypatch.setenv("SHAREDCAL_TIMEZONE", "UTC")
    monkeypatch.setenv("SHAREDCAL_DEFAULT_DURATION", "45")
    monkeypatch.setenv("SHAREDCAL_SHARE_WARN_LENGTH", "500")

    config = CalendarConfig.from_env()
    assert config.data_dir == Path("/custom/data")
    assert config.log_dir == Path("/custom/logs")
    assert config.storage_key == "team_events_v1"
    assert config.base_url == "https://cal.example.org/"
    assert config.timezone == "UTC"
    assert config.default_duration == 45
    assert config.share_link_warn_length == 500


def test_calendar_config_from_env_file(tmp_path):
    """Test loading config from .env file."""
    (tmp_path / ".env").write_text("SHAREDCAL_BASE_URL=https://from-dotenv.example/\n")

    try:
        config = CalendarConfig.from_env()
        assert config.base_url == "https://from-dotenv.example/"
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("SHAREDCAL_BASE_URL", None)


def test_calendar_config_invalid_default_duration(monkeypatch):
    """Test handling invalid SHAREDCAL_DEFAULT_DURATION."""
    monkeypatch.setenv("SHAREDCAL_DEFAULT_DURATION", "invalid")
    config = CalendarConfig.from_env()
    assert config.default_duration == 60


def test_calendar_config_rejects_non_positive_duration():
    """Test that a zero default duration is rejected."""
    with pytest.raises(ValidationError):
        CalendarConfig(default_duration=0)


def test_share_warn_length_default_matches_share_links():
    """Test config and make_share_link share one warning threshold."""
    default = inspect.signature(make_share_link).parameters["warn_length"].default
    assert CalendarConfig().share_link_warn_length == SHARE_LINK_WARN_LENGTH
    assert default == SHARE_LINK_WARN_LENGTH
