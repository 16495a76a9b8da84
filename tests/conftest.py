from datetime import datetime, timezone

import pytest

from sharedcal import create_app
from sharedcal.config import CalendarConfig
from sharedcal.models.event import Event
from sharedcal.storage import EventStore, MemoryStore


@pytest.fixture
def config(tmp_path):
    """Config pinned to UTC and writing under tmp_path."""
    return CalendarConfig(
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "logs",
        timezone="UTC",
        base_url="http://cal.example/",
    )


@pytest.fixture
def kv():
    return MemoryStore()


@pytest.fixture
def store(kv, config):
    return EventStore(kv, key=config.storage_key, share_param=config.share_param)


@pytest.fixture
def sync_event():
    """The 'Sync' event: 2024-03-15 09:00 UTC for 30 minutes."""
    return Event(
        id="sync001",
        title="Sync",
        start=datetime(2024, 3, 15, 9, 0, tzinfo=timezone.utc),
        duration=30,
        description="Weekly sync",
        attendees=["ana@example.com", "peter@example.com"],
    )


@pytest.fixture
def app(config, kv):
    """Create and configure a Flask app for testing."""
    app = create_app(config, kv)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
