"""Storage layer for the event list."""

from sharedcal.storage.base import KeyValueStore
from sharedcal.storage.event_store import EventStore
from sharedcal.storage.file_store import JSONFileStore, MemoryStore

__all__ = [
    "KeyValueStore",
    "EventStore",
    "JSONFileStore",
    "MemoryStore",
]
