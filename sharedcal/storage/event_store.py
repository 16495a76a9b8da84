"""State store: loads and persists the event list."""

import json
import logging

from pydantic import ValidationError

from sharedcal.constants import SHARE_PARAM, STORAGE_KEY
from sharedcal.exceptions import SnapshotDecodeError, StorageError
from sharedcal.models.event import Event, ensure_unique_ids
from sharedcal.snapshot import decode_snapshot, shared_payload
from sharedcal.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class EventStore:
    """Bootstraps the event list and writes it back after every change.

    Usage:
        store = EventStore(JSONFileStore(config.data_dir))
        events = store.load(request_url)
        ...
        store.persist(events)
    """

    def __init__(
        self,
        kv: KeyValueStore,
        key: str = STORAGE_KEY,
        share_param: str = SHARE_PARAM,
    ):
        """
        Initialize EventStore.

        Args:
            kv: Local persistent key/value store
            key: Namespaced key holding the serialized event list
            share_param: URL query parameter carrying a shared snapshot
        """
        self.kv = kv
        self.key = key
        self.share_param = share_param
        self.loaded_from_snapshot = False

    def load(self, url: str | None = None) -> list[Event]:
        """
        Load the event list.

        A shared snapshot in ``url`` wins over local storage. A malformed
        snapshot is logged and ignored. Missing or corrupt local data yields
        an empty list. Never raises.

        Args:
            url: Current URL, checked for the share parameter

        Returns:
            List of events
        """
        self.loaded_from_snapshot = False

        payload = shared_payload(url, self.share_param)
        if payload is not None:
            try:
                events = decode_snapshot(payload)
            except SnapshotDecodeError as e:
                logger.warning(f"Failed to load shared events: {e}")
            else:
                logger.info(f"Loaded {len(events)} events from shared snapshot")
                self.loaded_from_snapshot = True
                return events

        return self._load_local()

    def _load_local(self) -> list[Event]:
        """Read the persisted list, treating any corruption as empty."""
        try:
            raw = self.kv.get(self.key)
        except StorageError as e:
            logger.warning(f"Could not read stored events: {e}")
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Stored events are corrupt, starting empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning("Stored events are not a list, starting empty")
            return []

        events = []
        for index, record in enumerate(data):
            try:
                events.append(Event.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored event #{index}: {e}")

        logger.debug(f"Loaded {len(events)} events from '{self.key}'")
        return ensure_unique_ids(events)

    def persist(self, events: list[Event]) -> None:
        """
        Serialize the full list under the storage key.

        Raises:
            StorageError: If the underlying store cannot be written
        """
        payload = json.dumps(
            [event.to_record() for event in events], ensure_ascii=False, indent=2
        )
        self.kv.set(self.key, payload)
