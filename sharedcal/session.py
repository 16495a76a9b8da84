"""Calendar session: state transitions with persistence after each change."""

import logging
from datetime import date, datetime

from sharedcal import form as form_controller
from sharedcal import grid
from sharedcal.config import CalendarConfig
from sharedcal.exceptions import EventNotFoundError, SnapshotDecodeError
from sharedcal.form import ConfirmFn
from sharedcal.models.event import Event, sort_events
from sharedcal.models.form import EventForm
from sharedcal.models.state import CalendarState
from sharedcal.output.ics_writer import ICSWriter
from sharedcal.output.mail import MailDraft, compose_invite
from sharedcal.output.share_link import make_share_link
from sharedcal.snapshot import decode_snapshot, shared_payload
from sharedcal.storage.event_store import EventStore

logger = logging.getLogger(__name__)


# Pure transitions on CalendarState


def open_create_modal(
    state: CalendarState, date_iso: str, config: CalendarConfig
) -> CalendarState:
    return state.model_copy(
        update={
            "modal_open": True,
            "editing_id": None,
            "form": form_controller.open_create(date_iso, config),
        }
    )


def open_edit_modal(state: CalendarState, event: Event, tz=None) -> CalendarState:
    return state.model_copy(
        update={
            "modal_open": True,
            "editing_id": event.id,
            "form": form_controller.open_edit(event, tz),
        }
    )


def close_modal(state: CalendarState) -> CalendarState:
    return state.model_copy(
        update={"modal_open": False, "editing_id": None, "form": EventForm()}
    )


def navigate(state: CalendarState, months: int) -> CalendarState:
    return state.model_copy(
        update={"view_date": grid.shift_month(state.view_date, months)}
    )


def replace_events(state: CalendarState, events: list[Event]) -> CalendarState:
    return state.model_copy(update={"events": list(events)})


class CalendarSession:
    """Drives a CalendarState and persists the event list after every change.

    Usage:
        session = CalendarSession(EventStore(JSONFileStore(config.data_dir)), config)
        session.load(url)
        session.open_create("2024-03-15")
        session.save(EventForm(title="Sync", date="2024-03-15", time="09:00"))
    """

    def __init__(
        self,
        store: EventStore,
        config: CalendarConfig | None = None,
        state: CalendarState | None = None,
    ):
        """
        Initialize CalendarSession.

        Args:
            store: State store used for load and persist
            config: Calendar configuration
            state: Starting state (empty calendar on today's month if None)
        """
        self.store = store
        self.config = config or CalendarConfig()
        self.tz = self.config.get_timezone()
        self.state = state or CalendarState(view_date=self.today())
        self.loaded_from_snapshot = False

    @property
    def events(self) -> list[Event]:
        return self.state.events

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def _commit(self, events: list[Event]) -> None:
        """Adopt a new event list, then write it out."""
        self.state = replace_events(self.state, events)
        self.store.persist(self.state.events)

    def load(self, url: str | None = None) -> CalendarState:
        """
        Bootstrap the event list from a shared snapshot in url or from storage.

        A snapshot replaces local data and is persisted straight away;
        loaded_from_snapshot records which source this load used.
        """
        events = self.store.load(url)
        self.loaded_from_snapshot = self.store.loaded_from_snapshot
        if self.loaded_from_snapshot:
            self._commit(events)
        else:
            self.state = replace_events(self.state, events)
        return self.state

    def import_snapshot(self, url_or_payload: str) -> list[Event]:
        """
        Replace the calendar with a shared snapshot.

        Accepts a full share link or the bare payload.

        Raises:
            SnapshotDecodeError: If no valid snapshot can be decoded
        """
        payload = shared_payload(url_or_payload, self.config.share_param)
        if payload is None:
            if "://" in url_or_payload:
                raise SnapshotDecodeError(
                    f"Link has no '{self.config.share_param}' parameter"
                )
            payload = url_or_payload
        events = decode_snapshot(payload)
        self._commit(events)
        logger.info(f"Imported {len(events)} events from snapshot")
        return events

    def get(self, event_id: str) -> Event:
        """
        Look up an event.

        Raises:
            EventNotFoundError: If no event has that id
        """
        event = self.state.find(event_id)
        if event is None:
            raise EventNotFoundError(f"Event '{event_id}' not found")
        return event

    def sorted_events(self) -> list[Event]:
        return sort_events(self.state.events)

    # Modal

    def open_create(self, date_iso: str | None = None) -> EventForm:
        date_iso = date_iso or self.today().isoformat()
        self.state = open_create_modal(self.state, date_iso, self.config)
        return self.state.form

    def open_edit(self, event_id: str) -> EventForm:
        self.state = open_edit_modal(self.state, self.get(event_id), self.tz)
        return self.state.form

    def close(self) -> None:
        self.state = close_modal(self.state)

    def save(
        self, form: EventForm | None = None, editing_id: str | None = None
    ) -> Event:
        """
        Save form input as a new or updated event and close the modal.

        Uses the open modal's form and editing id when not given explicitly.

        Raises:
            FormValidationError: If the date or time cannot be parsed
        """
        if form is None:
            form = self.state.form
            editing_id = editing_id or self.state.editing_id
        events, event = form_controller.save(
            self.state.events, form, editing_id, self.tz, self.config
        )
        self._commit(events)
        self.close()
        return event

    def delete(self, event_id: str, confirm: ConfirmFn) -> bool:
        """
        Delete an event after confirmation.

        Returns:
            True if an event was removed
        """
        before = len(self.state.events)
        events = form_controller.delete(self.state.events, event_id, confirm)
        if len(events) == before:
            return False
        self._commit(events)
        if self.state.editing_id == event_id:
            self.close()
        return True

    # Navigation

    def prev_month(self) -> date:
        self.state = navigate(self.state, -1)
        return self.state.view_date

    def next_month(self) -> date:
        self.state = navigate(self.state, 1)
        return self.state.view_date

    def go_today(self) -> date:
        self.state = self.state.model_copy(update={"view_date": self.today()})
        return self.state.view_date

    def go_to(self, reference: date) -> date:
        self.state = self.state.model_copy(update={"view_date": reference})
        return self.state.view_date

    # Views and exports

    def day_cells(self, today: date | None = None) -> list[grid.DayCell]:
        return grid.build_day_cells(
            self.state.view_date, self.state.events, self.tz, today or self.today()
        )

    def events_for_day(self, day: date) -> list[Event]:
        return grid.events_for_day(day, self.state.events, self.tz)

    def share_link(self, base_url: str | None = None) -> str:
        return make_share_link(
            self.state.events,
            base_url or self.config.base_url,
            self.config.share_param,
            self.config.share_link_warn_length,
        )

    def export_ics(self, now: datetime | None = None) -> bytes:
        return ICSWriter(self.config).to_ical(self.sorted_events(), now)

    def invite(self, event_id: str) -> MailDraft:
        return compose_invite(self.get(event_id), self.tz)
