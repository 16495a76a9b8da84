import logging

from flask import Flask, Response, jsonify, redirect, render_template_string, request, url_for

from .config import CalendarConfig
from .constants import ICS_CONTENT_TYPE, WEEKDAY_LABELS
from .exceptions import (
    EventNotFoundError,
    FormValidationError,
    SnapshotDecodeError,
    StorageError,
)
from .grid import parse_month, prev_month, next_month
from .models.form import EventForm
from .session import CalendarSession
from .storage import EventStore, JSONFileStore, KeyValueStore
from .web_templates import MONTH_PAGE

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def _form_from_request() -> EventForm:
    """Read event form fields from a JSON body or form post."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise FormValidationError("Expected an object of form fields")
    return EventForm.model_validate(data)


def create_app(
    config: CalendarConfig | None = None, kv: KeyValueStore | None = None
):
    config = config or CalendarConfig.from_env()
    app = Flask(__name__)
    app.config["SHAREDCAL"] = config

    kv = kv or JSONFileStore(config.data_dir)

    def open_session(url: str | None = None) -> CalendarSession:
        # One store per request; its snapshot flag is request-local state
        store = EventStore(kv, key=config.storage_key, share_param=config.share_param)
        session = CalendarSession(store, config)
        session.load(url)
        return session

    def month_arg(session: CalendarSession) -> None:
        month = request.values.get("month")
        if month:
            session.go_to(parse_month(month))

    @app.errorhandler(EventNotFoundError)
    def not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(FormValidationError)
    def bad_form(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(StorageError)
    def storage_failed(e):
        logger.error(f"Storage error: {e}")
        return jsonify({"error": "Could not save the calendar"}), 500

    @app.route("/", methods=["GET"])
    def index():
        """Month view. A shared snapshot in the URL replaces local data."""
        session = open_session(request.url)
        if session.loaded_from_snapshot:
            # Drop the payload so a reload does not import it again
            return redirect(url_for("index"))
        try:
            month_arg(session)
        except ValueError as e:
            return (str(e), 400)

        view_date = session.state.view_date
        tz = session.tz
        return render_template_string(
            MONTH_PAGE,
            config=config,
            view_date=view_date,
            month=view_date.strftime("%Y-%m"),
            prev_month=prev_month(view_date).strftime("%Y-%m"),
            next_month=next_month(view_date).strftime("%Y-%m"),
            weekday_labels=WEEKDAY_LABELS,
            cells=session.day_cells(),
            default_date=session.today().isoformat(),
            local_time=lambda ev: ev.start.astimezone(tz).strftime("%H:%M"),
            share_link=session.share_link(request.url_root),
        )

    @app.route("/events", methods=["POST"])
    def create_event_form():
        session = open_session()
        session.save(_form_from_request())
        return redirect(url_for("index", month=request.form.get("month") or None))

    @app.route("/events/<event_id>/delete", methods=["POST"])
    def delete_event_form(event_id):
        session = open_session()
        if request.form.get("confirm", "").lower() in TRUTHY:
            session.delete(event_id, lambda _prompt: True)
        return redirect(url_for("index", month=request.form.get("month") or None))

    @app.route("/events/<event_id>/invite", methods=["GET"])
    def invite_redirect(event_id):
        """Hand the draft to the default mail client."""
        return redirect(open_session().invite(event_id).url)

    @app.route("/api/events", methods=["GET"])
    def list_events():
        session = open_session()
        return jsonify([event.to_record() for event in session.sorted_events()])

    @app.route("/api/events", methods=["POST"])
    def create_event():
        session = open_session()
        event = session.save(_form_from_request())
        return jsonify(event.to_record()), 201

    @app.route("/api/events/<event_id>", methods=["GET"])
    def get_event(event_id):
        return jsonify(open_session().get(event_id).to_record())

    @app.route("/api/events/<event_id>", methods=["PUT"])
    def update_event(event_id):
        session = open_session()
        session.get(event_id)
        event = session.save(_form_from_request(), editing_id=event_id)
        return jsonify(event.to_record())

    @app.route("/api/events/<event_id>", methods=["DELETE"])
    def delete_event(event_id):
        """Delete requires ?confirm=true; unknown ids are a no-op."""
        if request.args.get("confirm", "").lower() not in TRUTHY:
            return jsonify({"error": "Confirmation required (?confirm=true)"}), 409
        open_session().delete(event_id, lambda _prompt: True)
        return ("", 204)

    @app.route("/api/events/<event_id>/invite", methods=["GET"])
    def invite(event_id):
        draft = open_session().invite(event_id)
        return jsonify(
            {
                "mailto": draft.url,
                "to": draft.recipients,
                "subject": draft.subject,
                "body": draft.body,
            }
        )

    @app.route("/api/grid", methods=["GET"])
    def month_grid():
        session = open_session()
        try:
            month_arg(session)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(
            {
                "month": session.state.view_date.strftime("%Y-%m"),
                "cells": [
                    {
                        "date": cell.day.isoformat(),
                        "in_month": cell.in_month,
                        "is_today": cell.is_today,
                        "events": [event.to_record() for event in cell.events],
                    }
                    for cell in session.day_cells()
                ],
            }
        )

    @app.route("/api/share", methods=["GET"])
    def share():
        return jsonify({"url": open_session().share_link(request.url_root)})

    @app.route("/api/import", methods=["POST"])
    def import_snapshot():
        """Replace the calendar with a snapshot (link or bare payload)."""
        data = request.get_json(silent=True) or {}
        source = data.get("url") or data.get("payload") or ""
        try:
            events = open_session().import_snapshot(source)
        except SnapshotDecodeError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"imported": len(events)})

    @app.route("/calendar.ics", methods=["GET"])
    def export_ics():
        """Serve the calendar document as a download."""
        content = open_session().export_ics()
        return Response(
            content,
            content_type=ICS_CONTENT_TYPE,
            headers={
                "Content-Disposition": f"attachment; filename={config.ics_export_filename}"
            },
        )

    return app
