"""Shared constants for the shared calendar."""

# Namespaced key holding the serialized event list
STORAGE_KEY = "shared_calendar_events_v1"

# Query parameter carrying a shared snapshot
SHARE_PARAM = "shared"

# Share links longer than this log a warning
SHARE_LINK_WARN_LENGTH = 2000

# Calendar export
ICS_EXPORT_FILENAME = "shared-calendar.ics"
ICS_CONTENT_TYPE = "text/calendar; charset=utf-8"
UID_DOMAIN = "sharedcalendar.local"

# Form defaults
DEFAULT_TIME = "09:00"
DEFAULT_DURATION = 60
# Longest accepted duration in minutes (one year)
MAX_DURATION = 366 * 24 * 60
PLACEHOLDER_TITLE = "(untitled)"

# Month grid
GRID_CELLS = 42
MAX_EVENTS_PER_CELL = 4
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
