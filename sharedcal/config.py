"""Configuration for the shared calendar."""

import os
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from sharedcal.constants import (
    DEFAULT_DURATION,
    DEFAULT_TIME,
    ICS_EXPORT_FILENAME,
    PLACEHOLDER_TITLE,
    SHARE_LINK_WARN_LENGTH,
    SHARE_PARAM,
    STORAGE_KEY,
    UID_DOMAIN,
)


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Storage paths
    data_dir: Path = Field(default=Path("data"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    storage_key: str = Field(default=STORAGE_KEY)
    ics_export_filename: str = Field(default=ICS_EXPORT_FILENAME)
    log_filename: str = Field(default="sharedcal.log")

    # Sharing
    base_url: str = Field(default="http://localhost:5000/")
    share_param: str = Field(default=SHARE_PARAM)
    share_link_warn_length: int = Field(default=SHARE_LINK_WARN_LENGTH, ge=1)

    # Export
    uid_domain: str = Field(default=UID_DOMAIN)
    prodid: str = Field(default="-//SharedCalendar/1.0//EN")
    calendar_name: str = Field(default="Shared Calendar")

    # Form defaults
    timezone: str | None = None
    default_time: str = Field(default=DEFAULT_TIME)
    default_duration: int = Field(default=DEFAULT_DURATION, ge=1)
    placeholder_title: str = Field(default=PLACEHOLDER_TITLE)

    def get_timezone(self) -> tzinfo | None:
        """Resolve the configured timezone.

        Returns None when unset, which callers treat as the system local zone.
        """
        if self.timezone:
            return ZoneInfo(self.timezone)
        return None

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "SHAREDCAL_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["SHAREDCAL_DATA_DIR"])
        if "SHAREDCAL_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["SHAREDCAL_LOG_DIR"])

        if "SHAREDCAL_STORAGE_KEY" in os.environ:
            config_dict["storage_key"] = os.environ["SHAREDCAL_STORAGE_KEY"]

        # Sharing
        if "SHAREDCAL_BASE_URL" in os.environ:
            config_dict["base_url"] = os.environ["SHAREDCAL_BASE_URL"]

        if "SHAREDCAL_TIMEZONE" in os.environ:
            config_dict["timezone"] = os.environ["SHAREDCAL_TIMEZONE"]

        # Integer settings
        for env_name, field_name in (
            ("SHAREDCAL_DEFAULT_DURATION", "default_duration"),
            ("SHAREDCAL_SHARE_WARN_LENGTH", "share_link_warn_length"),
        ):
            if env_name in os.environ:
                try:
                    config_dict[field_name] = int(os.environ[env_name])
                except ValueError:
                    pass  # Keep default if invalid

        return cls(**config_dict)
