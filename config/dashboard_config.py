# ============================================================================
# DASHBOARD CONFIGURATION
# ============================================================================
# STATUS: Configuration - Stage dashboard rendering settings
# PURPOSE: Timestamp format, auto-refresh interval and link templates
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Stage Dashboard Configuration.

Environment Variables:
----------------------
DASHBOARD_TITLE: Page title shown in the header (default: "Job Stages")
DASHBOARD_DATE_FORMAT: strftime format for submission times
    (default: "%Y/%m/%d %H:%M:%S")
DASHBOARD_TIMEZONE: IANA zone used to display timestamps (default: "UTC")
DASHBOARD_REFRESH_SECONDS: HTMX polling interval, 0 disables (default: 5)
DASHBOARD_STAGE_URL: Origin link template, {stage_id} placeholder
DASHBOARD_DATASET_URL: Stored dataset link template, {dataset_id} placeholder

Usage:
------
```python
from config import get_config

config = get_config()
url = config.dashboard.stage_link(3)
```
"""

import os
from datetime import timezone as dt_timezone, tzinfo as TzInfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from exceptions import ConfigurationError
from .defaults import DashboardDefaults


def _parse_int(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _check_template(template: str, placeholder: str) -> str:
    """Format the link template once so a bad placeholder fails at load time."""
    try:
        template.format(**{placeholder: 0})
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(
            f"link template {template!r} may only use the {{{placeholder}}} placeholder"
        ) from e
    return template


class DashboardConfig(BaseModel):
    """
    Stage dashboard rendering configuration.

    Configuration Fields:
    ---------------------
    title: Header and <title> text
    date_format: strftime pattern for submission timestamps
    timezone: IANA zone name used when rendering timestamps
    refresh_seconds: Auto-refresh interval for the stage tables
        - 0 disables polling
        - Range: 0-300 seconds
    stage_url: Origin link template, formatted with stage_id
    dataset_url: Stored dataset link template, formatted with dataset_id
    """

    title: str = Field(
        default=DashboardDefaults.TITLE,
        description="Dashboard page title"
    )

    date_format: str = Field(
        default=DashboardDefaults.DATE_FORMAT,
        description="strftime format for submission timestamps"
    )

    timezone: str = Field(
        default=DashboardDefaults.TIMEZONE,
        description="IANA time zone used to display timestamps"
    )

    refresh_seconds: int = Field(
        default=DashboardDefaults.REFRESH_SECONDS,
        ge=0,
        le=300,
        description=(
            "Seconds between HTMX refreshes of the stage tables. "
            "0 = no auto-refresh."
        )
    )

    stage_url: str = Field(
        default=DashboardDefaults.STAGE_URL,
        description="Origin link template with a {stage_id} placeholder"
    )

    dataset_url: str = Field(
        default=DashboardDefaults.DATASET_URL,
        description="Stored dataset link template with a {dataset_id} placeholder"
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if value == "UTC":
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {value}") from e
        return value

    @field_validator("stage_url")
    @classmethod
    def _stage_url_template(cls, value: str) -> str:
        return _check_template(value, "stage_id")

    @field_validator("dataset_url")
    @classmethod
    def _dataset_url_template(cls, value: str) -> str:
        return _check_template(value, "dataset_id")

    @classmethod
    def from_environment(cls) -> "DashboardConfig":
        """
        Load dashboard configuration from environment variables.

        Returns:
            DashboardConfig: Configured dashboard settings

        Raises:
            ConfigurationError: If an integer setting is not an integer
        """
        return cls(
            title=os.environ.get("DASHBOARD_TITLE", DashboardDefaults.TITLE),
            date_format=os.environ.get("DASHBOARD_DATE_FORMAT", DashboardDefaults.DATE_FORMAT),
            timezone=os.environ.get("DASHBOARD_TIMEZONE", DashboardDefaults.TIMEZONE),
            refresh_seconds=_parse_int("DASHBOARD_REFRESH_SECONDS", DashboardDefaults.REFRESH_SECONDS),
            stage_url=os.environ.get("DASHBOARD_STAGE_URL", DashboardDefaults.STAGE_URL),
            dataset_url=os.environ.get("DASHBOARD_DATASET_URL", DashboardDefaults.DATASET_URL),
        )

    def tzinfo(self) -> TzInfo:
        """Return the configured display zone."""
        if self.timezone == "UTC":
            return dt_timezone.utc
        return ZoneInfo(self.timezone)

    def stage_link(self, stage_id: int) -> str:
        """Origin link for a stage."""
        return self.stage_url.format(stage_id=stage_id)

    def dataset_link(self, dataset_id: int) -> str:
        """Stored dataset link."""
        return self.dataset_url.format(dataset_id=dataset_id)

    def debug_dict(self) -> dict:
        """
        Return debug-friendly configuration dictionary.

        Returns:
            dict: Configuration with all fields visible
        """
        return {
            "title": self.title,
            "date_format": self.date_format,
            "timezone": self.timezone,
            "refresh_seconds": self.refresh_seconds,
            "stage_url": self.stage_url,
            "dataset_url": self.dataset_url,
        }


__all__ = ["DashboardConfig"]
