"""
Configuration Defaults - Single source of truth for all default values.

Every default here is safe for any deployment: the dashboard is read-only
and needs no tenant-specific settings to start.

Organization:
    - AppDefaults: Environment, logging, debug switches
    - DashboardDefaults: Page title, timestamp format, refresh, link templates
    - ListenerDefaults: Stage retention for the live progress listener

Usage:
    from config.defaults import DashboardDefaults

    # In Pydantic Field definitions:
    date_format: str = Field(default=DashboardDefaults.DATE_FORMAT, ...)
"""


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """
    Application-wide defaults.

    Controls debug mode and logging.
    """

    DEBUG_MODE = False
    ENVIRONMENT = "dev"
    LOG_LEVEL = "INFO"


# =============================================================================
# DASHBOARD DEFAULTS
# =============================================================================

class DashboardDefaults:
    """
    Stage dashboard rendering defaults.
    """

    TITLE = "Job Stages"

    # Submission timestamps, e.g. 2026/10/18 14:03:07
    DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
    TIMEZONE = "UTC"

    # HTMX polling interval for the stage tables (0 = no auto-refresh)
    REFRESH_SECONDS = 5

    # Link templates (formatted with str.format)
    STAGE_URL = "/api/stages/stage?id={stage_id}"
    DATASET_URL = "/api/storage/dataset?id={dataset_id}"


# =============================================================================
# LISTENER DEFAULTS
# =============================================================================

class ListenerDefaults:
    """
    Live progress listener defaults.
    """

    # Completed and failed stage lists are each capped at this many entries
    RETAINED_STAGES = 1000
    DEBUG_MODE = False
