"""
Config test fixtures — clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "DASHBOARD_TITLE", "DASHBOARD_DATE_FORMAT", "DASHBOARD_TIMEZONE",
        "DASHBOARD_REFRESH_SECONDS", "DASHBOARD_STAGE_URL", "DASHBOARD_DATASET_URL",
        "LISTENER_RETAINED_STAGES", "LISTENER_DEBUG_MODE",
        "ENVIRONMENT", "LOG_LEVEL", "DEBUG_MODE",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
