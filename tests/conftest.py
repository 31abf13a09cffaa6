"""
Root conftest.py — sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without an Azure Functions host.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'core', 'config', 'web_dashboard', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tests.factories.clock import BASE_TIME, FakeClock  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables for config loading.

    Values are deterministic so rendered timestamps and links do not
    depend on the machine running the tests.
    """
    defaults = {
        "ENVIRONMENT": "test",
        "DASHBOARD_TIMEZONE": "UTC",
        "DASHBOARD_REFRESH_SECONDS": "5",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config after each test so env changes never leak."""
    yield
    from config import reset_config
    reset_config()


@pytest.fixture
def clock():
    """A FakeClock starting at BASE_TIME."""
    return FakeClock(BASE_TIME)


@pytest.fixture
def listener_config():
    """Small retention cap so trimming is easy to trigger."""
    from config import ListenerConfig
    return ListenerConfig(retained_stages=10)


@pytest.fixture
def listener(listener_config):
    """A fresh, isolated progress listener."""
    from core.progress_listener import JobProgressListener
    return JobProgressListener(config=listener_config)


@pytest.fixture
def dashboard_config():
    """Dashboard settings with fixed defaults."""
    from config import DashboardConfig
    return DashboardConfig()
