"""
ListenerConfig tests — retention cap and trim size.
"""

import pytest
from pydantic import ValidationError

from config import ListenerConfig
from exceptions import ConfigurationError


class TestListenerConfig:

    def test_defaults(self, clean_env):
        config = ListenerConfig.from_environment()
        assert config.retained_stages == 1000
        assert config.debug_mode is False
        assert config.trim_count == 100

    def test_from_environment(self, clean_env):
        clean_env.setenv("LISTENER_RETAINED_STAGES", "50")
        clean_env.setenv("LISTENER_DEBUG_MODE", "yes")
        config = ListenerConfig.from_environment()
        assert config.retained_stages == 50
        assert config.debug_mode is True
        assert config.trim_count == 5

    def test_trim_count_at_least_one(self):
        assert ListenerConfig(retained_stages=10).trim_count == 1
        assert ListenerConfig(retained_stages=19).trim_count == 1

    def test_non_integer(self, clean_env):
        clean_env.setenv("LISTENER_RETAINED_STAGES", "lots")
        with pytest.raises(ConfigurationError):
            ListenerConfig.from_environment()

    @pytest.mark.parametrize("value", [9, 100001])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError):
            ListenerConfig(retained_stages=value)
