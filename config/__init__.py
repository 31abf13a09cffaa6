# ============================================================================
# CONFIG PACKAGE INIT
# ============================================================================
# STATUS: Configuration package exports and singleton
# PURPOSE: Single entry point for all configuration access
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: AppConfig, DashboardConfig, ListenerConfig, get_config, reset_config, debug_config
# DEPENDENCIES: pydantic, domain config modules
# ============================================================================

"""
Configuration Package - Domain-Specific Configuration Modules

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── dashboard_config.py      # Page rendering settings
    ├── listener_config.py       # Progress listener retention
    └── defaults.py              # Default values

Usage:
    # Singleton pattern (preferred)
    from config import get_config
    config = get_config()
    fmt = config.dashboard.date_format

    # Debug output
    from config import debug_config
    info = debug_config()
"""

from typing import Optional

from util_logger import ComponentType, LoggerFactory
from .dashboard_config import DashboardConfig
from .listener_config import ListenerConfig
from .app_config import AppConfig

__version__ = "0.7.0"


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
        LoggerFactory.create_logger(ComponentType.CONFIG, "config").info(
            "Configuration loaded",
            extra={'custom_dimensions': {
                'environment': _config_instance.environment,
                'refresh_seconds': _config_instance.dashboard.refresh_seconds,
                'retained_stages': _config_instance.listener.retained_stages,
            }}
        )
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get configuration for debugging.

    Returns:
        Dictionary with configuration values, or an error entry if the
        environment does not validate
    """
    try:
        config = get_config()
        return {
            'dashboard': config.dashboard.debug_dict(),
            'listener': config.listener.debug_dict(),
            'debug_mode': config.debug_mode,
            'environment': config.environment,
            'log_level': config.log_level,
        }
    except Exception as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    '__version__',
    'AppConfig',
    'DashboardConfig',
    'ListenerConfig',
    'get_config',
    'reset_config',
    'debug_config',
]
