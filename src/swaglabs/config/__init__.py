"""Configuration module for the Swag Labs suite.

Usage:
    from swaglabs.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)
"""

from swaglabs.config.logging import configure_logging, get_logger, scenario_context
from swaglabs.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings", "scenario_context"]
