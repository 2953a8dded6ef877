"""
Configuration package for the Travel Tracker service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SecuritySettings,
    settings,
    get_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SecuritySettings",
    "settings",
    "get_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
