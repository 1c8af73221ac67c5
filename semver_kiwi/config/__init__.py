"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, LOG_LEVEL_ENV, config_from_environ

__all__ = [
    "ConfigManager",
    "Config",
    "LOG_LEVEL_ENV",
    "config_from_environ",
]
