"""
Settings
Configuration management for semver-kiwi.

Importing the library never touches .env files; applications that want one
honoured call ConfigManager.get_instance().load() themselves.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


LOG_LEVEL_ENV = "SEMVER_KIWI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Library configuration."""
    log_level: str = DEFAULT_LOG_LEVEL


def config_from_environ() -> Config:
    """Build a Config from os.environ as it stands."""
    return Config(log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self) -> Config:
        """Load configuration from a .env file (if present) and the environment."""
        load_dotenv()
        self._config = config_from_environ()
        return self._config

    def get(self) -> Config:
        """Get current configuration, read from os.environ if load() hasn't run."""
        if self._config is None:
            self._config = config_from_environ()
        return self._config
