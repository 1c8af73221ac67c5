"""
Shared pytest fixtures for semver-kiwi tests.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def mock_config():
    """
    Standard mock configuration for all tests.
    """
    from semver_kiwi.config.settings import Config

    config = Mock(spec=Config)
    config.log_level = "DEBUG"
    return config


@pytest.fixture
def fresh_config_manager():
    """
    Reset the ConfigManager singleton around a test.
    """
    from semver_kiwi.config.settings import ConfigManager

    saved = ConfigManager._instance
    ConfigManager._instance = None
    yield ConfigManager
    ConfigManager._instance = saved
