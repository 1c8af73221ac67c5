"""
Utils Module
Logging and generic comparison helpers.
"""

from .compare import Predicates, derive_predicates
from .logger import Logger

__all__ = ["Predicates", "derive_predicates", "Logger"]
