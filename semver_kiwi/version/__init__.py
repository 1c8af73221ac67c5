"""
Version Module
Parsed versions, their ordering and the version grammar.
"""

from .model import (
    Ordering,
    Version,
    VERSION_PREDICATES,
    compare,
    compare_identifiers,
    compare_prerelease,
)
from .parser import is_valid_version, parse_version

__all__ = [
    "Ordering",
    "Version",
    "VERSION_PREDICATES",
    "compare",
    "compare_identifiers",
    "compare_prerelease",
    "is_valid_version",
    "parse_version",
]
