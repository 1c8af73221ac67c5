"""
Ranges Module
Range composition, satisfaction and selection.
"""

from .composer import is_valid_range, parse_range, split_range
from .satisfaction import (
    filter_satisfying,
    max_satisfying,
    min_satisfying,
    satisfies,
    sort_versions,
)

__all__ = [
    # Composition
    "is_valid_range",
    "parse_range",
    "split_range",
    # Satisfaction
    "satisfies",
    "max_satisfying",
    "min_satisfying",
    "filter_satisfying",
    "sort_versions",
]
