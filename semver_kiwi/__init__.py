"""
semver-kiwi
Semantic version parsing, comparison and range matching.

    >>> from semver_kiwi import satisfies, max_satisfying
    >>> satisfies("1.2.3", "~1.2")
    True
    >>> max_satisfying(["1.2.3", "1.2.4", "1.3.0"], "1.2")
    '1.2.4'
"""

__version__ = "0.1.0"
__package_name__ = "semver-kiwi"

from .api import (
    compare_versions,
    eq,
    filter_satisfying,
    ge,
    gt,
    is_valid_comparator,
    is_valid_range,
    is_valid_version,
    le,
    lt,
    max_satisfying,
    min_satisfying,
    normalize_range,
    satisfies,
    sort_versions,
)
from .comparator import Comparator, Primitive, Range, parse_comparator
from .errors import InvalidComparator, InvalidRange, InvalidVersion, SemverError
from .ranges import parse_range
from .version import Ordering, Version, parse_version

__all__ = [
    "__version__",
    "__package_name__",
    # Validation
    "is_valid_version",
    "is_valid_comparator",
    "is_valid_range",
    # Comparison
    "compare_versions",
    "eq",
    "lt",
    "gt",
    "le",
    "ge",
    "Ordering",
    # Satisfaction / selection
    "satisfies",
    "max_satisfying",
    "min_satisfying",
    "filter_satisfying",
    "sort_versions",
    "normalize_range",
    # Parsing
    "parse_version",
    "parse_comparator",
    "parse_range",
    "Version",
    "Comparator",
    "Primitive",
    "Range",
    # Errors
    "SemverError",
    "InvalidVersion",
    "InvalidComparator",
    "InvalidRange",
]
