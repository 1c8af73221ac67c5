"""
Public API
String-facing entry points: validation, comparison, satisfaction and selection.

Every function validates its string inputs before doing any comparison and
raises InvalidVersion / InvalidRange on the first bad one. Already-parsed
Version and Range values are accepted wherever a string is.
"""

import logging
from operator import itemgetter
from typing import Iterable, List, Optional, Tuple, Union

from semver_kiwi.comparator.model import Range
from semver_kiwi.comparator.parser import is_valid_comparator
from semver_kiwi.config import ConfigManager
from semver_kiwi.errors import SemverError
from semver_kiwi.ranges import composer, satisfaction
from semver_kiwi.ranges.composer import is_valid_range
from semver_kiwi.utils.compare import derive_predicates
from semver_kiwi.utils.logger import Logger
from semver_kiwi.version.model import Ordering, Version, compare
from semver_kiwi.version.parser import is_valid_version, parse_version

logger = Logger("semver-kiwi", level=ConfigManager.get_instance().get().log_level)

VersionLike = Union[str, Version]
RangeLike = Union[str, Range]

__all__ = [
    "is_valid_version",
    "is_valid_comparator",
    "is_valid_range",
    "compare_versions",
    "eq",
    "lt",
    "gt",
    "le",
    "ge",
    "satisfies",
    "max_satisfying",
    "min_satisfying",
    "filter_satisfying",
    "sort_versions",
    "normalize_range",
]


def _version(value: VersionLike) -> Version:
    if isinstance(value, Version):
        return value
    try:
        return parse_version(value)
    except SemverError as e:
        logger.debug(str(e))
        raise


def _range(value: RangeLike) -> Range:
    if isinstance(value, Range):
        return value
    try:
        return composer.parse_range(value)
    except SemverError as e:
        logger.debug(str(e))
        raise


def _candidates(versions: Iterable[VersionLike]) -> List[Tuple[VersionLike, Version]]:
    """Parse every candidate up front, keeping the original value next to it."""
    return [(value, _version(value)) for value in versions]


def compare_versions(a: VersionLike, b: VersionLike) -> Ordering:
    """Three-way comparison of two versions (LT, EQ or GT)."""
    return compare(_version(a), _version(b))


eq, lt, gt, le, ge = derive_predicates(compare, adapt=_version)


def satisfies(version: VersionLike, range_: RangeLike) -> bool:
    """
    Check whether a version satisfies a range.

    Examples:
        satisfies("1.2.3", "^1.2.3+build")  # True
        satisfies("1.99.99", "<=2.0.0")     # True
        satisfies("1.3.0", "~1.2.3")        # False
    """
    parsed_version = _version(version)
    parsed_range = _range(range_)
    return satisfaction.satisfies(parsed_version, parsed_range)


def max_satisfying(versions: Iterable[VersionLike], range_: RangeLike) -> Optional[VersionLike]:
    """
    Highest candidate satisfying the range.

    Returns the candidate exactly as it was passed in (build metadata
    included), or None if the list is empty or nothing matches.
    """
    candidates = _candidates(versions)
    parsed_range = _range(range_)
    best = satisfaction.max_satisfying(candidates, parsed_range, key=itemgetter(1))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"max_satisfying {range_!s}: {best[0] if best else None} of {len(candidates)} candidates")
    return best[0] if best else None


def min_satisfying(versions: Iterable[VersionLike], range_: RangeLike) -> Optional[VersionLike]:
    """Lowest candidate satisfying the range, or None."""
    candidates = _candidates(versions)
    parsed_range = _range(range_)
    best = satisfaction.min_satisfying(candidates, parsed_range, key=itemgetter(1))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"min_satisfying {range_!s}: {best[0] if best else None} of {len(candidates)} candidates")
    return best[0] if best else None


def filter_satisfying(versions: Iterable[VersionLike], range_: RangeLike) -> List[VersionLike]:
    """Every candidate satisfying the range, in input order."""
    candidates = _candidates(versions)
    parsed_range = _range(range_)
    matched = satisfaction.filter_satisfying(candidates, parsed_range, key=itemgetter(1))
    return [value for value, _ in matched]


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> List[VersionLike]:
    """Sort candidates by version precedence; ties keep their input order."""
    candidates = _candidates(versions)
    ordered = satisfaction.sort_versions(candidates, reverse=reverse, key=itemgetter(1))
    return [value for value, _ in ordered]


def normalize_range(range_: RangeLike) -> str:
    """Canonical primitive form of a range, e.g. "~1.2" -> ">=1.2.0 <1.3.0"."""
    return str(_range(range_))
