"""
Satisfaction and selection over parsed values.

String validation happens in semver_kiwi.api; everything here takes
Version and Range objects. The selection helpers accept an optional ``key``
so callers can carry the original text alongside each parsed Version.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence

from semver_kiwi.comparator.model import Range
from semver_kiwi.version.model import Version


VersionKey = Optional[Callable[[Any], Version]]


def satisfies(version: Version, range_: Range) -> bool:
    """True if every primitive of at least one AND-group holds for version."""
    for group in range_.groups:
        if all(primitive.test(version) for primitive in group):
            return True
    return False


def sort_versions(items: Iterable[Any], reverse: bool = False, key: VersionKey = None) -> List[Any]:
    """Stable sort by version precedence."""
    return sorted(items, key=key, reverse=reverse)


def _first_satisfying(ordered: Sequence[Any], range_: Range, key: VersionKey) -> Optional[Any]:
    for item in ordered:
        version = key(item) if key else item
        if satisfies(version, range_):
            return item
    return None


def max_satisfying(items: Iterable[Any], range_: Range, key: VersionKey = None) -> Optional[Any]:
    """Highest version satisfying the range, or None."""
    ordered = sort_versions(items, key=key)
    return _first_satisfying(ordered[::-1], range_, key)


def min_satisfying(items: Iterable[Any], range_: Range, key: VersionKey = None) -> Optional[Any]:
    """Lowest version satisfying the range, or None."""
    return _first_satisfying(sort_versions(items, key=key), range_, key)


def filter_satisfying(items: Iterable[Any], range_: Range, key: VersionKey = None) -> List[Any]:
    """All versions satisfying the range, in input order."""
    return [item for item in items if satisfies(key(item) if key else item, range_)]
