"""
Version model and ordering.

A parsed version plus the total order used everywhere else: major, minor and
patch compare as integers, then prerelease identifiers decide. A release
(no prerelease) outranks any prerelease of the same major.minor.patch.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Tuple, Union

from semver_kiwi.utils.compare import derive_predicates


Identifier = Union[int, str]


class Ordering(IntEnum):
    """Result of a three-way comparison."""
    LT = -1
    EQ = 0
    GT = 1


def _cmp(a, b) -> Ordering:
    if a < b:
        return Ordering.LT
    if a > b:
        return Ordering.GT
    return Ordering.EQ


def compare_identifiers(a: Identifier, b: Identifier) -> Ordering:
    """Compare two prerelease identifiers; numeric always sorts first."""
    a_num = isinstance(a, int)
    b_num = isinstance(b, int)
    if a_num and not b_num:
        return Ordering.LT
    if b_num and not a_num:
        return Ordering.GT
    return _cmp(a, b)


def compare_prerelease(a: Tuple[Identifier, ...], b: Tuple[Identifier, ...]) -> Ordering:
    """
    Compare prerelease sequences.

    An empty sequence is a release and sorts after everything else. Between
    two non-empty sequences the first differing identifier decides, and a
    strict prefix sorts lower.
    """
    if not a and not b:
        return Ordering.EQ
    if not a:
        return Ordering.GT
    if not b:
        return Ordering.LT

    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result != Ordering.EQ:
            return result
    return _cmp(len(a), len(b))


@total_ordering
@dataclass(frozen=True)
class Version:
    """A fully specified version. Build metadata is never stored."""
    major: int
    minor: int
    patch: int
    prerelease: Tuple[Identifier, ...] = ()

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return core + "-" + ".".join(str(p) for p in self.prerelease)
        return core

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == Ordering.LT

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def bump_major(self) -> "Version":
        return Version(self.major + 1, 0, 0)

    def bump_minor(self) -> "Version":
        return Version(self.major, self.minor + 1, 0)

    def bump_patch(self) -> "Version":
        return Version(self.major, self.minor, self.patch + 1)


def compare(v1: Version, v2: Version) -> Ordering:
    """Three-way comparison of two versions."""
    result = _cmp(
        (v1.major, v1.minor, v1.patch),
        (v2.major, v2.minor, v2.patch),
    )
    if result != Ordering.EQ:
        return result
    return compare_prerelease(v1.prerelease, v2.prerelease)


VERSION_PREDICATES = derive_predicates(compare)
