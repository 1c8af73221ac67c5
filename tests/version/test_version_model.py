"""Tests for the version model and its ordering."""

import itertools

import pytest
from semver_kiwi.version.model import (
    Ordering,
    Version,
    VERSION_PREDICATES,
    compare,
    compare_identifiers,
    compare_prerelease,
)


class TestCompareIdentifiers:
    """Test single prerelease identifier comparison."""

    def test_numeric_before_alphanumeric(self):
        """Should sort a numeric identifier before any alphanumeric one."""
        assert compare_identifiers(999, "a") == Ordering.LT
        assert compare_identifiers("a", 0) == Ordering.GT

    def test_numeric_by_value(self):
        """Should compare numbers numerically, not as text."""
        assert compare_identifiers(2, 10) == Ordering.LT

    def test_alphanumeric_ascii(self):
        """Should compare strings by ASCII order."""
        assert compare_identifiers("alpha", "beta") == Ordering.LT
        assert compare_identifiers("Z", "a") == Ordering.LT
        assert compare_identifiers("rc", "rc") == Ordering.EQ


class TestComparePrerelease:
    """Test prerelease sequence comparison."""

    def test_release_after_prerelease(self):
        """Should rank an empty prerelease (a release) highest."""
        assert compare_prerelease((), ("pre", 1)) == Ordering.GT
        assert compare_prerelease(("pre", 1), ()) == Ordering.LT
        assert compare_prerelease((), ()) == Ordering.EQ

    def test_prefix_sorts_lower(self):
        """Should rank a strict prefix below the longer sequence."""
        assert compare_prerelease(("pre",), ("pre", 1)) == Ordering.LT

    def test_first_difference_decides(self):
        """Should stop at the first differing identifier."""
        assert compare_prerelease(("pre", 1, "z"), ("pre", 2)) == Ordering.LT
        assert compare_prerelease(("pre", 1), ("pre", "a")) == Ordering.LT


class TestVersion:
    """Test Version values."""

    def test_str(self):
        """Should render MAJOR.MINOR.PATCH with optional prerelease."""
        assert str(Version(1, 2, 3)) == "1.2.3"
        assert str(Version(1, 2, 3, ("beta", 2))) == "1.2.3-beta.2"

    def test_immutable(self):
        """Should reject attribute assignment."""
        version = Version(1, 2, 3)
        with pytest.raises(AttributeError):
            version.major = 2

    def test_hashable(self):
        """Should be usable as a set member."""
        assert len({Version(1, 0, 0), Version(1, 0, 0), Version(1, 0, 1)}) == 2

    def test_rich_comparison(self):
        """Should support operators through the version ordering."""
        assert Version(1, 2, 3, ("pre",)) < Version(1, 2, 3)
        assert Version(2, 0, 0) > Version(1, 99, 99)
        assert Version(1, 2, 3) >= Version(1, 2, 3)
        assert Version(1, 2, 3) == Version(1, 2, 3)

    def test_bumps_drop_prerelease(self):
        """Should bump the requested component and reset what follows."""
        version = Version(1, 2, 3, ("rc", 1))
        assert version.bump_major() == Version(2, 0, 0)
        assert version.bump_minor() == Version(1, 3, 0)
        assert version.bump_patch() == Version(1, 2, 4)

    def test_is_prerelease(self):
        """Should report whether a prerelease is present."""
        assert Version(1, 0, 0, ("a",)).is_prerelease is True
        assert Version(1, 0, 0).is_prerelease is False


class TestCompare:
    """Test the total order over versions."""

    SAMPLE = [
        Version(0, 0, 0),
        Version(0, 0, 1),
        Version(1, 0, 0, ("alpha",)),
        Version(1, 0, 0, ("alpha", 1)),
        Version(1, 0, 0, ("alpha", "beta")),
        Version(1, 0, 0, ("beta", 2)),
        Version(1, 0, 0, ("beta", 11)),
        Version(1, 0, 0, ("rc", 1)),
        Version(1, 0, 0),
        Version(1, 2, 0),
        Version(1, 10, 0),
        Version(2, 0, 0),
    ]

    def test_components_in_order(self):
        """Should compare major, then minor, then patch."""
        assert compare(Version(1, 9, 9), Version(2, 0, 0)) == Ordering.LT
        assert compare(Version(1, 10, 0), Version(1, 9, 99)) == Ordering.GT
        assert compare(Version(1, 2, 4), Version(1, 2, 3)) == Ordering.GT

    def test_sample_is_strictly_increasing(self):
        """Should order the semver precedence example chain."""
        for lower, higher in zip(self.SAMPLE, self.SAMPLE[1:]):
            assert compare(lower, higher) == Ordering.LT
            assert compare(higher, lower) == Ordering.GT

    def test_reflexive(self):
        """Should compare every version equal to itself."""
        for version in self.SAMPLE:
            assert compare(version, version) == Ordering.EQ

    def test_total_order(self):
        """Should be antisymmetric and transitive."""
        for a, b in itertools.product(self.SAMPLE, repeat=2):
            assert compare(a, b) == -compare(b, a)
        for a, b, c in itertools.combinations(self.SAMPLE, 3):
            assert compare(a, b) == Ordering.LT
            assert compare(b, c) == Ordering.LT
            assert compare(a, c) == Ordering.LT


class TestVersionPredicates:
    """Test the derived predicates for Version values."""

    def test_predicates(self):
        """Should derive all five predicates from compare."""
        low, high = Version(1, 0, 0, ("pre",)), Version(1, 0, 0)

        assert VERSION_PREDICATES.lt(low, high)
        assert VERSION_PREDICATES.le(low, high)
        assert VERSION_PREDICATES.gt(high, low)
        assert VERSION_PREDICATES.ge(high, high)
        assert VERSION_PREDICATES.eq(high, Version(1, 0, 0))
        assert not VERSION_PREDICATES.eq(low, high)
