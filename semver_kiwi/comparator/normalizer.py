"""
Comparator normalization.

Expands a raw comparator into canonical primitive bounds:

    1.2       ->  >=1.2.0 <1.3.0
    ~1.2.3    ->  >=1.2.3 <1.3.0
    ^0.2.5    ->  >=0.2.5 <0.3.0
    ^0.0.5    ->  >=0.0.5 <0.0.6
    >1        ->  >1.0.0
    *         ->  >=0.0.0

The result is always a Range with exactly one AND-group.
"""

from typing import Tuple

from semver_kiwi.comparator.model import (
    RELATIONAL,
    Comparator,
    Full,
    MajorMinor,
    MajorOnly,
    Operation,
    Operator,
    Precision,
    Primitive,
    Range,
    Unconstrained,
)
from semver_kiwi.version.model import Version


ANY = Primitive(Version(0, 0, 0), Operation.GE)

Bounds = Tuple[Primitive, ...]


def _lower(precision: Precision) -> Version:
    """Lowest version the precision admits, missing parts filled with zero."""
    if isinstance(precision, Full):
        return Version(precision.major, precision.minor, precision.patch, precision.prerelease)
    if isinstance(precision, MajorMinor):
        return Version(precision.major, precision.minor, 0)
    if isinstance(precision, MajorOnly):
        return Version(precision.major, 0, 0)
    return Version(0, 0, 0)


def _between(lower: Version, upper: Version) -> Bounds:
    return (Primitive(lower, Operation.GE), Primitive(upper, Operation.LT))


def _implied(precision: Precision) -> Bounds:
    """No operator: equality with open trailing precision."""
    if isinstance(precision, Unconstrained):
        return (ANY,)
    lower = _lower(precision)
    if isinstance(precision, MajorOnly):
        return _between(lower, lower.bump_major())
    if isinstance(precision, MajorMinor):
        return _between(lower, lower.bump_minor())
    return (Primitive(lower, Operation.EQ),)


def _tilde(precision: Precision) -> Bounds:
    """~ allows changes below the most specific component given."""
    lower = _lower(precision)
    if isinstance(precision, MajorOnly):
        return _between(lower, lower.bump_major())
    return _between(lower, lower.bump_minor())


def _caret(precision: Precision) -> Bounds:
    """^ keeps the leftmost non-zero component fixed."""
    lower = _lower(precision)
    if isinstance(precision, MajorOnly):
        return _between(lower, lower.bump_major())
    if isinstance(precision, MajorMinor):
        return _between(lower, lower.bump_minor())
    if lower.major == 0 and lower.minor == 0:
        return _between(lower, lower.bump_patch())
    if lower.major == 0:
        return _between(lower, lower.bump_minor())
    return _between(lower, lower.bump_major())


def normalize(comparator: Comparator) -> Range:
    """Expand a parsed comparator into a single-group Range of primitives."""
    operator = comparator.operator
    precision = comparator.precision

    if operator is None:
        bounds = _implied(precision)
    elif operator is Operator.TILDE:
        bounds = _tilde(precision)
    elif operator is Operator.CARET:
        bounds = _caret(precision)
    else:
        bounds = (Primitive(_lower(precision), RELATIONAL[operator]),)

    return Range((bounds,))
