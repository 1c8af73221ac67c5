"""
Predicate derivation.

Builds the five boolean comparisons (eq, lt, gt, le, ge) from a single
three-way comparison function, so each comparable type only has to
implement ``compare`` once.
"""

from typing import Any, Callable, NamedTuple, Optional


class Predicates(NamedTuple):
    """The five derived comparisons for one comparable type."""
    eq: Callable[[Any, Any], bool]
    lt: Callable[[Any, Any], bool]
    gt: Callable[[Any, Any], bool]
    le: Callable[[Any, Any], bool]
    ge: Callable[[Any, Any], bool]


def derive_predicates(
    compare: Callable[[Any, Any], int],
    adapt: Optional[Callable[[Any], Any]] = None,
) -> Predicates:
    """
    Derive eq/lt/gt/le/ge from a three-way comparison.

    Args:
        compare: Function returning a negative number, zero or a positive
            number (an ``Ordering`` works) for ``a`` vs ``b``
        adapt: Optional function applied to both operands before comparing,
            e.g. parsing a version string into a Version

    Returns:
        Predicates named tuple

    Example:
        preds = derive_predicates(compare, adapt=parse_version)
        preds.lt("1.2.3-pre", "1.2.3")  # True
    """
    def three_way(a: Any, b: Any) -> int:
        if adapt is not None:
            a, b = adapt(a), adapt(b)
        return compare(a, b)

    return Predicates(
        eq=lambda a, b: three_way(a, b) == 0,
        lt=lambda a, b: three_way(a, b) < 0,
        gt=lambda a, b: three_way(a, b) > 0,
        le=lambda a, b: three_way(a, b) <= 0,
        ge=lambda a, b: three_way(a, b) >= 0,
    )
