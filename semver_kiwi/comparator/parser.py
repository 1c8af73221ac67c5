"""
Comparator grammar.

[PREFIX][MAJOR[.MINOR[.PATCH[-PRERELEASE]]]][+BUILD] where PREFIX is one of
=, <, >, <=, >=, ~, ^ and each numeric part may instead be a wildcard
(*, x, X). Once a part is a wildcard, no later part may be a number and no
prerelease may follow.
"""

import re
from typing import List, Optional, Tuple

from semver_kiwi.comparator.model import (
    Comparator,
    Full,
    MajorMinor,
    MajorOnly,
    Operator,
    Precision,
    Unconstrained,
)
from semver_kiwi.errors import InvalidComparator
from semver_kiwi.version.parser import IDENTIFIERS, NUMBER, parse_identifiers


WILDCARDS = ("*", "x", "X")

COMPARATOR_RE = re.compile(
    r"(?P<operator><=|>=|<|>|=|~|\^)?"
    r"(?P<parts>[0-9xX*.]*)"
    rf"(?:-(?P<prerelease>{IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{IDENTIFIERS}))?"
)

_NUMBER = re.compile(NUMBER)

# (operator, numeric parts up to the first wildcard, prerelease text)
Decomposed = Tuple[Optional[Operator], List[int], Optional[str]]


def _decompose(text) -> Optional[Decomposed]:
    """Split a comparator into its pieces, or None if it breaks the grammar."""
    if not isinstance(text, str):
        return None
    match = COMPARATOR_RE.fullmatch(text)
    if not match:
        return None

    parts_text = match.group("parts")
    parts = parts_text.split(".") if parts_text else []
    if len(parts) > 3:
        return None

    numbers: List[int] = []
    wildcard_seen = False
    for part in parts:
        if part in WILDCARDS:
            wildcard_seen = True
        elif _NUMBER.fullmatch(part) and not wildcard_seen:
            numbers.append(int(part))
        else:
            # empty component, number after a wildcard, or junk like "xx"
            return None

    prerelease = match.group("prerelease")
    if prerelease is not None and len(numbers) < 3:
        return None

    operator_text = match.group("operator")
    operator = Operator(operator_text) if operator_text else None
    if operator is not None and not numbers:
        return None

    return operator, numbers, prerelease


def is_valid_comparator(text) -> bool:
    """Check a single comparator token against the grammar."""
    return _decompose(text) is not None


def _precision(numbers: List[int], prerelease: Optional[str]) -> Precision:
    if not numbers:
        return Unconstrained()
    if len(numbers) == 1:
        return MajorOnly(numbers[0])
    if len(numbers) == 2:
        return MajorMinor(numbers[0], numbers[1])
    return Full(numbers[0], numbers[1], numbers[2], parse_identifiers(prerelease))


def parse_comparator(text: str) -> Comparator:
    """Parse one comparator token, raising InvalidComparator if it is malformed."""
    decomposed = _decompose(text)
    if decomposed is None:
        raise InvalidComparator(text)
    operator, numbers, prerelease = decomposed
    return Comparator(operator, _precision(numbers, prerelease))
