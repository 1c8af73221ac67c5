"""
Range composition.

Comparators separated by whitespace are ANDed into one group; groups
separated by ``||`` are ORed. An empty group means "no constraint".
"""

import re
from typing import List

from semver_kiwi.comparator.model import Primitive, Range
from semver_kiwi.comparator.normalizer import normalize
from semver_kiwi.comparator.parser import is_valid_comparator, parse_comparator
from semver_kiwi.errors import InvalidComparator, InvalidRange


OR_SEPARATOR = "||"

_WHITESPACE = re.compile(r"\s+")


def split_range(text: str) -> List[List[str]]:
    """
    Split a range into OR-groups of comparator tokens.

    A group without tokens becomes ``[""]``, the empty comparator.
    """
    groups = []
    for group in text.split(OR_SEPARATOR):
        tokens = [token for token in _WHITESPACE.split(group) if token]
        groups.append(tokens or [""])
    return groups


def is_valid_range(text) -> bool:
    """Check that every comparator token of every group is valid."""
    if not isinstance(text, str):
        return False
    return all(
        is_valid_comparator(token)
        for group in split_range(text)
        for token in group
    )


def parse_range(text: str) -> Range:
    """Parse a range string into its canonical OR-of-AND form."""
    if not isinstance(text, str):
        raise InvalidRange(text)

    groups = []
    for tokens in split_range(text):
        group: List[Primitive] = []
        for token in tokens:
            try:
                comparator = parse_comparator(token)
            except InvalidComparator as e:
                raise InvalidRange(text, f"bad comparator {token!r}") from e
            # a normalized comparator always has exactly one group
            group.extend(normalize(comparator).groups[0])
        groups.append(tuple(group))
    return Range(tuple(groups))
