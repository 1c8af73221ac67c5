"""
Comparator types.

A raw comparator is an optional operator plus a precision level saying how
much of the version was written down. Normalization turns it into canonical
primitives, which are the only thing range evaluation looks at.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from semver_kiwi.version.model import Identifier, Version, VERSION_PREDICATES


class Operator(Enum):
    """Comparator prefixes accepted by the grammar."""
    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    TILDE = "~"
    CARET = "^"


class Operation(Enum):
    """Primitive comparisons a normalized bound can perform."""
    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    @property
    def predicate(self):
        return getattr(VERSION_PREDICATES, self.name.lower())


RELATIONAL = {
    Operator.EQ: Operation.EQ,
    Operator.LT: Operation.LT,
    Operator.GT: Operation.GT,
    Operator.LE: Operation.LE,
    Operator.GE: Operation.GE,
}


@dataclass(frozen=True)
class Unconstrained:
    """No version component given: empty, ``*``, ``x`` or ``X``."""


@dataclass(frozen=True)
class MajorOnly:
    """``1``, ``1.x``, ``1.*.*``."""
    major: int


@dataclass(frozen=True)
class MajorMinor:
    """``1.2``, ``1.2.x``."""
    major: int
    minor: int


@dataclass(frozen=True)
class Full:
    """``1.2.3`` with an optional prerelease."""
    major: int
    minor: int
    patch: int
    prerelease: Tuple[Identifier, ...] = ()


Precision = Union[Unconstrained, MajorOnly, MajorMinor, Full]


@dataclass(frozen=True)
class Comparator:
    """A parsed comparator token, before normalization."""
    operator: Optional[Operator]
    precision: Precision

    def __post_init__(self):
        if self.operator is not None and isinstance(self.precision, Unconstrained):
            raise ValueError(f"operator {self.operator.value!r} requires a major version")


@dataclass(frozen=True)
class Primitive:
    """A canonical bound: one fully specified version and one operation."""
    version: Version
    operation: Operation

    def test(self, version: Version) -> bool:
        return self.operation.predicate(version, self.version)

    def __str__(self) -> str:
        return f"{self.operation.value}{self.version}"


@dataclass(frozen=True)
class Range:
    """
    OR of AND-groups of primitives.

    ``Range(())`` matches nothing; ``Range(((),))`` matches everything.
    """
    groups: Tuple[Tuple[Primitive, ...], ...]

    def __str__(self) -> str:
        return " || ".join(
            " ".join(str(primitive) for primitive in group)
            for group in self.groups
        )
