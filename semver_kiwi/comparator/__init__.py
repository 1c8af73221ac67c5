"""
Comparator Module
Comparator grammar, raw/canonical comparator types and normalization.
"""

from .model import (
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
from .normalizer import normalize
from .parser import is_valid_comparator, parse_comparator

__all__ = [
    # Types
    "Comparator",
    "Full",
    "MajorMinor",
    "MajorOnly",
    "Operation",
    "Operator",
    "Precision",
    "Primitive",
    "Range",
    "Unconstrained",
    # Grammar
    "is_valid_comparator",
    "parse_comparator",
    # Normalization
    "normalize",
]
