"""
Version grammar.

MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] where the numeric parts are ASCII
digit runs and PRERELEASE/BUILD are dot-separated [0-9A-Za-z-]+ tokens.
"""

import re
from typing import Tuple

from semver_kiwi.errors import InvalidVersion
from semver_kiwi.version.model import Identifier, Version


NUMBER = r"[0-9]+"
IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

VERSION_RE = re.compile(
    rf"(?P<major>{NUMBER})\.(?P<minor>{NUMBER})\.(?P<patch>{NUMBER})"
    rf"(?:-(?P<prerelease>{IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{IDENTIFIERS}))?"
)

_DIGITS = re.compile(r"[0-9]+")


def parse_identifiers(text: str | None) -> Tuple[Identifier, ...]:
    """Split a prerelease into identifiers; all-digit tokens become ints."""
    if not text:
        return ()
    return tuple(
        int(part) if _DIGITS.fullmatch(part) else part
        for part in text.split(".")
    )


def is_valid_version(text) -> bool:
    """Check a version string against the grammar without building anything."""
    return isinstance(text, str) and VERSION_RE.fullmatch(text) is not None


def parse_version(text: str) -> Version:
    """Parse a version string, raising InvalidVersion if it doesn't match."""
    match = VERSION_RE.fullmatch(text) if isinstance(text, str) else None
    if not match:
        raise InvalidVersion(text)
    return Version(
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        parse_identifiers(match.group("prerelease")),
    )
