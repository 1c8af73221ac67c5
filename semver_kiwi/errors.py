"""
Errors
Exception types raised when a version, comparator or range string is rejected.
"""


class SemverError(ValueError):
    """Base class for rejected semver input."""

    kind = "semver"

    def __init__(self, text: str, detail: str | None = None):
        self.text = text
        self.detail = detail
        message = f"Invalid {self.kind}: {text!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidVersion(SemverError):
    """String does not match MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]."""

    kind = "version"


class InvalidComparator(SemverError):
    """String is not a single valid comparator token."""

    kind = "comparator"


class InvalidRange(SemverError):
    """A comparator token inside a range failed to parse."""

    kind = "range"
