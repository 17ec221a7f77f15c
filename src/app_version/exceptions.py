"""Exceptions raised by app_version."""

from typing import Any, Self


class VersionError(Exception):
    """Base exception for all version errors."""


class MalformedVersionError(VersionError, ValueError):
    """Raised when an input is not shaped like ``major.minor.patch``.

    Attributes:
        value: The rejected input.
        reason: Short description of what is wrong with it.
    """

    def __init__(self: Self, value: Any, reason: str) -> None:
        """Initialize the error.

        Args:
            value: The rejected input.
            reason: Short description of what is wrong with it.
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid version format: {value!r} ({reason})")


class VersionOutOfRangeError(VersionError, ValueError):
    """Raised when a version component does not fit in 16 bits.

    Attributes:
        field: Name of the component, one of "major", "minor" or "patch".
        value: The rejected integer, or its decimal digits when too long to
            convert.
        limit: Largest accepted value.
    """

    def __init__(self: Self, field: str, value: int | str, limit: int) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending component.
            value: The rejected integer or its digits.
            limit: Largest accepted value.
        """
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(
            f"Version {field} component out of range: {value} (expected 0..{limit})"
        )
