"""Shared fixtures."""

import pytest

from app_version import Version


@pytest.fixture
def version() -> Version:
    """A mid-range version."""
    return Version(1, 2, 3)


@pytest.fixture
def unsorted_versions() -> list[Version]:
    """Versions in shuffled order, including a duplicate."""
    return [
        Version(1, 10, 0),
        Version(0, 0, 1),
        Version(1, 9, 0),
        Version(2, 0, 0),
        Version(1, 9, 0),
        Version(1, 9, 65535),
        Version(0, 0, 0),
    ]
