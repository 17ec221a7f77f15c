"""app_version - a 16-bit semantic version value type.

A package for parsing, rendering and comparing ``major.minor.patch`` version
numbers exchanged between networked components.
"""

from ._version import __version__
from .exceptions import (
    MalformedVersionError,
    VersionError,
    VersionOutOfRangeError,
)
from .types import VersionLike, VersionProvider, VersionTuple
from .version import MAX_COMPONENT, Version

__all__ = [
    "MAX_COMPONENT",
    "MalformedVersionError",
    "Version",
    "VersionError",
    "VersionLike",
    "VersionOutOfRangeError",
    "VersionProvider",
    "VersionTuple",
    "__version__",
]
