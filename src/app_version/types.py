"""Type aliases and protocols needed in the package."""

from typing import Protocol, TypeAlias, runtime_checkable

from .version import Version

VersionTuple: TypeAlias = tuple[int, int, int]
VersionLike: TypeAlias = str | bytes | VersionTuple | Version


@runtime_checkable
class VersionProvider(Protocol):
    """Anything that reports the version it runs.

    Example:
        >>> class Service:
        ...     def version(self) -> Version:
        ...         return Version(1, 0, 0)
        >>> isinstance(Service(), VersionProvider)
        True
    """

    def version(self) -> Version:
        """Return the provided version."""
        ...
