"""Semantic version value type."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any, Final, NoReturn, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .exceptions import MalformedVersionError, VersionOutOfRangeError

logger = logging.getLogger(__name__)

MAX_COMPONENT: Final = 65535
VERSION_PATTERN: Final = r"^[0-9]+\.[0-9]+\.[0-9]+$"

_DIGITS: Final = re.compile(r"[0-9]+")
_MAX_DIGITS: Final = len(str(MAX_COMPONENT))
_FIELD_NAMES: Final = ("major", "minor", "patch")


@dataclass(frozen=True, order=True)
class Version:
    """Semantic version representation.

    Each component is an unsigned 16-bit integer. Instances are immutable,
    hashable and ordered by (major, minor, patch).

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).

    Example:
        >>> Version.parse("1.9.0") < Version(1, 10, 0)
        True
        >>> str(Version(1, 23, 46))
        '1.23.46'
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self: Self) -> None:
        """Validate that every component is an integer in range.

        Raises:
            TypeError: If a component is not an int.
            VersionOutOfRangeError: If a component is negative or above 65535.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Version {f.name} must be int, not {type(value).__name__}"
                )
            if not 0 <= value <= MAX_COMPONENT:
                logger.debug("Rejected version %s component %d", f.name, value)
                raise VersionOutOfRangeError(f.name, value, MAX_COMPONENT)

    @classmethod
    def from_tuple(cls, values: Iterable[int]) -> Self:
        """Build a version from a (major, minor, patch) triple.

        Args:
            values: Three integers.

        Returns:
            Version instance.

        Raises:
            MalformedVersionError: If values does not hold exactly three items.
            VersionOutOfRangeError: If a component does not fit in 16 bits.
        """
        parts = tuple(values)
        if len(parts) != 3:  # noqa: PLR2004
            raise MalformedVersionError(
                parts, f"expected 3 components, got {len(parts)}"
            )
        return cls(*parts)

    @classmethod
    def parse(cls, version_str: str | bytes, *, strict: bool = False) -> Self:
        """Parse a semantic version string.

        Components are runs of ASCII digits. Leading zeros are accepted
        unless ``strict`` is set, in which case only canonical strings parse.

        Args:
            version_str: Version string in format "major.minor.patch". Bytes
                are decoded as UTF-8.
            strict: Reject components with leading zeros.

        Returns:
            Parsed Version instance.

        Raises:
            TypeError: If version_str is neither str nor bytes.
            MalformedVersionError: If the string is not shaped like a version.
            VersionOutOfRangeError: If a component exceeds 65535.
        """
        if isinstance(version_str, bytes):
            try:
                text = version_str.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedVersionError(version_str, "not valid UTF-8") from e
        elif isinstance(version_str, str):
            text = version_str
        else:
            type_name = type(version_str).__name__
            raise TypeError(f"Version string must be str or bytes, not {type_name}")

        parts = text.split(".")
        if len(parts) != 3:  # noqa: PLR2004
            cls._reject(text, f"expected 3 components, got {len(parts)}")

        for part in parts:
            if not part:
                cls._reject(text, "empty component")
            if not _DIGITS.fullmatch(part):
                cls._reject(text, f"non-digit component {part!r}")
            if strict and len(part) > 1 and part.startswith("0"):
                cls._reject(text, f"leading zero in component {part!r}")

        values: list[int] = []
        for name, part in zip(_FIELD_NAMES, parts, strict=True):
            digits = part.lstrip("0") or "0"
            if len(digits) > _MAX_DIGITS:
                logger.debug("Rejected version %s component %s", name, part)
                raise VersionOutOfRangeError(name, digits, MAX_COMPONENT)
            values.append(int(digits))

        major, minor, patch = values
        return cls(major, minor, patch)

    @staticmethod
    def _reject(text: str, reason: str) -> NoReturn:
        logger.debug("Rejected version string %r: %s", text, reason)
        raise MalformedVersionError(text, reason)

    def as_tuple(self: Self) -> tuple[int, int, int]:
        """Return the version as a (major, minor, patch) tuple."""
        return (self.major, self.minor, self.patch)

    def bump_major(self: Self) -> Self:
        """Return the next major version, with minor and patch reset to 0.

        Raises:
            VersionOutOfRangeError: If major is already 65535.
        """
        return replace(self, major=self.major + 1, minor=0, patch=0)

    def bump_minor(self: Self) -> Self:
        """Return the next minor version, with patch reset to 0.

        Raises:
            VersionOutOfRangeError: If minor is already 65535.
        """
        return replace(self, minor=self.minor + 1, patch=0)

    def bump_patch(self: Self) -> Self:
        """Return the next patch version.

        Raises:
            VersionOutOfRangeError: If patch is already 65535.
        """
        return replace(self, patch=self.patch + 1)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch".
        """
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({self.major}, {self.minor}, {self.patch})"

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, str | bytes):
            return cls.parse(value)
        if isinstance(value, tuple | list):
            try:
                return cls.from_tuple(value)
            except TypeError as e:
                raise ValueError(str(e)) from e
        raise ValueError(f"Cannot convert {type(value).__name__} to Version")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from Version, str or triple and serialize to str in JSON."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @staticmethod
    def _serialize(value: "Version", info: core_schema.SerializationInfo) -> Any:
        if info.mode_is_json():
            return str(value)
        return value

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the canonical string form."""
        return {"type": "string", "pattern": VERSION_PATTERN}
