# SPDX-License-Identifier: MIT
"""Semantic version parsing, rendering and the immutable Version value.

Follows the SemVer 2.0.0 grammar:
- Core: MAJOR.MINOR.PATCH, no leading zeros
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +exp.sha.5114f85
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Iterable, Union

from .compare import compare_precedence, precedence_key

# Grammar fragments, https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# ASCII digits only: ``\d`` would also accept other Unicode decimal digits.
MAJOR_EXPRESSION = r"(?P<major>0|[1-9][0-9]*)"
MINOR_EXPRESSION = r"(?P<minor>0|[1-9][0-9]*)"
PATCH_EXPRESSION = r"(?P<patch>0|[1-9][0-9]*)"
PRE_RELEASE_EXPRESSION = (
    r"(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*)"
)
BUILD_METADATA_EXPRESSION = r"(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)"

SEMVER_PATTERN = re.compile(
    rf"{MAJOR_EXPRESSION}\.{MINOR_EXPRESSION}\.{PATCH_EXPRESSION}"
    rf"(?:-{PRE_RELEASE_EXPRESSION})?"
    rf"(?:\+{BUILD_METADATA_EXPRESSION})?"
)


class SemanticVersionError(Exception):
    """Base class for errors raised by semver_core."""


class InvalidFormatError(SemanticVersionError, ValueError):
    """Raised when a string does not follow the semantic versioning grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f'Invalid semantic version: "{version}"'
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers in order (e.g. ("alpha", "1"))
        build_metadata: Build metadata identifiers in order (e.g. ("build", "5"))

    Equality and hashing are structural over all five fields. The ordering
    operators follow SemVer precedence, which ignores build metadata, so two
    versions can be neither ``<`` nor ``>`` each other and still be ``!=``.

    The constructor does not validate identifiers; only ``from_string``
    enforces the grammar.
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[str, ...] = ()
    build_metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pre_release", tuple(self.pre_release))
        object.__setattr__(self, "build_metadata", tuple(self.build_metadata))

    @classmethod
    def from_string(cls, version_string: str) -> Version:
        """Parse a semantic version string.

        Raises:
            InvalidFormatError: If the string does not match the grammar
        """
        if not isinstance(version_string, str):
            raise InvalidFormatError(
                str(version_string),
                f"Version must be a string, got {type(version_string).__name__}",
            )

        match = SEMVER_PATTERN.fullmatch(version_string)
        if match is None:
            raise InvalidFormatError(version_string)

        prerelease = match.group("prerelease")
        buildmetadata = match.group("buildmetadata")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre_release=tuple(prerelease.split(".")) if prerelease is not None else (),
            build_metadata=tuple(buildmetadata.split(".")) if buildmetadata is not None else (),
        )

    def __str__(self) -> str:
        """Render as MAJOR.MINOR.PATCH, then -pre.release and +build.meta when present."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += "-" + ".".join(self.pre_release)
        if self.build_metadata:
            version += "+" + ".".join(self.build_metadata)
        return version

    @property
    def is_prerelease(self) -> bool:
        """True when any pre-release identifiers are set."""
        return bool(self.pre_release)

    @property
    def base_version(self) -> str:
        """MAJOR.MINOR.PATCH alone, e.g. "1.0.0" for "1.0.0-rc.1+b.7"."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def with_major(self, major: int) -> Version:
        return dataclasses.replace(self, major=major)

    def with_minor(self, minor: int) -> Version:
        return dataclasses.replace(self, minor=minor)

    def with_patch(self, patch: int) -> Version:
        return dataclasses.replace(self, patch=patch)

    def with_pre_release(self, pre_release: Iterable[str]) -> Version:
        return dataclasses.replace(self, pre_release=tuple(pre_release))

    def with_build_metadata(self, build_metadata: Iterable[str]) -> Version:
        return dataclasses.replace(self, build_metadata=tuple(build_metadata))

    def compare(self, other: Version) -> int:
        """Compare against another version by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal in precedence, 1 if self > other
        """
        return compare_precedence(self, other)

    @staticmethod
    def compare_version(version_a: Version, version_b: Version) -> int:
        """Compare two versions by SemVer precedence, returning -1, 0 or 1."""
        return compare_precedence(version_a, version_b)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) >= 0


def parse_version(version_string: str) -> Version:
    """Shorthand for ``Version.from_string``.

    The pre-release and build metadata sections are split on dots; an absent
    section becomes an empty tuple.

    Raises:
        InvalidFormatError: With the rejected input in ``.version``

    Examples:
        >>> parse_version("1.0.0-x.7.z.92").pre_release
        ('x', '7', 'z', '92')

        >>> parse_version("1.0.0+21AF26D3----117B344092BD").build_metadata
        ('21AF26D3----117B344092BD',)

        >>> parse_version("1.2.3-foo.bar+baz-boz").base_version
        '1.2.3'
    """
    return Version.from_string(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Non-raising form of ``parse_version``; anything but ``str`` is False.

    Examples:
        >>> is_valid_semver("1.0.0-0A.is.legal")
        True
        >>> is_valid_semver("1.0.0-01")
        False
        >>> is_valid_semver("1.2.3\\n")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions, parsing strings first.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2 in precedence
        1 if version1 > version2

    Raises:
        InvalidFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
        -1
        >>> compare_versions("1.2.3+foo", "1.2.3+bar")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare_precedence(v1, v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version string or Version object.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    return precedence_key(v)
