# SPDX-License-Identifier: MIT
"""Semantic version value type.

This package parses version strings following the SemVer 2.0.0 grammar into
immutable Version values, renders them back to canonical form and compares
them by SemVer precedence.

Example:
    >>> from semver_core import Version, compare_versions
    >>>
    >>> version = Version.from_string("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release
    ('alpha', '1')
    >>> str(version.with_patch(4))
    '1.2.4-alpha.1+build.456'
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    compare_versions,
    version_key,
    SemanticVersionError,
    InvalidFormatError,
    SEMVER_PATTERN,
    MAJOR_EXPRESSION,
    MINOR_EXPRESSION,
    PATCH_EXPRESSION,
    PRE_RELEASE_EXPRESSION,
    BUILD_METADATA_EXPRESSION,
)
from .compare import (
    compare_core,
    compare_identifiers,
    compare_pre_release,
    compare_precedence,
    precedence_key,
)

__all__ = [
    # Version value and parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SemanticVersionError",
    "InvalidFormatError",
    # Grammar
    "SEMVER_PATTERN",
    "MAJOR_EXPRESSION",
    "MINOR_EXPRESSION",
    "PATCH_EXPRESSION",
    "PRE_RELEASE_EXPRESSION",
    "BUILD_METADATA_EXPRESSION",
    # Version comparison
    "compare_versions",
    "compare_precedence",
    "compare_core",
    "compare_identifiers",
    "compare_pre_release",
    "precedence_key",
    "version_key",
]
