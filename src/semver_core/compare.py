# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Precedence is decided by major, minor and patch, then by the pre-release
identifiers. A release outranks any of its pre-releases and build metadata
is ignored.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Sequence, Union

if TYPE_CHECKING:
    from .semver import Version


# Numeric strings as a generic number test sees them, restricted to the
# characters an identifier may hold: "7", "007", "-1", "1e2", "1E-5".
_NUMERIC_PATTERN = re.compile(r"-?[0-9]+(?:[eE]-?[0-9]+)?")


def _is_numeric(identifier: Union[int, str]) -> bool:
    if isinstance(identifier, int):
        return True
    return _NUMERIC_PATTERN.fullmatch(identifier) is not None


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_identifiers(a: Union[int, str], b: Union[int, str]) -> int:
    """Compare two identifiers.

    Numeric identifiers (digits, optionally signed or with an exponent, such
    as "11", "-1" or "1e2") compare by value and always have lower
    precedence than alphanumeric ones. Alphanumeric identifiers compare in ASCII order.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if a == b:
        return 0

    a_is_number = _is_numeric(a)
    b_is_number = _is_numeric(b)

    if a_is_number and b_is_number:
        return _sign(Decimal(a), Decimal(b))
    if a_is_number:
        return -1
    if b_is_number:
        return 1
    return _sign(a, b)


def compare_core(version_a: Version, version_b: Version) -> int:
    """Compare only the major.minor.patch part of two versions."""
    for attr in ("major", "minor", "patch"):
        result = compare_identifiers(getattr(version_a, attr), getattr(version_b, attr))
        if result:
            return result
    return 0


def compare_pre_release(pre1: Sequence[str], pre2: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence (a release) has higher precedence than a non-empty one.
    When every shared position is equal, the longer sequence wins.
    """
    if pre1 and not pre2:
        return -1
    if pre2 and not pre1:
        return 1
    if not pre1 and not pre2:
        return 0

    for p1, p2 in zip(pre1, pre2):
        if p1 == p2:
            continue
        result = compare_identifiers(p1, p2)
        if result:
            return result

    return _sign(len(pre1), len(pre2))


def compare_precedence(version_a: Version, version_b: Version) -> int:
    """Compare two versions by SemVer precedence.

    Returns:
        -1 if version_a < version_b
        0 if version_a == version_b
        1 if version_a > version_b

    Note:
        Build metadata never participates.
    """
    if version_a is version_b:
        return 0

    result = compare_core(version_a, version_b)
    if result:
        return result

    return compare_pre_release(version_a.pre_release, version_b.pre_release)


def precedence_key(version: Version) -> tuple:
    """Return a sort key whose ordering agrees with compare_precedence."""
    # Release sorts after every pre-release of the same core: (1,) > (0, ...)
    if not version.pre_release:
        pre_release_key: tuple = (1,)
    else:
        parts = []
        for part in version.pre_release:
            if _is_numeric(part):
                parts.append((0, Decimal(part), ""))
            else:
                parts.append((1, 0, part))
        pre_release_key = (0, tuple(parts))

    return (version.major, version.minor, version.patch, pre_release_key)
