"""Semantic version parsing and precedence.

Go module versions look like ``v1.2.3``, ``v0.0.0-20230101120000-abcdef``
or ``v2.0.0+incompatible``. Graph dumps from other tools may omit the
leading ``v``, so it is optional here.

Ordering rules:

* Release identifiers compare numerically (``v10.0.0`` > ``v9.0.0``).
  ``v1.2`` is shorthand for ``v1.2.0`` and ``v1`` for ``v1.0.0``.
* A pre-release sorts below the same release without one.
* Pre-release identifiers compare pairwise: numeric ones numerically and
  below alphanumeric ones, alphanumeric ones in ASCII order, and a shorter
  list of otherwise equal identifiers sorts first.
* Build metadata (``+...``) never affects precedence.

Strings that are not valid semantic versions still need a total order so
version selection stays deterministic: every unparsable version sorts below
every parsable one, and two unparsable versions compare as plain strings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger("mvsgraph.graph.semver")

_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_SEMVER_RE = re.compile(
    rf"^v?(?P<major>{_NUMERIC})"
    rf"(?:\.(?P<minor>{_NUMERIC}))?"
    rf"(?:\.(?P<patch>{_NUMERIC}))?"
    rf"(?:-(?P<prerelease>{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*))?"
    rf"(?:\+(?P<build>{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?$"
)

PrereleaseIdent = Union[int, str]


@dataclass(frozen=True)
class Version:
    """Parsed semantic version."""

    major: int
    minor: int
    patch: int
    prerelease: Tuple[PrereleaseIdent, ...] = ()
    build: Optional[str] = None

    @property
    def release(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        text = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(part) for part in self.prerelease)
        if self.build:
            text += "+" + self.build
        return text


def parse(version: str) -> Optional[Version]:
    """Parse a version string.

    Args:
        version: Version text, with or without a leading ``v``.

    Returns:
        Parsed Version, or None when the text is not a semantic version.
    """
    match = _SEMVER_RE.match(version)
    if match is None:
        return None

    prerelease: Tuple[PrereleaseIdent, ...] = ()
    if match.group("prerelease"):
        prerelease = tuple(
            int(part) if part.isdigit() else part
            for part in match.group("prerelease").split(".")
        )

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor") or 0),
        patch=int(match.group("patch") or 0),
        prerelease=prerelease,
        build=match.group("build"),
    )


def is_valid(version: str) -> bool:
    """Return True when ``version`` parses as a semantic version."""
    return parse(version) is not None


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_prerelease(
    left: Tuple[PrereleaseIdent, ...], right: Tuple[PrereleaseIdent, ...]
) -> int:
    if left == right:
        return 0
    # No pre-release outranks any pre-release of the same release.
    if not left:
        return 1
    if not right:
        return -1

    for a, b in zip(left, right):
        if a == b:
            continue
        a_num = isinstance(a, int)
        b_num = isinstance(b, int)
        if a_num and b_num:
            return _cmp(a, b)
        if a_num:
            return -1
        if b_num:
            return 1
        return _cmp(a, b)

    return _cmp(len(left), len(right))


def compare_versions(left: Version, right: Version) -> int:
    """Compare two parsed versions by semantic-version precedence."""
    result = _cmp(left.release, right.release)
    if result:
        return result
    return _compare_prerelease(left.prerelease, right.prerelease)


def compare(left: str, right: str) -> int:
    """Compare two version strings.

    Args:
        left: First version string.
        right: Second version string.

    Returns:
        -1, 0 or 1 as ``left`` is lower than, equal to, or higher than
        ``right``. Unparsable strings sort below parsable ones and compare
        among themselves as plain strings.
    """
    left_version = parse(left)
    right_version = parse(right)

    if left_version is not None and right_version is not None:
        return compare_versions(left_version, right_version)

    if left_version is None and right_version is None:
        logger.debug("Comparing non-semver versions as strings: %r, %r", left, right)
        return _cmp(left, right)

    return -1 if left_version is None else 1


__all__ = [
    "Version",
    "compare",
    "compare_versions",
    "is_valid",
    "parse",
]
