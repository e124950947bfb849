"""
Semantic Versioning support for chocover.

Parsing and formatting of Semantic Versions is delegated to the ``semver``
library; this module only adapts its errors to the chocover hierarchy and
exposes its dotted pre-release and build strings as identifier lists.
"""

from __future__ import annotations

from typing import List, Optional

import semver

from chocover.core.identifiers import Identifier, parse_identifier
from chocover.exceptions import EmptyInputError, SemverParseError
from chocover.utils.logger import get_logger

logger = get_logger("core.semantic")

#: The Semantic Version type used throughout chocover.
SemVersion = semver.Version


def parse_semver(text: str) -> SemVersion:
    """Parse a strict ``major.minor.patch[-pre][+build]`` version.

    Args:
        text: The raw version string.

    Returns:
        The parsed :class:`SemVersion`.

    Raises:
        EmptyInputError: ``text`` is empty.
        SemverParseError: ``text`` is not a valid Semantic Version.
    """
    if not text:
        raise EmptyInputError("There is no version string to parse")

    try:
        return SemVersion.parse(text)
    except (ValueError, TypeError) as exc:
        logger.debug("Rejected %r as semantic version: %s", text, exc)
        raise SemverParseError(str(exc), value=text) from exc


def _split(dotted: Optional[str]) -> List[Identifier]:
    if not dotted:
        return []
    return [parse_identifier(part) for part in dotted.split(".")]


def prerelease_identifiers(version: SemVersion) -> List[Identifier]:
    """Return the pre-release of ``version`` as identifiers."""
    return _split(version.prerelease)


def build_identifiers(version: SemVersion) -> List[Identifier]:
    """Return the build metadata of ``version`` as identifiers."""
    return _split(version.build)
