"""
Core version handling for chocover.

This package contains the version grammars and the converters between
them:

- :mod:`~chocover.core.identifiers` — pre-release identifier model
- :mod:`~chocover.core.prerelease` — Chocolatey pre-release extraction
- :mod:`~chocover.core.semantic` — Semantic Versioning wrapper
- :mod:`~chocover.core.chocolatey` — Chocolatey versions and conversions
- :mod:`~chocover.core.versions` — version of either grammar

Everything here is pure: no I/O and no shared mutable state.
"""

from __future__ import annotations

from chocover.core.identifiers import AlphaNumeric, Identifier, Numeric
from chocover.core.prerelease import extract_prerelease
from chocover.core.semantic import SemVersion, parse_semver
from chocover.core.chocolatey import ChocoVersion
from chocover.core.versions import VersionUnion

__all__ = [
    "AlphaNumeric",
    "ChocoVersion",
    "Identifier",
    "Numeric",
    "SemVersion",
    "VersionUnion",
    "extract_prerelease",
    "parse_semver",
]
