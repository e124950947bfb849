"""
chocover — convert versions between Chocolatey and Semantic Versioning

Chocolatey packages use four numeric parts and a narrow pre-release syntax
(``1.2.0.5-beta0055``), while most upstream projects publish Semantic
Versions (``1.2.0-beta.55+5``). chocover parses both grammars and converts
between them, and creates date-stamped "fix versions" for repackaging.

Typical usage::

    from chocover import ChocoVersion, VersionUnion

    ChocoVersion.parse("5.2-alpha.5").to_semver()   # 5.2.0-alpha.5
    VersionUnion.parse("1.0.5-beta.55+99").to_choco()  # 1.0.5-beta0055
"""

from __future__ import annotations

from chocover.__version__ import __version__
from chocover.core import (
    AlphaNumeric,
    ChocoVersion,
    Identifier,
    Numeric,
    SemVersion,
    VersionUnion,
    extract_prerelease,
    parse_semver,
)
from chocover.exceptions import (
    ChocoverError,
    DoesNotStartWithDigitError,
    EmptyInputError,
    InternalAssemblyError,
    NumericOverflowError,
    ParseError,
    SemverParseError,
    TooManyNumericPartsError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "chocover Contributors"
__license__ = "MIT"
__description__ = "Convert versions between Chocolatey and Semantic Versioning."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Versions
    "AlphaNumeric",
    "ChocoVersion",
    "Identifier",
    "Numeric",
    "SemVersion",
    "VersionUnion",
    "extract_prerelease",
    "parse_semver",
    # Errors
    "ChocoverError",
    "DoesNotStartWithDigitError",
    "EmptyInputError",
    "InternalAssemblyError",
    "NumericOverflowError",
    "ParseError",
    "SemverParseError",
    "TooManyNumericPartsError",
]
