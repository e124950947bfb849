"""
Centralized constants for chocover.

This module defines immutable values used across chocover, including the
numeric limits of the Chocolatey version scheme, fix version settings,
configuration defaults, and logging formats. All values are intended to be
treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Chocolatey version limits
# ---------------------------------------------------------------------------

#: Largest value of the major, minor and patch parts (unsigned 8 bit).
MAX_PART_VALUE: Final[int] = 255

#: Largest value of the build part (unsigned 32 bit).
MAX_BUILD_VALUE: Final[int] = 4_294_967_295

#: Largest value of a numeric pre-release identifier (unsigned 64 bit).
MAX_IDENTIFIER_VALUE: Final[int] = 18_446_744_073_709_551_615

#: Number of numeric parts a Chocolatey version may carry.
MAX_NUMERIC_PARTS: Final[int] = 4

#: Width numeric pre-release identifiers are zero-padded to when rendered.
PRERELEASE_NUMBER_WIDTH: Final[int] = 4

#: Label inserted in front of a pre-release that starts with a number.
UNSTABLE_LABEL: Final[str] = "unstable"

#: When ``True``, two Chocolatey versions that differ only in their
#: pre-release compare equal (ordering still takes the pre-release into
#: account). Flip to ``False`` to make equality consistent with ordering.
EQUALITY_IGNORES_PRERELEASE: Final[bool] = True

# ---------------------------------------------------------------------------
# Fix versions
# ---------------------------------------------------------------------------

#: Build numbers at or above this value are treated as an existing date stamp.
FIX_VERSION_THRESHOLD: Final[int] = 20070101

#: ``strftime`` format of the date stamped into the build part.
FIX_VERSION_DATE_FORMAT: Final[str] = "%Y%m%d"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Default for showing the fix version of every Chocolatey value.
DEFAULT_WITH_FIX_VERSION: Final[bool] = False

#: Supported output formats of the ``ver`` command.
OUTPUT_FORMATS: Final[Sequence[str]] = ("text", "json")

#: Default output format of the ``ver`` command.
DEFAULT_OUTPUT_FORMAT: Final[str] = "text"

#: Width the labels of the ``ver`` command are right-aligned to.
LABEL_WIDTH: Final[int] = 18

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
