"""
Chocolatey version model.

Chocolatey versions carry up to four numeric parts
(``major.minor[.patch[.build]]``) and an optional pre-release rendered as a
dash separated label with zero-padded numbers (``1.0.0-alpha0054-0002``).
This module parses and formats them and converts them to and from Semantic
Versions.

Typical usage::

    version = ChocoVersion.parse("4.2.1-alpha54.2")
    str(version)          # '4.2.1-alpha0054-0002'
    str(version.to_semver())  # '4.2.1-alpha-54.2'

    choco = ChocoVersion.from_semver(parse_semver("1.0.5-beta.55+99"))
    str(choco)            # '1.0.5-beta0055'
"""

from __future__ import annotations

from datetime import date
from itertools import takewhile
from typing import Iterable, List, Optional, Tuple

from chocover.constants import (
    EQUALITY_IGNORES_PRERELEASE,
    FIX_VERSION_DATE_FORMAT,
    FIX_VERSION_THRESHOLD,
    MAX_BUILD_VALUE,
    MAX_IDENTIFIER_VALUE,
    MAX_NUMERIC_PARTS,
    MAX_PART_VALUE,
    PRERELEASE_NUMBER_WIDTH,
)
from chocover.core.identifiers import (
    AlphaNumeric,
    Identifier,
    Numeric,
    is_ascii_digit,
    is_ascii_number,
)
from chocover.core.prerelease import UNSTABLE, extract_prerelease
from chocover.core.semantic import SemVersion, prerelease_identifiers
from chocover.exceptions import (
    DoesNotStartWithDigitError,
    EmptyInputError,
    InternalAssemblyError,
    NumericOverflowError,
    TooManyNumericPartsError,
)
from chocover.utils.logger import get_logger

logger = get_logger("core.chocolatey")

_PART_NAMES: Tuple[str, ...] = ("major", "minor", "patch", "build")
_PART_LIMITS: Tuple[int, ...] = (
    MAX_PART_VALUE,
    MAX_PART_VALUE,
    MAX_PART_VALUE,
    MAX_BUILD_VALUE,
)


def _check_part(value: int, index: int, *, text: Optional[str] = None) -> int:
    """Validate a numeric part against the width of its field."""
    limit = _PART_LIMITS[index]
    if not 0 <= value <= limit:
        raise NumericOverflowError(
            f"The {_PART_NAMES[index]} part must be between 0 and {limit}, got {value}",
            value=text,
            part=_PART_NAMES[index],
        )
    return value


def _parse_part(digits: str, index: int, text: str) -> int:
    """Convert one run of digits found while parsing ``text``."""
    if index >= MAX_NUMERIC_PARTS:
        raise TooManyNumericPartsError(
            "There were additional numeric characters after the first "
            f"{MAX_NUMERIC_PARTS} parts of the version",
            value=text,
        )
    if not digits:
        raise NumericOverflowError(
            f"The {_PART_NAMES[index]} part of the version is empty",
            value=text,
            part=_PART_NAMES[index],
        )
    return _check_part(int(digits), index, text=text)


def _saturate(value: int) -> int:
    return min(value, MAX_PART_VALUE)


class ChocoVersion:
    """A version as understood by Chocolatey.

    ``patch`` and ``build`` are optional and are only rendered when set;
    setting a build always sets the patch (to ``0`` when missing). For
    comparisons a missing part counts as ``0``.

    Equality only looks at the numeric parts while
    :data:`~chocover.constants.EQUALITY_IGNORES_PRERELEASE` is ``True``, so
    ``1.0.0-alpha == 1.0.0`` even though ``1.0.0-alpha < 1.0.0``.

    Args:
        major: Major part (0-255).
        minor: Minor part (0-255).
        patch: Optional patch part (0-255).
        build: Optional build part (0-4294967295).
        pre_release: Pre-release identifiers.

    Raises:
        NumericOverflowError: A part does not fit its field.
    """

    __slots__ = ("_major", "_minor", "_patch", "_build", "_pre_release")

    def __init__(
        self,
        major: int,
        minor: int,
        patch: Optional[int] = None,
        build: Optional[int] = None,
        pre_release: Optional[Iterable[Identifier]] = None,
    ) -> None:
        self._major: int = _check_part(major, 0)
        self._minor: int = _check_part(minor, 1)
        self._patch: Optional[int] = None
        self._build: Optional[int] = None
        self._pre_release: List[Identifier] = []

        if patch is not None:
            self.set_patch(patch)
        if build is not None:
            self.set_build(build)
        if pre_release is not None:
            self.set_prerelease(pre_release)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, major: int, minor: int) -> ChocoVersion:
        return cls(major, minor)

    @classmethod
    def with_patch(cls, major: int, minor: int, patch: int) -> ChocoVersion:
        return cls(major, minor, patch)

    @classmethod
    def with_build(cls, major: int, minor: int, patch: int, build: int) -> ChocoVersion:
        return cls(major, minor, patch, build)

    @classmethod
    def parse(cls, text: str) -> ChocoVersion:
        """Parse a Chocolatey version string.

        Up to four dot separated numbers are read from the start of
        ``text``; whatever follows the first character that is neither a
        digit nor a dot is treated as the pre-release, with any ``+build``
        metadata dropped.

        Args:
            text: The raw version string (``"3.2-alpha.10"``).

        Returns:
            The parsed version.

        Raises:
            EmptyInputError: ``text`` is empty.
            DoesNotStartWithDigitError: ``text`` does not start with a digit.
            TooManyNumericPartsError: More than four numeric parts.
            NumericOverflowError: A numeric part is empty or out of range.

        Examples:
            >>> str(ChocoVersion.parse("3.3.5-beta-11"))
            '3.3.5-beta0011'
            >>> str(ChocoVersion.parse("0.1.0-55"))
            '0.1.0-unstable0055'
        """
        if not text:
            raise EmptyInputError("There is no version string to parse")
        if not is_ascii_digit(text[0]):
            raise DoesNotStartWithDigitError(
                "The version string does not start with a number",
                value=text,
            )

        parts: List[Optional[int]] = [None] * MAX_NUMERIC_PARTS
        index = 0
        digits = ""
        consumed = 0

        for ch in text:
            if is_ascii_digit(ch):
                digits += ch
            elif ch == ".":
                parts[index] = _parse_part(digits, index, text)
                index += 1
                digits = ""
            else:
                break
            consumed += 1

        if digits:
            parts[index] = _parse_part(digits, index, text)

        major, minor, patch, build = parts
        version = cls(
            major or 0,
            minor or 0,
            patch,
            build,
            extract_prerelease(text[consumed:]),
        )
        logger.debug("Parsed %r as Chocolatey version %s", text, version)
        return version

    @classmethod
    def from_semver(cls, version: SemVersion) -> ChocoVersion:
        """Convert a Semantic Version into a Chocolatey version.

        Numeric parts larger than 255 are clamped to 255. The pre-release is
        re-extracted with the Chocolatey rules and the build metadata is
        dropped, so ``1.0.5-beta.55+99`` becomes ``1.0.5-beta0055``.
        """
        pre_release: List[Identifier] = []
        for identifier in prerelease_identifiers(version):
            if isinstance(identifier, AlphaNumeric):
                pre_release.extend(extract_prerelease(identifier.value))
            else:
                if not pre_release:
                    pre_release.append(UNSTABLE)
                pre_release.append(identifier)

        return cls(
            _saturate(version.major),
            _saturate(version.minor),
            _saturate(version.patch),
            pre_release=pre_release,
        )

    # ------------------------------------------------------------------
    # Accessors & mutators
    # ------------------------------------------------------------------

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> Optional[int]:
        return self._patch

    @property
    def build(self) -> Optional[int]:
        return self._build

    @property
    def pre_release(self) -> List[Identifier]:
        """A copy of the pre-release identifiers."""
        return list(self._pre_release)

    def set_patch(self, patch: int) -> None:
        self._patch = _check_part(patch, 2)

    def set_build(self, build: int) -> None:
        """Set the build part, defaulting the patch part to ``0`` if unset."""
        build = _check_part(build, 3)
        if self._patch is None:
            self._patch = 0
        self._build = build

    def set_prerelease(self, pre_release: Iterable[Identifier]) -> None:
        identifiers = list(pre_release)
        for identifier in identifiers:
            if not isinstance(identifier, (Numeric, AlphaNumeric)):
                raise TypeError(
                    f"Pre-release identifiers must be Numeric or AlphaNumeric, "
                    f"got {type(identifier).__name__}"
                )
        self._pre_release = identifiers

    def with_prerelease(self, pre_release: Iterable[Identifier]) -> ChocoVersion:
        self.set_prerelease(pre_release)
        return self

    # ------------------------------------------------------------------
    # Fix versions
    # ------------------------------------------------------------------

    def is_fix_version(self) -> bool:
        """Return True if the build part already holds a date stamp."""
        return self._build is not None and self._build >= FIX_VERSION_THRESHOLD

    def add_fix(self, today: Optional[date] = None) -> None:
        """Stamp the current date (``YYYYMMDD``) into the build part.

        Nothing changes when the build part already holds a date stamp, i.e.
        is at or above :data:`~chocover.constants.FIX_VERSION_THRESHOLD`.

        Args:
            today: Date to stamp; defaults to the local current date.

        Raises:
            ValueError: The formatted date is not a number.
        """
        if self.is_fix_version():
            logger.debug("Version %s already is a fix version", self)
            return

        stamp = (today or date.today()).strftime(FIX_VERSION_DATE_FORMAT)
        self.set_build(int(stamp))
        logger.debug("Created fix version %s", self)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_semver(self) -> SemVersion:
        """Convert this version into a Semantic Version.

        Letters of the pre-release become dash separated labels, the last
        pre-release number becomes a dot separated identifier and the build
        part becomes build metadata. Without any pre-release label the
        separators swap so that both numbers stay visible
        (``1.2.0.5`` becomes ``1.2.0+5``).

        Raises:
            InternalAssemblyError: The converted string is not a valid
                Semantic Version (only possible with labels containing
                characters semver forbids, such as ``_``).
        """
        text = f"{self._major}.{self._minor}.{self._patch or 0}"
        number = 0

        for identifier in self._pre_release:
            if isinstance(identifier, AlphaNumeric):
                prefix = "".join(
                    takewhile(lambda ch: not is_ascii_digit(ch), identifier.value)
                )
                suffix = identifier.value[len(prefix):]
                if prefix:
                    text += f"-{prefix}"
                if is_ascii_number(suffix) and int(suffix) <= MAX_IDENTIFIER_VALUE:
                    if number > 0:
                        text += f"-{number}"
                    number = int(suffix)
                elif suffix:
                    text += suffix if prefix else f"-{suffix}"
            else:
                if number > 0:
                    text += f"-{number}"
                number = identifier.value

        delim, alt_delim = (".", "+") if "-" in text else ("+", "-")

        if self._build is not None:
            if number > 0:
                text += f"{delim}{number}{alt_delim}{self._build}"
            else:
                text += f"{delim}{self._build}"
        elif number > 0:
            text += f"{delim}{number}"

        try:
            return SemVersion.parse(text)
        except ValueError as exc:
            raise InternalAssemblyError(text, str(exc)) from exc

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _numeric_key(self) -> Tuple[int, int, int, int]:
        return (self._major, self._minor, self._patch or 0, self._build or 0)

    def _sort_key(self) -> tuple:
        # A release ranks above any of its pre-releases.
        if not self._pre_release:
            pre: tuple = (1,)
        else:
            pre = (0, tuple(identifier.sort_key() for identifier in self._pre_release))
        return self._numeric_key() + (pre,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChocoVersion):
            return NotImplemented
        if self._numeric_key() != other._numeric_key():
            return False
        return EQUALITY_IGNORES_PRERELEASE or self._pre_release == other._pre_release

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: ChocoVersion) -> bool:
        if not isinstance(other, ChocoVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: ChocoVersion) -> bool:
        if not isinstance(other, ChocoVersion):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: ChocoVersion) -> bool:
        if not isinstance(other, ChocoVersion):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: ChocoVersion) -> bool:
        if not isinstance(other, ChocoVersion):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        text = f"{self._major}.{self._minor}"
        if self._patch is not None:
            text += f".{self._patch}"
        if self._build is not None:
            text += f".{self._build}"

        after_label = False
        for identifier in self._pre_release:
            if isinstance(identifier, Numeric):
                padded = f"{identifier.value:0{PRERELEASE_NUMBER_WIDTH}d}"
                text += padded if after_label else f"-{padded}"
                after_label = False
            else:
                text += f"-{identifier.value}"
                after_label = True

        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"
