"""
A version of either supported grammar.

:class:`VersionUnion` is what callers hand raw version strings to when they
do not know in advance which grammar the string follows. Semantic Versions
are preferred; anything else is read as a Chocolatey version.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from chocover.core.chocolatey import ChocoVersion
from chocover.core.semantic import SemVersion, parse_semver
from chocover.exceptions import SemverParseError
from chocover.utils.logger import get_logger

logger = get_logger("core.versions")


class VersionUnion:
    """Either a :class:`SemVersion` or a :class:`ChocoVersion`.

    Args:
        value: The wrapped version.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[SemVersion, ChocoVersion]) -> None:
        if not isinstance(value, (SemVersion, ChocoVersion)):
            raise TypeError(
                f"Expected SemVersion or ChocoVersion, got {type(value).__name__}"
            )
        self._value = value

    @classmethod
    def parse(cls, text: str) -> VersionUnion:
        """Parse ``text`` as a Semantic Version, or else as a Chocolatey version.

        Raises:
            ParseError: ``text`` matches neither grammar; the Chocolatey
                parser's error is raised.
        """
        try:
            return cls(parse_semver(text))
        except SemverParseError:
            logger.debug("Falling back to Chocolatey parsing for %r", text)

        return cls(ChocoVersion.parse(text))

    @property
    def value(self) -> Union[SemVersion, ChocoVersion]:
        return self._value

    @property
    def is_semver(self) -> bool:
        return isinstance(self._value, SemVersion)

    @property
    def is_choco(self) -> bool:
        return isinstance(self._value, ChocoVersion)

    def to_choco(self) -> ChocoVersion:
        """Return the Chocolatey form; a new object for either variant."""
        if isinstance(self._value, SemVersion):
            return ChocoVersion.from_semver(self._value)
        return ChocoVersion(
            self._value.major,
            self._value.minor,
            self._value.patch,
            self._value.build,
            self._value.pre_release,
        )

    def to_semver(self) -> SemVersion:
        """Return the Semantic Version form."""
        if isinstance(self._value, ChocoVersion):
            return self._value.to_semver()
        return self._value

    def add_fix(self, today: Optional[date] = None) -> None:
        """Create a fix version in place.

        Raises:
            TypeError: The wrapped version is a Semantic Version, which has
                no build part to stamp.
        """
        if not isinstance(self._value, ChocoVersion):
            raise TypeError("Fix versions are only supported for Chocolatey versions")
        self._value.add_fix(today)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionUnion):
            return NotImplemented
        if type(self._value) is not type(other._value):
            return False
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        kind = "SemVer" if self.is_semver else "Choco"
        return f"{self.__class__.__name__}.{kind}({str(self._value)!r})"
