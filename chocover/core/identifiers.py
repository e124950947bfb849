"""
Pre-release identifier model shared by both version grammars.

An identifier is either :class:`Numeric` or :class:`AlphaNumeric`. Ordering
follows Semantic Versioning precedence: numeric identifiers compare by
value, alphanumeric identifiers compare lexically, and numeric identifiers
always sort before alphanumeric ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple, Union


@total_ordering
@dataclass(frozen=True)
class Numeric:
    """A purely numeric identifier, such as the ``5`` in ``alpha.5``."""

    value: int

    def sort_key(self) -> Tuple[int, int, str]:
        return (0, self.value, "")

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Numeric, AlphaNumeric)):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass(frozen=True)
class AlphaNumeric:
    """An identifier holding at least one non-digit character."""

    value: str

    def sort_key(self) -> Tuple[int, int, str]:
        return (1, 0, self.value)

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Numeric, AlphaNumeric)):
            return NotImplemented
        return self.sort_key() < other.sort_key()


Identifier = Union[Numeric, AlphaNumeric]


def is_ascii_digit(ch: str) -> bool:
    """Return True for ``0``-``9`` only (``str.isdigit`` accepts far more)."""
    return "0" <= ch <= "9"


def is_ascii_number(text: str) -> bool:
    """Return True if ``text`` is non-empty and made of ASCII digits only."""
    return bool(text) and all(is_ascii_digit(ch) for ch in text)


def parse_identifier(text: str) -> Identifier:
    """Classify one dot-separated semver identifier.

    Examples:
        >>> parse_identifier("55")
        Numeric(value=55)
        >>> parse_identifier("beta-2")
        AlphaNumeric(value='beta-2')
    """
    if is_ascii_number(text):
        return Numeric(int(text))
    return AlphaNumeric(text)
