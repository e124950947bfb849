"""
Pre-release extraction for Chocolatey versions.

Chocolatey only allows a single dash separated pre-release label made of
letters followed by a zero-padded number, so arbitrary pre-release text
(``alpha54.2``, ``beta-11``, ``55-alpha``) has to be broken down into an
ordered list of identifiers first. The rules implemented here:

- ``-`` and ``.`` separate tokens, and a switch from letters to digits
  starts a new token (``beta50`` becomes ``beta``, ``50``);
- a pre-release that starts with a number receives the ``unstable`` label
  (``55`` becomes ``unstable``, ``55``);
- a label appearing after such a number replaces the ``unstable`` label
  and moves in front of the number (``55-alpha`` becomes ``alpha``, ``55``);
- everything after a ``+`` is build metadata and is ignored.
"""

from __future__ import annotations

from itertools import takewhile
from typing import List, Optional

from chocover.constants import (
    MAX_BUILD_VALUE,
    MAX_IDENTIFIER_VALUE,
    PRERELEASE_NUMBER_WIDTH,
    UNSTABLE_LABEL,
)
from chocover.core.identifiers import (
    AlphaNumeric,
    Identifier,
    Numeric,
    is_ascii_digit,
    is_ascii_number,
)

UNSTABLE = AlphaNumeric(UNSTABLE_LABEL)

_SEPARATORS = frozenset("-.")


def extract_prerelease(text: str) -> List[Identifier]:
    """Split raw pre-release text into Chocolatey identifiers.

    Args:
        text: Everything following the numeric part of a version, including
            any leading separator (``"-alpha.5"``).

    Returns:
        The ordered identifiers; empty when ``text`` holds no pre-release.

    Examples:
        >>> extract_prerelease("-alpha54.2")
        [AlphaNumeric(value='alpha'), Numeric(value=54), Numeric(value=2)]
        >>> extract_prerelease("-55-alpha")
        [AlphaNumeric(value='alpha'), Numeric(value=55)]
    """
    result: List[Identifier] = []
    current = ""
    # Token displaced by the unstable label; re-appended once its
    # replacement has been collected.
    displaced = ""

    for ch in takewhile(lambda c: c != "+", text):
        if ch in _SEPARATORS:
            identifier = get_identifier(current)
            if identifier is not None:
                result.append(identifier)
                current = ""
            identifier = get_identifier(displaced)
            if identifier is not None:
                result.append(identifier)
                displaced = ""
            continue

        if is_ascii_digit(ch):
            if not result and not current:
                result.append(UNSTABLE)
            elif any(not is_ascii_digit(c) for c in current):
                identifier = get_identifier(current)
                if identifier is not None:
                    result.append(identifier)
                    current = ""
        elif not current and len(result) > 1 and result[0] == UNSTABLE:
            del result[0]
            displaced = str(result.pop())
        elif current and result and result[0] == UNSTABLE:
            del result[0]
            displaced = current
            current = ""

        current += ch

    identifier = get_identifier(current)
    if identifier is not None:
        result.append(identifier)

    identifier = get_identifier(displaced)
    if identifier is not None:
        result.append(identifier)

    return result


def get_identifier(token: str) -> Optional[Identifier]:
    """Classify a single accumulated token.

    Pure numbers become :class:`Numeric`. Tokens mixing letters and digits
    are collapsed into one :class:`AlphaNumeric` with the letters first and
    the digits zero-padded (``5beta`` becomes ``beta0005``).

    Returns:
        The identifier, or ``None`` for an empty token.
    """
    if not token:
        return None

    if is_ascii_number(token):
        number = int(token)
        if number <= MAX_IDENTIFIER_VALUE:
            return Numeric(number)

    letters = "".join(ch for ch in token if not is_ascii_digit(ch))
    digits = "".join(ch for ch in token if is_ascii_digit(ch))

    if not digits:
        return AlphaNumeric(letters)

    number = int(digits)
    if number <= MAX_BUILD_VALUE:
        return AlphaNumeric(f"{letters}{number:0{PRERELEASE_NUMBER_WIDTH}d}")

    return AlphaNumeric(f"{letters}{digits}")
