"""
Custom exception hierarchy for chocover.

This module defines structured exception types used across chocover.
All recoverable exceptions inherit from :class:`ChocoverError` and support
optional structured metadata via the ``details`` attribute to improve
diagnostics and logging.

:class:`InternalAssemblyError` is the one exception that sits
outside this hierarchy: it signals a bug in the version converters and must
never be reported as an ordinary parse failure.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class ChocoverError(Exception):
    """Base exception for all chocover errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 60) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ParseError(ChocoverError):
    """Raised when a version string cannot be parsed.

    Args:
        message: Error description.
        value: The raw version string that failed to parse.
    """

    __slots__ = ("value",)

    def __init__(self, message: str, *, value: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        if value:
            details["input"] = _truncate(value)

        super().__init__(message, details)

        self.value = value


class EmptyInputError(ParseError):
    """Raised when there is no version string to parse."""


class DoesNotStartWithDigitError(ParseError):
    """Raised when a Chocolatey version does not start with a number."""


class TooManyNumericPartsError(ParseError):
    """Raised when a Chocolatey version has more than four numeric parts."""


class NumericOverflowError(ParseError):
    """Raised when a numeric part is empty or does not fit its field.

    Args:
        message: Error description.
        value: The raw version string, if parsing.
        part: Name of the offending field (``major``, ``build``, ...).
    """

    __slots__ = ("part",)

    def __init__(
        self,
        message: str,
        *,
        value: Optional[str] = None,
        part: Optional[str] = None,
    ) -> None:
        super().__init__(message, value=value)

        self.part = part
        _add_if(self.details, "part", part)


class SemverParseError(ParseError):
    """Raised when a string is not a valid Semantic Version."""


class ConfigError(ChocoverError):
    """Raised when a configuration file is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: The offending configuration option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class InternalAssemblyError(RuntimeError):
    """Raised when a converted version string is rejected by its own parser.

    This always indicates a bug in the conversion rules, not bad input.

    Args:
        assembled: The version string produced by the converter.
        reason: The parser's rejection message.
    """

    def __init__(self, assembled: str, reason: str) -> None:
        self.assembled = assembled
        self.reason = reason
        super().__init__(
            f"Converted version {assembled!r} is not a valid semantic version: {reason}"
        )
