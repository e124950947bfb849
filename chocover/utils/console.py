"""
Console output utilities for chocover using Rich.

This module provides user-facing output helpers for CLI commands.
For diagnostic or debug output, use :mod:`chocover.utils.logger`.

Guidelines:
- print_* functions: user-facing status messages
- print_pair: the aligned ``name : value`` lines of the ``ver`` command
- Logging should never go through this module
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Optional

from rich.text import Text
from rich.theme import Theme
from rich.console import Console

from chocover.constants import LABEL_WIDTH

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

CHOCOVER_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "name": "magenta",
        "value": "cyan",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console instance."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=CHOCOVER_THEME,
                    no_color=not use_color,
                    highlight=False,
                    soft_wrap=True,
                )
    return _console


def reconfigure_console() -> None:
    """Reset the global console instance.

    Useful if environment variables (e.g. NO_COLOR) change at runtime.
    """
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich Console instance."""
    return _get_console()


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(Text(f"{prefix} {message}"), style="error")


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(Text(f"{prefix} {message}"), style="warning")


def print_info(message: str) -> None:
    """Print a plain informational line."""
    _get_console().print(Text(message))


def print_blank() -> None:
    """Print an empty line."""
    _get_console().print()


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def format_pair(name: str, value: Any, *, width: int = LABEL_WIDTH) -> Text:
    """Build the styled ``name : value`` line with a right-aligned name.

    Values are never interpreted as Rich markup, so version strings such as
    ``[1.0]`` are printed verbatim.
    """
    return Text.assemble(
        (f"{name:>{width}}", "name"),
        " : ",
        (str(value), "value"),
    )


def print_pair(name: str, value: Any, *, width: int = LABEL_WIDTH) -> None:
    """Print a right-aligned ``name : value`` line."""
    _get_console().print(format_pair(name, value, width=width))
