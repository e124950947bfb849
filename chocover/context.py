"""
Shared context object for chocover CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from chocover.config import ChocoverConfig


class ChocoverContext:
    """Global context object for chocover CLI commands.

    Attributes:
        config_path: Path to the chocover configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: The loaded configuration, or ``None`` before loading.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[ChocoverConfig] = None


#: Click decorator for injecting :class:`ChocoverContext` into commands.
pass_context = click.make_pass_decorator(ChocoverContext, ensure=True)
