"""
Command-line interface for chocover.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from chocover.config import load_config
from chocover.commands.ver import ver
from chocover.__version__ import __version__
from chocover.context import ChocoverContext
from chocover.exceptions import ConfigError, ChocoverError
from chocover.utils.logger import get_logger, setup_logging
from chocover.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="CHOCOVER_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="CHOCOVER_COLOR",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Also write detailed logs to this file.",
    envvar="CHOCOVER_LOG_PATH",
)
@click.version_option(
    version=__version__,
    prog_name="chocover",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
    log_file: Optional[Path],
) -> None:
    """chocover — convert versions between Chocolatey and Semantic Versioning.

    \b
    Available commands:
      chocover ver VERSION...      Show the conversions of version strings

    \b
    Examples:
      chocover ver 4.5.1
      chocover ver 5.2-alpha.5 1.0.5-beta.55+99
      chocover -v ver 2.1 --with-fix-version

    Use ``chocover COMMAND --help`` for command-specific options.
    """
    # Respect NO_COLOR for logging and the console
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    _configure_logging(verbose, log_file)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    chocover_ctx = ChocoverContext()
    chocover_ctx.config_path = config or loaded_config.source_path
    chocover_ctx.color = color
    chocover_ctx.verbose = verbose
    chocover_ctx.config = loaded_config
    ctx.obj = chocover_ctx

    logger.debug("chocover v%s", __version__)
    logger.debug("Config path: %s", chocover_ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int, log_file: Optional[Path] = None) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose > 1, log_file=log_file)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
cli.add_command(ver)


def main() -> int:
    """Main entry point for the chocover CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except ChocoverError as exc:
        print_error(str(exc))
        logger.debug(
            "ChocoverError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
