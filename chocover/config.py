"""Configuration file loader for chocover.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``chocover.toml`` — settings under ``[chocover]`` table
- ``pyproject.toml`` — settings under ``[tool.chocover]`` table

Discovery order:

1. Explicit path from ``--config`` or ``CHOCOVER_CONFIG``
2. ``chocover.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.chocover]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``chocover.toml``)::

    [chocover]
    with_fix_version = true
    format = "json"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from chocover.exceptions import ConfigError
from chocover.utils.logger import get_logger
from chocover.constants import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_WITH_FIX_VERSION,
    OUTPUT_FORMATS,
)

logger = get_logger("config")

CONFIG_FILE_NAME = "chocover.toml"


@dataclass
class ChocoverConfig:
    """Parsed and validated chocover configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        with_fix_version: Also show the fix version of every Chocolatey
            version printed by ``chocover ver``.
        format: Output format of ``chocover ver`` (``text`` or ``json``).
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    with_fix_version: bool = DEFAULT_WITH_FIX_VERSION
    format: str = DEFAULT_OUTPUT_FORMAT

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "with_fix_version": self.with_fix_version,
            "format": self.format,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    chocover_toml = cwd / CONFIG_FILE_NAME
    if chocover_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, chocover_toml)
        return chocover_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_chocover_section(pyproject_toml):
        logger.debug("Found [tool.chocover] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_chocover_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.chocover] section.

    An unreadable or invalid pyproject.toml counts as having no section;
    it belongs to another tool and is not ours to report on.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    return "chocover" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> ChocoverConfig:
    """Load and validate chocover configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`ChocoverConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return ChocoverConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("chocover", {})
    else:
        section = raw.get("chocover", {})

    if not section:
        logger.debug("Config file found but no chocover section, using defaults")
        return ChocoverConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> ChocoverConfig:
    """Parse and validate the ``[chocover]`` or ``[tool.chocover]`` table.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    config = ChocoverConfig()

    known_top = {"with_fix_version", "format"}

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "with_fix_version" in section:
        val = section["with_fix_version"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"with_fix_version must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="with_fix_version",
            )
        config.with_fix_version = val

    if "format" in section:
        val = section["format"]
        if not isinstance(val, str) or val.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"format must be one of {', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=config_path,
                option="format",
            )
        config.format = val.lower()

    return config
