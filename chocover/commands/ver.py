"""Ver command implementation for chocover.

Parses version strings with both supported grammars and shows what each
of them would be converted to: the Chocolatey version, the Semantic Version
derived from it, and the other way around. Grammars that reject the input
are shown as ``None``.

Typical usage::

    $ chocover ver 4.2.1-alpha54.2

    Checking 1 version...

           Raw Version : 4.2.1-alpha54.2

            Chocolatey : 4.2.1-alpha0054-0002
     SemVer from Choco : 4.2.1-alpha-54.2

                SemVer : 4.2.1-alpha54.2
     Choco from SemVer : 4.2.1-alpha0054-0002

    # Also show the fix version of every Chocolatey version
    $ chocover ver 2.1 --with-fix-version

    # Machine-readable JSON output
    $ chocover ver 1.0 2.0-beta --format json
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import click

from chocover.config import ChocoverConfig
from chocover.constants import OUTPUT_FORMATS
from chocover.context import ChocoverContext, pass_context
from chocover.core import ChocoVersion, parse_semver
from chocover.exceptions import ParseError
from chocover.utils import (
    get_logger,
    print_blank,
    print_info,
    print_pair,
)

logger = get_logger("commands.ver")

NONE_VALUE = "None"


@dataclass
class VersionReport:
    """Conversion results for a single raw version string.

    Every field except ``raw`` is ``None`` when the corresponding grammar
    rejected the input (or, for the fix fields, when no fix version was
    requested).
    """

    raw: str
    chocolatey: Optional[str] = None
    semver_from_choco: Optional[str] = None
    chocolatey_fix: Optional[str] = None
    semver: Optional[str] = None
    choco_from_semver: Optional[str] = None
    choco_from_semver_fix: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


def _fix_of(choco: ChocoVersion) -> Optional[str]:
    """Return the fix version of ``choco`` as a string, mutating it."""
    try:
        choco.add_fix()
    except ValueError as exc:
        logger.error("An error occurred while creating fix version: %s", exc)
        return None
    return str(choco)


def inspect_version(raw: str, *, with_fix_version: bool = False) -> VersionReport:
    """Run ``raw`` through both grammars and both converters.

    Args:
        raw: The raw version string.
        with_fix_version: Also compute the fix version of each Chocolatey
            version.

    Returns:
        A :class:`VersionReport` with the formatted results.
    """
    report = VersionReport(raw=raw)

    try:
        choco = ChocoVersion.parse(raw)
    except ParseError as exc:
        logger.debug("Not a Chocolatey version %r: %s", raw, exc)
    else:
        report.chocolatey = str(choco)
        # InternalAssemblyError propagates and aborts the whole command.
        report.semver_from_choco = str(choco.to_semver())
        if with_fix_version:
            report.chocolatey_fix = _fix_of(choco)

    try:
        semver = parse_semver(raw)
    except ParseError as exc:
        logger.debug("Not a semantic version %r: %s", raw, exc)
    else:
        report.semver = str(semver)
        converted = ChocoVersion.from_semver(semver)
        report.choco_from_semver = str(converted)
        if with_fix_version:
            report.choco_from_semver_fix = _fix_of(converted)

    return report


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--with-fix-version/--without-fix-version",
    default=None,
    help="Also display the fix version created for Chocolatey versions.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format.",
)
@pass_context
def ver(
    ctx: ChocoverContext,
    versions: Sequence[str],
    with_fix_version: Optional[bool],
    format: Optional[str],
) -> None:
    """Show how version strings convert between Chocolatey and SemVer.

    VERSIONS are the raw version strings to check; multiple values can be
    given.
    """
    config = ctx.config or ChocoverConfig()
    if with_fix_version is None:
        with_fix_version = config.with_fix_version
    output_format = (format or config.format).lower()

    logger.debug(
        "Checking %d %s", len(versions), "version" if len(versions) == 1 else "versions"
    )

    reports = [
        inspect_version(raw, with_fix_version=with_fix_version) for raw in versions
    ]

    if output_format == "json":
        _display_json(reports)
    else:
        _display_text(reports, with_fix_version=with_fix_version)


def _value(value: Optional[str]) -> str:
    return NONE_VALUE if value is None else value


def _display_text(reports: List[VersionReport], *, with_fix_version: bool) -> None:
    """Render reports as aligned ``name : value`` blocks."""
    noun = "version" if len(reports) == 1 else "versions"
    print_info(f"Checking {len(reports)} {noun}...")

    for report in reports:
        print_blank()
        print_pair("Raw Version", report.raw)
        print_blank()

        print_pair("Chocolatey", _value(report.chocolatey))
        print_pair("SemVer from Choco", _value(report.semver_from_choco))
        if with_fix_version and report.chocolatey_fix is not None:
            print_pair("Chocolatey Fix", report.chocolatey_fix)
        print_blank()

        print_pair("SemVer", _value(report.semver))
        print_pair("Choco from SemVer", _value(report.choco_from_semver))
        if with_fix_version and report.choco_from_semver_fix is not None:
            print_pair("Chocolatey Fix", report.choco_from_semver_fix)


def _display_json(reports: List[VersionReport]) -> None:
    """Render reports as a JSON array, one object per input."""
    data = [report.to_json() for report in reports]
    print(json.dumps(data, indent=2))
