"""Unit tests for chocover.core.chocolatey.

Test Coverage:
- Parsing and formatting, including the pre-release padding rules
- Parse errors (empty, non-numeric start, too many parts, overflow)
- Constructors and the patch/build invariant
- Ordering and the equality-ignores-pre-release behaviour
- Conversion to and from Semantic Versions, including narrowing cases
- Fix versions and the date threshold
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import pytest

from chocover.constants import EQUALITY_IGNORES_PRERELEASE, FIX_VERSION_THRESHOLD
from chocover.core.chocolatey import ChocoVersion
from chocover.core.identifiers import AlphaNumeric, Identifier, Numeric
from chocover.core.semantic import parse_semver
from chocover.exceptions import (
    ChocoverError,
    DoesNotStartWithDigitError,
    EmptyInputError,
    InternalAssemblyError,
    NumericOverflowError,
    ParseError,
    TooManyNumericPartsError,
)


def _today_stamp() -> int:
    return int(date.today().strftime("%Y%m%d"))


@pytest.mark.unit
class TestFormatting:
    """Tests for rendering ChocoVersion as a string."""

    def test_outputs_major_and_minor(self) -> None:
        assert str(ChocoVersion.new(1, 2)) == "1.2"

    def test_outputs_major_minor_and_patch(self) -> None:
        version = ChocoVersion.new(1, 6)
        version.set_patch(10)

        assert str(version) == "1.6.10"

    def test_outputs_all_four_parts(self) -> None:
        version = ChocoVersion.new(0, 8)
        version.set_patch(3)
        version.set_build(99)

        assert str(version) == "0.8.3.99"

    def test_numeric_after_label_is_padded_without_separator(self) -> None:
        version = ChocoVersion.with_patch(1, 0, 0).with_prerelease(
            [AlphaNumeric("alpha"), Numeric(54)]
        )

        assert str(version) == "1.0.0-alpha0054"

    def test_numeric_after_numeric_gets_dash_and_padding(self) -> None:
        version = ChocoVersion.with_patch(4, 2, 1).with_prerelease(
            [AlphaNumeric("alpha"), Numeric(54), Numeric(2)]
        )

        assert str(version) == "4.2.1-alpha0054-0002"

    def test_consecutive_labels_are_dash_separated(self) -> None:
        version = ChocoVersion.new(5, 0).with_prerelease(
            [AlphaNumeric("beta"), AlphaNumeric("ceta")]
        )

        assert str(version) == "5.0-beta-ceta"

    def test_leading_numeric_gets_dash(self) -> None:
        version = ChocoVersion.new(1, 0).with_prerelease([Numeric(7)])

        assert str(version) == "1.0-0007"

    def test_repr_contains_formatted_version(self) -> None:
        assert repr(ChocoVersion.parse("1.2-beta5")) == "ChocoVersion('1.2-beta0005')"


@pytest.mark.unit
class TestParse:
    """Tests for ChocoVersion.parse."""

    def test_parses_three_part_version(self) -> None:
        version = ChocoVersion.parse("4.5.1")

        assert version.major == 4
        assert version.minor == 5
        assert version.patch == 1
        assert version.build is None
        assert version.pre_release == []
        assert str(version) == "4.5.1"

    def test_parses_four_part_version(self) -> None:
        version = ChocoVersion.parse("3.5.0.2342")

        assert version.patch == 0
        assert version.build == 2342

    def test_single_number_becomes_major_minor(self) -> None:
        version = ChocoVersion.parse("3")

        assert version.major == 3
        assert version.minor == 0
        assert version.patch is None
        assert str(version) == "3.0"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3", "3.0"),
            ("1.0", "1.0"),
            ("0.2.65", "0.2.65"),
            ("3.5.0.2342", "3.5.0.2342"),
            ("3.3-alpha001", "3.3-alpha0001"),
            ("3.2-alpha.10", "3.2-alpha0010"),
            ("3.3.5-beta-11", "3.3.5-beta0011"),
            ("3.1.1+55", "3.1.1"),
            ("4.0.0.2-beta.5", "4.0.0.2-beta0005"),
            ("0.1.0-55", "0.1.0-unstable0055"),
            ("4.2.1-alpha54.2", "4.2.1-alpha0054-0002"),
            ("6.1.0-55-alpha", "6.1.0-alpha0055"),
            ("5.2.1.6-beta-0005", "5.2.1.6-beta0005"),
            ("1.5.2.6-alpha.22+some-metadata", "1.5.2.6-alpha0022"),
            ("1.0-alpha-0002-rc0005", "1.0-alpha0002-rc0005"),
        ],
    )
    def test_parse_and_format(self, text: str, expected: str) -> None:
        assert str(ChocoVersion.parse(text)) == expected

    def test_alpha_with_trailing_numbers(self) -> None:
        version = ChocoVersion.parse("4.2.1-alpha54.2")

        assert version.pre_release == [AlphaNumeric("alpha"), Numeric(54), Numeric(2)]

    def test_later_label_replaces_unstable_marker(self) -> None:
        version = ChocoVersion.parse("6.1.0-55-alpha")

        assert version.pre_release == [AlphaNumeric("alpha"), Numeric(55)]
        assert str(version) == "6.1.0-alpha0055"

    def test_bare_number_gets_unstable_marker(self) -> None:
        version = ChocoVersion.parse("0.1.0-55")

        assert version.pre_release == [AlphaNumeric("unstable"), Numeric(55)]

    def test_build_metadata_is_discarded(self) -> None:
        version = ChocoVersion.parse("3.1.1+55")

        assert version.pre_release == []
        assert version.build is None

    def test_largest_values_fit(self) -> None:
        version = ChocoVersion.parse("255.255.255.4294967295")

        assert str(version) == "255.255.255.4294967295"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("4.5.1", "4.5.1"),
            ("3.2", "3.2"),
            ("1.2.3.4-beta-0005", "1.2.3.4-beta0005"),
            ("1.0-alpha0002-rc0005", "1.0-alpha0002-rc0005"),
            ("2.1.0-unstable0050", "2.1.0-unstable0050"),
        ],
    )
    def test_formatted_output_parses_back_to_itself(
        self, text: str, expected: str
    ) -> None:
        version = ChocoVersion.parse(text)
        reparsed = ChocoVersion.parse(str(version))

        assert str(reparsed) == expected
        assert reparsed == version
        assert reparsed.pre_release == version.pre_release

    @pytest.mark.parametrize(
        "patch, build",
        [(None, None), (3, None), (3, 7), (None, 20210309), (255, 4294967295)],
    )
    @pytest.mark.parametrize(
        "pre_release",
        [
            [],
            [AlphaNumeric("alpha")],
            [AlphaNumeric("beta"), Numeric(5)],
            [AlphaNumeric("alpha"), Numeric(54), Numeric(2)],
            [AlphaNumeric("alpha"), Numeric(2), AlphaNumeric("rc"), Numeric(5)],
            [AlphaNumeric("beta"), AlphaNumeric("ceta")],
            [AlphaNumeric("unstable"), Numeric(50)],
            [AlphaNumeric("rc"), Numeric(12345), AlphaNumeric("hotfix")],
            [AlphaNumeric("pre"), Numeric(0), Numeric(0), Numeric(9999)],
        ],
    )
    def test_constructed_versions_parse_back_to_themselves(
        self,
        patch: Optional[int],
        build: Optional[int],
        pre_release: List[Identifier],
    ) -> None:
        version = ChocoVersion(1, 2, patch, build, pre_release)

        reparsed = ChocoVersion.parse(str(version))

        assert reparsed == version
        assert reparsed.patch == version.patch
        assert reparsed.build == version.build
        assert reparsed.pre_release == version.pre_release
        assert str(reparsed) == str(version)


@pytest.mark.unit
class TestParseErrors:
    """Tests for the errors raised by ChocoVersion.parse."""

    def test_empty_input(self) -> None:
        with pytest.raises(EmptyInputError):
            ChocoVersion.parse("")

    @pytest.mark.parametrize("text", ["invalid", "no-version", ".5", "v1.0"])
    def test_does_not_start_with_digit(self, text: str) -> None:
        with pytest.raises(DoesNotStartWithDigitError) as exc_info:
            ChocoVersion.parse(text)

        assert exc_info.value.value == text

    @pytest.mark.parametrize("text", ["2.0.2.5.1", "6.2.2.2.1", "6.2.1.1.3.4"])
    def test_too_many_numeric_parts(self, text: str) -> None:
        with pytest.raises(TooManyNumericPartsError):
            ChocoVersion.parse(text)

    @pytest.mark.parametrize(
        "text, part",
        [
            ("256", "major"),
            ("1.256", "minor"),
            ("1.2.300", "patch"),
            ("1.2.3.4294967296", "build"),
            ("1..2", "minor"),
        ],
    )
    def test_numeric_overflow(self, text: str, part: str) -> None:
        with pytest.raises(NumericOverflowError) as exc_info:
            ChocoVersion.parse(text)

        assert exc_info.value.part == part

    def test_errors_are_parse_errors(self) -> None:
        with pytest.raises(ParseError):
            ChocoVersion.parse("invalid")


@pytest.mark.unit
class TestConstruction:
    """Tests for constructors and setters."""

    def test_set_build_also_sets_default_patch(self) -> None:
        version = ChocoVersion.new(1, 1)
        version.set_build(5)

        assert version.patch == 0
        assert str(version) == "1.1.0.5"

    def test_with_build_sets_full_version(self) -> None:
        assert str(ChocoVersion.with_build(5, 1, 1, 3)) == "5.1.1.3"

    def test_with_patch(self) -> None:
        assert str(ChocoVersion.with_patch(5, 1, 1)) == "5.1.1"

    def test_constructor_build_without_patch_defaults_patch(self) -> None:
        assert str(ChocoVersion(2, 0, build=7)) == "2.0.0.7"

    def test_out_of_range_part_raises(self) -> None:
        with pytest.raises(NumericOverflowError):
            ChocoVersion(256, 0)

    def test_out_of_range_build_raises(self) -> None:
        version = ChocoVersion.new(1, 0)

        with pytest.raises(NumericOverflowError):
            version.set_build(2**32)

    def test_invalid_identifier_type_raises(self) -> None:
        with pytest.raises(TypeError):
            ChocoVersion.new(1, 0).set_prerelease(["alpha"])  # type: ignore[list-item]

    def test_pre_release_property_is_a_copy(self) -> None:
        version = ChocoVersion.parse("1.0-beta")
        version.pre_release.append(Numeric(5))

        assert version.pre_release == [AlphaNumeric("beta")]


@pytest.mark.unit
class TestComparison:
    """Tests for ordering and equality."""

    def test_sorts_versions(self) -> None:
        versions = [
            ChocoVersion.parse(text)
            for text in [
                "1.2.0-55",
                "1.2",
                "0.4.2.1",
                "6.2.0",
                "1.0.0-rc",
                "1.0.0-alpha",
                "5.0-beta.56",
                "5.0-beta.55",
            ]
        ]

        result = [str(version) for version in sorted(versions)]

        assert result == [
            "0.4.2.1",
            "1.0.0-alpha",
            "1.0.0-rc",
            "1.2.0-unstable0055",
            "1.2",
            "5.0-beta0055",
            "5.0-beta0056",
            "6.2.0",
        ]

    def test_missing_parts_compare_as_zero(self) -> None:
        assert ChocoVersion.parse("1.2") == ChocoVersion.parse("1.2.0.0")
        assert not ChocoVersion.parse("1.2") < ChocoVersion.parse("1.2.0")

    def test_build_participates_in_ordering(self) -> None:
        assert ChocoVersion.parse("1.2.0.1") < ChocoVersion.parse("1.2.0.2")
        assert ChocoVersion.parse("1.2.1") > ChocoVersion.parse("1.2.0.9")

    def test_prerelease_ranks_below_release(self) -> None:
        assert ChocoVersion.parse("1.0.0-alpha") < ChocoVersion.parse("1.0.0")
        assert ChocoVersion.parse("1.0.0") >= ChocoVersion.parse("1.0.0-alpha")

    def test_numeric_identifiers_rank_below_labels(self) -> None:
        numeric = ChocoVersion.new(1, 0).with_prerelease([Numeric(99)])
        label = ChocoVersion.new(1, 0).with_prerelease([AlphaNumeric("alpha")])

        assert numeric < label

    def test_shorter_prerelease_ranks_lower(self) -> None:
        assert ChocoVersion.parse("1.0-beta") < ChocoVersion.parse("1.0-beta.1")

    def test_equality_ignores_prerelease(self) -> None:
        assert EQUALITY_IGNORES_PRERELEASE is True
        assert ChocoVersion.parse("1.0.0-alpha") == ChocoVersion.parse("1.0.0")
        assert ChocoVersion.parse("1.0.0-alpha") == ChocoVersion.parse("1.0.0-rc")

    def test_equality_with_prerelease_when_disabled(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            "chocover.core.chocolatey.EQUALITY_IGNORES_PRERELEASE", False
        )

        assert ChocoVersion.parse("1.0.0-alpha") != ChocoVersion.parse("1.0.0")
        assert ChocoVersion.parse("1.0.0-alpha") == ChocoVersion.parse("1.0.0-alpha")

    def test_not_equal_to_other_types(self) -> None:
        assert ChocoVersion.parse("1.0") != "1.0"

    def test_is_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(ChocoVersion.parse("1.0"))


@pytest.mark.unit
class TestToSemver:
    """Tests for ChocoVersion.to_semver."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("4.5.1", "4.5.1"),
            ("3.2", "3.2.0"),
            ("5.2-alpha.5", "5.2.0-alpha.5"),
            ("3.0.0-beta-0050", "3.0.0-beta.50"),
            ("1.2.2.5-unstable-0050", "1.2.2-unstable.50+5"),
            ("5.1-beta0995", "5.1.0-beta.995"),
            ("1.0-alpha-0002-rc0005", "1.0.0-alpha-rc-2.5"),
            ("5.0-beta-ceta", "5.0.0-beta-ceta"),
            ("2.1.0.5-alpha0055", "2.1.0-alpha.55+5"),
            ("4.2.1-alpha54.2", "4.2.1-alpha-54.2"),
            ("1.2.0.5", "1.2.0+5"),
        ],
    )
    def test_converts_to_semver(self, text: str, expected: str) -> None:
        assert str(ChocoVersion.parse(text).to_semver()) == expected

    def test_bare_numbers_use_build_metadata_delimiters(self) -> None:
        version = ChocoVersion.new(1, 0).with_prerelease([Numeric(5)])

        assert str(version.to_semver()) == "1.0.0+5"

    def test_bare_numbers_and_build_swap_delimiters(self) -> None:
        version = ChocoVersion.with_build(1, 0, 0, 3).with_prerelease([Numeric(5)])

        assert str(version.to_semver()) == "1.0.0+5-3"

    def test_unconvertible_label_is_an_internal_error(self) -> None:
        version = ChocoVersion.parse("1.0-beta_1")

        with pytest.raises(InternalAssemblyError) as exc_info:
            version.to_semver()

        assert exc_info.value.assembled == "1.0.0-beta_.1"
        assert not isinstance(exc_info.value, ChocoverError)


@pytest.mark.unit
class TestFromSemver:
    """Tests for ChocoVersion.from_semver."""

    def test_creates_plain_version(self) -> None:
        version = ChocoVersion.from_semver(parse_semver("5.3.1"))

        assert version == ChocoVersion.with_patch(5, 3, 1)
        assert version.pre_release == []

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.255.3-alpha+446", [AlphaNumeric("alpha")]),
            ("0.3.0-unstable-001", [AlphaNumeric("unstable"), Numeric(1)]),
            ("5.1.1-alpha.5", [AlphaNumeric("alpha"), Numeric(5)]),
            ("1.2.3-beta50", [AlphaNumeric("beta"), Numeric(50)]),
            ("3.0.0-666", [AlphaNumeric("unstable"), Numeric(666)]),
            ("2.0.0-55beta", [AlphaNumeric("beta"), Numeric(55)]),
            (
                "4.2.1-alpha54.2",
                [AlphaNumeric("alpha"), Numeric(54), Numeric(2)],
            ),
            ("6.1.0-55-alpha", [AlphaNumeric("alpha"), Numeric(55)]),
        ],
    )
    def test_creates_prerelease(self, text: str, expected: List[Identifier]) -> None:
        version = ChocoVersion.from_semver(parse_semver(text))

        assert version.pre_release == expected

    def test_build_metadata_is_dropped(self) -> None:
        version = ChocoVersion.from_semver(parse_semver("1.0.5-beta.55+99"))

        assert str(version) == "1.0.5-beta0055"
        assert version.build is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("255.255.255", "255.255.255"),
            ("256.0.0", "255.0.0"),
            ("300.256.1000", "255.255.255"),
        ],
    )
    def test_large_parts_are_clamped(self, text: str, expected: str) -> None:
        assert str(ChocoVersion.from_semver(parse_semver(text))) == expected

    def test_multiple_numbers_do_not_round_trip(self) -> None:
        """Only the last pre-release number survives as a dot identifier."""
        semver = parse_semver("1.0.0-alpha.1.2")

        choco = ChocoVersion.from_semver(semver)

        assert str(choco) == "1.0.0-alpha0001-0002"
        assert str(choco.to_semver()) == "1.0.0-alpha-1.2"

    def test_build_metadata_does_not_round_trip(self) -> None:
        choco = ChocoVersion.from_semver(parse_semver("1.0.0+5.6"))

        assert str(choco.to_semver()) == "1.0.0"


@pytest.mark.unit
class TestFixVersion:
    """Tests for add_fix and is_fix_version."""

    def test_creates_fix_version(self) -> None:
        version = ChocoVersion.new(2, 1)

        version.add_fix()

        assert version.build == _today_stamp()
        assert str(version) == f"2.1.0.{date.today().strftime('%Y%m%d')}"

    def test_uses_given_date(self) -> None:
        version = ChocoVersion.new(4, 2)

        version.add_fix(date(2021, 3, 9))

        assert str(version) == "4.2.0.20210309"

    def test_replaces_small_build_number(self) -> None:
        version = ChocoVersion.new(0, 2)
        version.set_build(5)

        version.add_fix(date(2021, 3, 9))

        assert str(version) == "0.2.0.20210309"

    def test_stamps_just_below_threshold(self) -> None:
        version = ChocoVersion.with_build(1, 0, 0, FIX_VERSION_THRESHOLD - 1)

        version.add_fix(date(2021, 3, 9))

        assert version.build == 20210309

    def test_leaves_threshold_build_unchanged(self) -> None:
        version = ChocoVersion.with_build(1, 0, 0, 20070101)

        version.add_fix(date(2021, 3, 9))

        assert version.build == 20070101

    def test_does_not_restamp_existing_date(self) -> None:
        version = ChocoVersion.with_build(3, 3, 0, 20200826)

        version.add_fix(date(2021, 3, 9))

        assert str(version) == "3.3.0.20200826"

    def test_adding_twice_is_stable(self) -> None:
        version = ChocoVersion.parse("1.0-beta")

        version.add_fix(date(2021, 3, 9))
        version.add_fix(date(2022, 1, 1))

        assert str(version) == "1.0.0.20210309-beta"

    @pytest.mark.parametrize(
        "build, expected",
        [(None, False), (5, False), (20070100, False), (20070101, True)],
    )
    def test_is_fix_version(self, build, expected: bool) -> None:
        version = ChocoVersion(1, 0, build=build)

        assert version.is_fix_version() is expected
