"""Unit tests for Number: validity, formatting and area-code decomposition."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from globalphone.data import Database, load_plans
from globalphone.numbering import (
    Number,
    Territory,
    ValidFormatMatch,
    area_code,
    is_valid,
    local_number,
    match_valid_formats,
)


# ---------------------------------------------------------------------------
# Scenario: NANP number without a national-prefix formatting rule
# ---------------------------------------------------------------------------


class TestUnitedStatesNumber:
    @pytest.fixture
    def number(self, us: Territory) -> Number:
        return us.parse_national_string("+1 650-253-0000")

    def test_national_format(self, number: Number) -> None:
        assert number.national_format == "650-253-0000"

    def test_international_format(self, number: Number) -> None:
        assert number.international_format == "+1 650-253-0000"

    def test_international_string(self, number: Number) -> None:
        assert number.international_string == "+16502530000"
        assert str(number) == "+16502530000"

    def test_area_code_and_local_number(self, number: Number) -> None:
        assert area_code(number) == "650"
        assert local_number(number) == "253-0000"

    def test_valid_via_format_fallback(self, number: Number) -> None:
        assert match_valid_formats(number.territory, number.national_string) is ValidFormatMatch.ABSENT
        assert is_valid(number) is True

    def test_possible_but_not_national_is_invalid(self, us: Territory) -> None:
        number = us.parse_national_string("253-0000")
        assert number.is_valid is False
        assert number.national_format == "253-0000"

    def test_format_without_international_template(self, us: Territory) -> None:
        number = us.parse_national_string("253-0000")
        assert number.international_format == "+1 2530000"

    def test_pass_throughs(self, number: Number) -> None:
        assert number.country_code == "1"
        assert number.national_prefix == "1"
        assert number.region is number.territory.region


# ---------------------------------------------------------------------------
# National-prefix formatting rules
# ---------------------------------------------------------------------------


class TestPrefixFormattedNumbers:
    def test_region_rule_reattaches_prefix(self, gb: Territory) -> None:
        number = gb.parse_national_string("020 7946 0000")
        assert number.national_string == "2079460000"
        assert number.national_format == "020 7946 0000"
        assert number.international_format == "+44 20 7946 0000"
        assert number.international_string == "+442079460000"

    def test_area_code_includes_prefix(self, gb: Territory) -> None:
        number = gb.parse_national_string("020 7946 0000")
        assert number.area_code == "020"
        assert number.local_number == "7946 0000"

    def test_format_level_rule(self, gb: Territory) -> None:
        number = gb.parse_national_string("07700 900123")
        assert number.national_format == "07700 900123"
        assert number.area_code == "07700"
        assert number.local_number == "900123"

    def test_territory_rule_with_transformed_mobile(self, ar: Territory) -> None:
        number = ar.parse_national_string("011 15 2345-6789")
        assert number.national_format == "011 15-2345-6789"
        assert number.international_format == "+54 9 11 2345-6789"
        assert number.area_code == "011"
        assert number.local_number == "15-2345-6789"

    def test_territory_rule_with_landline(self, ar: Territory) -> None:
        number = ar.parse_national_string("011 2345-6789")
        assert number.national_string == "1123456789"
        assert number.national_format == "011 2345-6789"
        assert number.is_valid is True


# ---------------------------------------------------------------------------
# Validity against labelled valid formats
# ---------------------------------------------------------------------------


class TestValidity:
    def test_matching_valid_format(self, gb: Territory) -> None:
        number = gb.parse_national_string("020 7946 0000")
        assert match_valid_formats(gb, number.national_string) is ValidFormatMatch.MATCHED
        assert number.is_valid is True
        assert number.types == ("fixedLine",)

    def test_mobile_label(self, gb: Territory) -> None:
        assert gb.parse_national_string("07700 900123").types == ("mobile",)

    def test_national_but_unlisted_is_invalid(self, gb: Territory) -> None:
        number = gb.parse_national_string("0512 345 6789")
        assert match_valid_formats(gb, number.national_string) is ValidFormatMatch.UNMATCHED
        assert number.is_valid is False
        assert number.national_format == "0512 345 6789"

    def test_possible_pattern_is_accepted_structure(self) -> None:
        # seven digits: possible, not national, but listed as fixed line below
        records = [
            {
                "countryCode": "44",
                "territories": [
                    {
                        "name": "GG",
                        "possibleNumber": r"\d{7}",
                        "nationalNumber": r"\d{10}",
                        "possibleFormats": {"fixedLine": r"1\d{6}"},
                    }
                ],
            }
        ]
        territory = load_plans(records)[0].territories[0]
        assert Number(territory, "1234567").is_valid is True

    def test_empty_valid_formats_fall_back(self, zz: Territory) -> None:
        assert zz.valid_number_formats == ()
        number = zz.parse_national_string("1234 5678")
        assert match_valid_formats(zz, number.national_string) is ValidFormatMatch.ABSENT
        assert number.is_valid is True

    def test_fallback_requires_national_pattern(self, zz: Territory) -> None:
        assert zz.parse_national_string("123456").is_valid is False

    def test_fallback_requires_a_format(self) -> None:
        db = Database.load(
            [{"countryCode": "7", "territories": [["RU", r"\d{10}", r"\d{10}"]]}]
        )
        number = db.territory("RU").parse_national_string("4951234567")
        assert number.territory.valid_number_formats is None
        assert number.is_valid is False

    def test_never_raises_without_formats(self) -> None:
        db = Database.load([{"countryCode": "7", "territories": [["RU", r"\d+", r"\d+"]]}])
        number = Number(db.territory("RU"), "")
        assert number.is_valid is False
        assert number.types == ()


# ---------------------------------------------------------------------------
# Fallbacks when nothing matches
# ---------------------------------------------------------------------------


class TestUnformatted:
    def test_no_format_keeps_raw_strings(self, zz: Territory) -> None:
        number = zz.parse_national_string("123456")
        assert number.format is None
        assert number.national_format == "123456"
        assert number.international_format == "+888 123456"
        assert number.area_code is None
        assert number.local_number == "123456"

    def test_first_group_as_area_code(self, zz: Territory) -> None:
        number = zz.parse_national_string("1234 5678")
        assert number.area_code == "1234"
        assert number.local_number == "5678"


# ---------------------------------------------------------------------------
# Value semantics and caching
# ---------------------------------------------------------------------------


class TestNumberValue:
    def test_equality(self, gb: Territory) -> None:
        a = gb.parse_national_string("020 7946 0000")
        b = gb.parse_national_string("+44 20 7946 0000")
        assert a == b
        assert hash(a) == hash(b)
        assert a != gb.parse_national_string("020 7946 0001")

    def test_repr(self, gb: Territory) -> None:
        number = Number(gb, "2079460000")
        assert repr(number) == "Number(territory='GB', national_string='2079460000')"

    def test_is_frozen(self, gb: Territory) -> None:
        number = Number(gb, "2079460000")
        with pytest.raises((AttributeError, TypeError)):
            number.national_string = "1"  # type: ignore[misc]

    def test_derived_values_are_cached(self, gb: Territory) -> None:
        number = Number(gb, "2079460000")
        first = number.national_format
        assert number.national_format is first
        assert "national_format" in number._cache

    def test_concurrent_first_access_agrees(self, gb: Territory) -> None:
        number = Number(gb, "2079460000")
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: number.international_format, range(32)))
        assert set(results) == {"+44 20 7946 0000"}
