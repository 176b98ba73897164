"""Unit tests for Format rules and format selection."""

from __future__ import annotations

from globalphone.data import load_format
from globalphone.numbering import Format, FormatContext, find_format


def _fmt(pattern: str, rule: str = "$1 $2", **extra: str) -> Format:
    return load_format({"pattern": pattern, "format": rule, **extra})


# ---------------------------------------------------------------------------
# Format.match / apply
# ---------------------------------------------------------------------------


class TestFormatMatch:
    def test_pattern_must_match_whole_string(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{4})")
        assert fmt.match("2530000") is True
        assert fmt.match("25300001") is False

    def test_leading_digits_checked_by_default(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{4})", leadingDigits="9")
        assert fmt.match("2530000") is False
        assert fmt.match("2530000", match_leading_digits=False) is True

    def test_leading_digits_only_anchor_at_start(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{4})", leadingDigits="25")
        assert fmt.match("2530000") is True


class TestFormatApply:
    def test_national_template(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{3})(\d{4})", "$1-$2-$3")
        assert fmt.apply("6502530000", FormatContext.NATIONAL) == "650-253-0000"

    def test_international_falls_back_to_national_template(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{4})", "$1-$2")
        assert fmt.apply("2530000", FormatContext.INTERNATIONAL) == "253-0000"

    def test_international_template_preferred(self) -> None:
        fmt = _fmt(r"9(\d{2})(\d{4})", "$1 15-$2", intlFormat="9 $1 $2")
        assert fmt.apply("9112345", FormatContext.INTERNATIONAL) == "9 11 2345"
        assert fmt.apply("9112345", FormatContext.NATIONAL) == "11 15-2345"

    def test_na_disables_international_form(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{4})", "$1-$2", intlFormat="NA")
        assert fmt.apply("2530000", FormatContext.INTERNATIONAL) is None
        assert fmt.apply("2530000", FormatContext.NATIONAL) == "253-0000"

    def test_missing_national_template(self) -> None:
        fmt = load_format({"pattern": r"(\d{3})(\d{4})"})
        assert fmt.apply("2530000", FormatContext.NATIONAL) is None

    def test_first_in_pattern(self) -> None:
        fmt = _fmt(r"(\d{3})(\d{3})(\d{4})", "$1-$2-$3")
        assert fmt.first_in_pattern("6502530000") == "650"

    def test_first_in_pattern_without_groups(self) -> None:
        fmt = _fmt(r"\d{7}", "$1")
        assert fmt.first_in_pattern("2530000") is None


# ---------------------------------------------------------------------------
# find_format
# ---------------------------------------------------------------------------


class TestFindFormat:
    def test_first_match_wins(self) -> None:
        a = _fmt(r"(\d{2})(\d{4})", "a")
        b = _fmt(r"(\d{3})(\d{3})", "b")
        assert find_format([a, b], "123456") is a
        assert find_format([b, a], "123456") is b

    def test_leading_digit_match_beats_earlier_loose_match(self) -> None:
        loose = _fmt(r"(\d{3})(\d{3})", "loose", leadingDigits="9")
        strict = _fmt(r"(\d{2})(\d{4})", "strict", leadingDigits="1")
        assert find_format([loose, strict], "123456") is strict

    def test_second_pass_ignores_leading_digits(self) -> None:
        only = _fmt(r"(\d{3})(\d{3})", "x", leadingDigits="9")
        assert find_format([only], "123456") is only

    def test_no_match(self) -> None:
        assert find_format([_fmt(r"(\d{3})(\d{3})")], "12") is None

    def test_empty_list(self) -> None:
        assert find_format([], "123456") is None
