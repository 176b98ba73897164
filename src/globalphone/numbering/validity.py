"""Validity classification of national strings."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from globalphone.numbering.format import Format, FormatContext

if TYPE_CHECKING:
    from globalphone.numbering.territory import Territory


class ValidFormatMatch(enum.Enum):
    """Outcome of checking a national string against a territory's valid formats."""

    MATCHED = "matched"
    UNMATCHED = "unmatched"
    ABSENT = "absent"


def match_valid_formats(territory: Territory, national_string: str) -> ValidFormatMatch:
    """Classify *national_string* against the territory's labelled valid formats.

    A territory without entries yields ``ABSENT``; nothing can be said
    about the dialing class then.
    """
    formats = territory.valid_number_formats
    if not formats:
        return ValidFormatMatch.ABSENT
    if any(pattern.match(national_string) for _, pattern in formats):
        return ValidFormatMatch.MATCHED
    return ValidFormatMatch.UNMATCHED


def matching_labels(territory: Territory, national_string: str) -> tuple[str, ...]:
    """Labels of every valid format entry matching *national_string*, in order."""
    return tuple(
        label
        for label, pattern in territory.valid_number_formats or ()
        if pattern.match(national_string)
    )


def is_valid_national_string(
    territory: Territory,
    national_string: str,
    fmt: Format | None,
) -> bool:
    national = territory.national_pattern.match(national_string) is not None
    state = match_valid_formats(territory, national_string)
    if state is ValidFormatMatch.ABSENT:
        return (
            fmt is not None
            and fmt.apply(national_string, FormatContext.NATIONAL) is not None
            and national
        )
    structural = national or territory.possible_pattern.match(national_string) is not None
    return structural and state is ValidFormatMatch.MATCHED


__all__ = ["ValidFormatMatch", "is_valid_national_string", "match_valid_formats", "matching_labels"]
