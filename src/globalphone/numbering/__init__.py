"""Numbering engine — public re-export surface.

Modules:
  normalization.py — normalize, backreference templates
  format.py        — Format, find_format
  validity.py      — ValidFormatMatch, validity classification
  region.py        — Region
  territory.py     — Territory, strip_national_prefix, parse_national_string
  number.py        — Number
"""

from globalphone.numbering.format import Format, FormatContext, find_format
from globalphone.numbering.normalization import normalize
from globalphone.numbering.number import Number
from globalphone.numbering.region import Region
from globalphone.numbering.territory import (
    Territory,
    parse_national_string,
    strip_national_prefix,
)
from globalphone.numbering.validity import ValidFormatMatch, match_valid_formats


def is_valid(number: Number) -> bool:
    return number.is_valid


def area_code(number: Number) -> str | None:
    return number.area_code


def local_number(number: Number) -> str:
    return number.local_number


__all__ = [
    "Format",
    "FormatContext",
    "Number",
    "Region",
    "Territory",
    "ValidFormatMatch",
    "area_code",
    "find_format",
    "is_valid",
    "local_number",
    "match_valid_formats",
    "normalize",
    "parse_national_string",
    "strip_national_prefix",
]
