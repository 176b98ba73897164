"""Territory numbering plans, national-prefix stripping and the parse entry point."""

from __future__ import annotations

import dataclasses
import re

from globalphone.errors import NotPossibleError
from globalphone.numbering.format import Format
from globalphone.numbering.normalization import expand_template, normalize
from globalphone.numbering.number import Number
from globalphone.numbering.region import Region
from globalphone.observability import get_logger

logger = get_logger(__name__)

ValidFormats = tuple[tuple[str, re.Pattern[str]], ...]


@dataclasses.dataclass(frozen=True, eq=False)
class Territory:
    """A country or subdivision numbering plan bound to its :class:`Region`.

    Territories compare and hash by ``name`` only.

    ``valid_number_formats`` keeps ``None`` (never supplied) apart from an
    empty tuple; both leave dialing-class checks with nothing to match.
    """

    name: str
    region: Region = dataclasses.field(repr=False)
    possible_pattern: re.Pattern[str] = dataclasses.field(repr=False)
    national_pattern: re.Pattern[str] = dataclasses.field(repr=False)
    national_prefix_formatting_rule: str | None = dataclasses.field(default=None, repr=False)
    valid_number_formats: ValidFormats | None = dataclasses.field(default=None, repr=False)

    @property
    def country_code(self) -> str:
        return self.region.country_code

    @property
    def national_prefix(self) -> str | None:
        return self.region.national_prefix

    @property
    def formats(self) -> tuple[Format, ...]:
        return self.region.formats

    @property
    def formatting_rule(self) -> str | None:
        """This territory's national-prefix formatting rule, else the region's."""
        if self.national_prefix_formatting_rule is not None:
            return self.national_prefix_formatting_rule
        return self.region.national_prefix_formatting_rule

    def possible(self, string: str | None) -> bool:
        return self.possible_pattern.match(string or "") is not None

    def national_number(self, string: str | None) -> bool:
        return self.national_pattern.match(string or "") is not None

    def parse_national_string(self, raw: str | None) -> Number:
        return parse_national_string(self, raw)

    def to_national_number(self, raw: str | None) -> str:
        return strip_national_prefix(self, self.region.strip_country_code(normalize(raw)))

    def strip_national_prefix(self, string: str) -> str:
        return strip_national_prefix(self, string)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Territory):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


def strip_national_prefix(territory: Territory, string: str) -> str:
    """Remove the national prefix from a normalized string.

    The region's parsing pattern takes precedence over the literal prefix.
    Its match is replaced by the transform rule when the pattern's last
    group captured something, and deleted otherwise. Applying the rule to
    every match would also rewrite a bare trunk ``0`` (``"9$1"`` turns
    ``0 11 2345-6789`` into ``9 11 ...``); the libphonenumber-derived data
    only means the rule for captured carrier codes. The stripped form is
    kept only if it is a national number; otherwise *string* comes back
    untouched.
    """
    region = territory.region
    stripped: str | None = None
    parsing = region.national_prefix_for_parsing
    match = parsing.match(string) if parsing is not None else None
    if match is not None:
        rule = region.national_prefix_transform_rule
        captured = not match.re.groups or match.group(match.re.groups) is not None
        replacement = expand_template(rule, match) if rule and captured else ""
        stripped = replacement + string[match.end():]
    elif region.national_prefix and string.startswith(region.national_prefix):
        stripped = string[len(region.national_prefix):]

    if stripped is None:
        return string
    if territory.national_number(stripped):
        return stripped
    logger.debug("national_prefix_strip_rolled_back", territory=territory.name, candidate=string)
    return string


def parse_national_string(territory: Territory, raw: str | None) -> Number:
    """Normalize *raw*, strip its prefixes and build a :class:`Number`.

    Raises
    ------
    NotPossibleError
        When the result does not match the territory's possible pattern.
    """
    national_string = territory.to_national_number(raw)
    if territory.possible(national_string):
        return Number(territory, national_string)
    logger.debug("parse_rejected", territory=territory.name, candidate=national_string)
    raise NotPossibleError(territory.name, national_string)


__all__ = ["Territory", "ValidFormats", "parse_national_string", "strip_national_prefix"]
